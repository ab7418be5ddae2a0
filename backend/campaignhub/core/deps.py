"""FastAPI dependencies for authentication and database access."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from campaignhub.core.config import Settings, get_settings
from campaignhub.core.errors import Unauthenticated
from campaignhub.core.security import decode_access_token
from campaignhub.db.session import get_db  # noqa: F401  (re-exported for routes)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """The authenticated caller. Every owner-scoped query binds to `user_id`."""
    user_id: str
    email: str


def get_current_identity(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """
    Resolve the caller from `Authorization: Bearer <token>`.

    Raises:
        Unauthenticated: header missing or not using the Bearer scheme
        InvalidToken: signature check failed or the token expired
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthenticated()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise Unauthenticated()

    payload = decode_access_token(token, secret=settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return Identity(user_id=payload["sub"], email=payload["email"])
