"""Password hashing and bearer token helpers."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from campaignhub.core.errors import InvalidToken


# =============================================================================
# Passwords
# =============================================================================

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise on longer input
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


# =============================================================================
# Access Token (JWT in Authorization header)
# =============================================================================

def create_access_token(
    user_id: str,
    email: str,
    *,
    secret: str,
    expires_delta: timedelta = timedelta(days=7),
    algorithm: str = "HS256",
) -> str:
    """
    Create a signed access token binding the caller's identity.

    The token carries only {sub, email} plus issue/expiry times; nothing
    is stored server side, so it stays valid until it expires.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> dict:
    """
    Verify signature and expiry of an access token.

    Raises:
        InvalidToken: bad signature, malformed token, expired, or missing claims
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as e:
        raise InvalidToken() from e
    if not payload.get("email"):
        raise InvalidToken()
    return payload
