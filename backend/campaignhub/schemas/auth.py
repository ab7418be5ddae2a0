from datetime import datetime
from typing import Optional

from campaignhub.schemas.base import CamelIn, CamelOut


# ---------- IN MODELS ----------
class RegisterIn(CamelIn):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginIn(CamelIn):
    email: Optional[str] = None
    password: Optional[str] = None


# ---------- OUT MODELS ----------
class UserOut(CamelOut):
    id: str
    email: str
    first_name: str
    last_name: str


class ProfileOut(UserOut):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(CamelOut):
    token: str
    user: UserOut
