# campaignhub/api/routes/auth.py
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campaignhub.core.config import Settings, get_settings
from campaignhub.core.deps import Identity, get_current_identity, get_db
from campaignhub.core.errors import Conflict, InvalidCredentials, NotFound
from campaignhub.core.security import create_access_token, hash_password, verify_password
from campaignhub.core.validation import validate_login, validate_registration
from campaignhub.crud import users as crud_users
from campaignhub.models.user import User
from campaignhub.schemas.auth import AuthResponse, LoginIn, ProfileOut, RegisterIn, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue(user: User, settings: Settings) -> AuthResponse:
    token = create_access_token(
        user.id,
        user.email,
        secret=settings.JWT_SECRET,
        expires_delta=timedelta(days=settings.JWT_EXPIRES_DAYS),
        algorithm=settings.JWT_ALGORITHM,
    )
    return AuthResponse(token=token, user=UserOut.model_validate(user))


# POST /api/auth/register
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    validate_registration(payload.model_dump(by_alias=True))

    if crud_users.exists_by_email(db, payload.email):
        raise Conflict()

    user = crud_users.create(
        db,
        email=payload.email,
        password_hash=hash_password(payload.password, rounds=settings.BCRYPT_ROUNDS),
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    logger.info("[auth] register: user_id=%s", user.id)
    return _issue(user, settings)


# POST /api/auth/login
@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    validate_login(payload.model_dump(by_alias=True))

    user = crud_users.get_by_email(db, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.info("[auth] login: rejected")
        raise InvalidCredentials()
    return _issue(user, settings)


# GET /api/auth/me
@router.get("/me", response_model=ProfileOut)
def me(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    user = crud_users.get_by_id(db, identity.user_id)
    if user is None:
        raise NotFound("User not found")
    return user
