# backend/campaignhub/crud/users.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campaignhub.core.errors import Conflict
from campaignhub.models.user import User


def exists_by_email(db: Session, email: str) -> bool:
    return db.execute(select(User.id).where(User.email == email)).first() is not None


def get_by_email(db: Session, email: str) -> Optional[User]:
    """Full row, password hash included. Never serialize this directly."""
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def get_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def create(
    db: Session,
    *,
    email: str,
    password_hash: str,
    first_name: str,
    last_name: str,
) -> User:
    row = User(
        email=email,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
    )
    db.add(row)
    try:
        db.commit()
    except IntegrityError as e:
        # unique(email) is the authoritative guard against concurrent registrations
        db.rollback()
        raise Conflict() from e
    db.refresh(row)
    return row
