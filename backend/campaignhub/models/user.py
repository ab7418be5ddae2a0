# backend/campaignhub/models/user.py
from sqlalchemy import Column, String

from campaignhub.models.base import Base, _now, _uuid
from campaignhub.models.types import UTCDateTime


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_uuid)
    # compared exactly as stored; no case folding
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    created_at = Column(UTCDateTime, default=_now, nullable=False)
    updated_at = Column(UTCDateTime, default=_now, nullable=False)
