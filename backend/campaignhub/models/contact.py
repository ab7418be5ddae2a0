# backend/campaignhub/models/contact.py
from sqlalchemy import Column, ForeignKey, String, Text

from campaignhub.models.base import Base, _now, _uuid
from campaignhub.models.types import UTCDateTime


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(UTCDateTime, default=_now, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=_now, nullable=False)
