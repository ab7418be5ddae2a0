# backend/campaignhub/models/campaign.py
from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint

from campaignhub.models.base import Base, _now, _uuid
from campaignhub.models.types import UTCDateTime

# Known statuses; the column itself accepts any string.
STATUS_DRAFT = "draft"
STATUS_SCHEDULED = "scheduled"
STATUS_SENT = "sent"


class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    name = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default=STATUS_DRAFT)

    scheduled_at = Column(UTCDateTime, nullable=True)
    sent_at = Column(UTCDateTime, nullable=True)  # stamped when status becomes 'sent'

    created_at = Column(UTCDateTime, default=_now, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=_now, nullable=False)


class CampaignContact(Base):
    __tablename__ = "campaign_contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    campaign_id = Column(String, ForeignKey("campaigns.id", ondelete="CASCADE"), index=True, nullable=False)
    contact_id = Column(String, ForeignKey("contacts.id", ondelete="CASCADE"), index=True, nullable=False)
    added_at = Column(UTCDateTime, default=_now, nullable=False)

    __table_args__ = (UniqueConstraint("campaign_id", "contact_id", name="uq_campaign_contacts_pair"),)
