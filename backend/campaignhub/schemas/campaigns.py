from datetime import datetime
from typing import List, Optional

from campaignhub.schemas.base import CamelIn, CamelOut


# ---------- OUT MODELS ----------
class CampaignOut(CamelOut):
    id: str
    name: str
    subject: str
    message: str
    status: str
    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CampaignMemberOut(CamelOut):
    """Contact as embedded in a campaign detail."""
    id: str
    first_name: str
    last_name: str
    email: str
    added_at: datetime


class CampaignContactOut(CampaignMemberOut):
    phone: Optional[str] = None
    company: Optional[str] = None


class CampaignDetailOut(CampaignOut):
    contacts: List[CampaignMemberOut] = []


# ---------- IN MODELS ----------
class CampaignCreate(CamelIn):
    name: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    scheduled_at: Optional[datetime] = None


# sentAt is not accepted from clients; it is stamped server side
class CampaignUpdate(CampaignCreate):
    pass


class CampaignContactsAdd(CamelIn):
    contact_ids: Optional[List[str]] = None
