from datetime import datetime
from typing import Optional

from campaignhub.schemas.base import CamelIn, CamelOut


# ---------- OUT MODELS ----------
class ContactOut(CamelOut):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ---------- IN MODELS ----------
class ContactCreate(CamelIn):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None


# PUT accepts any subset; fields left out are not touched
class ContactUpdate(ContactCreate):
    pass
