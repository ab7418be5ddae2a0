# backend/campaignhub/crud/contacts.py
from typing import Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from campaignhub.crud.base import OwnedCRUD
from campaignhub.models.campaign import CampaignContact
from campaignhub.models.contact import Contact


class ContactCRUD(OwnedCRUD[Contact]):
    fields = ("first_name", "last_name", "email", "phone", "company", "notes")
    required = ("first_name", "last_name", "email")

    def delete_dependents(self, db: Session, id: str, owner_id: str) -> None:
        owned = select(Contact.id).where(Contact.id == id, Contact.user_id == owner_id)
        db.execute(
            delete(CampaignContact)
            .where(CampaignContact.contact_id.in_(owned))
            .execution_options(synchronize_session=False)
        )

    def verify_ownership(self, db: Session, ids: Iterable[str], owner_id: str) -> bool:
        """True iff every id is a contact owned by `owner_id`. Empty input is False."""
        wanted = set(ids)
        if not wanted:
            return False
        found = db.execute(
            select(func.count(Contact.id)).where(Contact.id.in_(wanted), Contact.user_id == owner_id)
        ).scalar_one()
        return found == len(wanted)


contacts = ContactCRUD(Contact)
