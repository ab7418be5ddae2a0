# backend/campaignhub/crud/campaigns.py
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from campaignhub.crud.base import OwnedCRUD
from campaignhub.models.base import _now
from campaignhub.models.campaign import STATUS_SENT, Campaign, CampaignContact
from campaignhub.models.contact import Contact

logger = logging.getLogger(__name__)


class CampaignCRUD(OwnedCRUD[Campaign]):
    fields = ("name", "subject", "message", "status", "scheduled_at")
    required = ("name", "subject", "message", "status")

    def prepare_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        out = super().prepare_changes(changes)
        # Moving to 'sent' always stamps sent_at; other statuses never clear it.
        if out.get("status") == STATUS_SENT:
            out["sent_at"] = _now()
        return out

    def delete_dependents(self, db: Session, id: str, owner_id: str) -> None:
        owned = select(Campaign.id).where(Campaign.id == id, Campaign.user_id == owner_id)
        db.execute(
            delete(CampaignContact)
            .where(CampaignContact.campaign_id.in_(owned))
            .execution_options(synchronize_session=False)
        )

    def verify_ownership(self, db: Session, id: str, owner_id: str) -> bool:
        return self.exists(db, id, owner_id)

    # ---------- campaign <-> contact ----------

    def get_with_contacts(self, db: Session, id: str, owner_id: str) -> Optional[Tuple[Campaign, List[Row]]]:
        """Campaign plus its assigned contacts in the order they were added."""
        campaign = self.get(db, id, owner_id)
        if campaign is None:
            return None
        rows = db.execute(
            select(
                Contact.id,
                Contact.first_name,
                Contact.last_name,
                Contact.email,
                CampaignContact.added_at,
            )
            .join(CampaignContact, CampaignContact.contact_id == Contact.id)
            .where(CampaignContact.campaign_id == campaign.id)
            .order_by(CampaignContact.id)
        ).all()
        return campaign, rows

    def list_contacts(self, db: Session, campaign_id: str, owner_id: str) -> Optional[List[Row]]:
        """
        Contacts assigned to a campaign, most recently added first.

        None means the campaign is missing or not owned; an empty list means
        it exists with nothing assigned.
        """
        if not self.exists(db, campaign_id, owner_id):
            return None
        return db.execute(
            select(
                Contact.id,
                Contact.first_name,
                Contact.last_name,
                Contact.email,
                Contact.phone,
                Contact.company,
                CampaignContact.added_at,
            )
            .join(CampaignContact, CampaignContact.contact_id == Contact.id)
            .where(CampaignContact.campaign_id == campaign_id)
            .order_by(CampaignContact.added_at.desc(), CampaignContact.id.desc())
        ).all()

    def add_contacts(self, db: Session, campaign_id: str, contact_ids: Iterable[str]) -> int:
        """
        Assign contacts to a campaign; pairs already present are skipped.

        Callers must have checked ownership of the campaign and of every
        contact. Returns the number of ids submitted after de-duplication.
        """
        ids = list(dict.fromkeys(contact_ids))
        if not ids:
            return 0
        now = _now()
        values = [{"campaign_id": campaign_id, "contact_id": cid, "added_at": now} for cid in ids]

        dialect = db.get_bind().dialect.name
        if dialect in ("sqlite", "postgresql"):
            if dialect == "sqlite":
                from sqlalchemy.dialects.sqlite import insert as dialect_insert
            else:
                from sqlalchemy.dialects.postgresql import insert as dialect_insert
            stmt = dialect_insert(CampaignContact).values(values).on_conflict_do_nothing(
                index_elements=["campaign_id", "contact_id"]
            )
            db.execute(stmt)
        else:
            existing = set(db.execute(
                select(CampaignContact.contact_id).where(
                    CampaignContact.campaign_id == campaign_id,
                    CampaignContact.contact_id.in_(ids),
                )
            ).scalars().all())
            missing = [v for v in values if v["contact_id"] not in existing]
            if missing:
                db.execute(insert(CampaignContact), missing)
        db.commit()
        logger.info("[campaigns] add_contacts: campaign_id=%s submitted=%s", campaign_id, len(ids))
        return len(ids)

    def remove_contact(self, db: Session, campaign_id: str, contact_id: str) -> bool:
        result = db.execute(
            delete(CampaignContact)
            .where(
                CampaignContact.campaign_id == campaign_id,
                CampaignContact.contact_id == contact_id,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            return False
        db.commit()
        return True


campaigns = CampaignCRUD(Campaign)
