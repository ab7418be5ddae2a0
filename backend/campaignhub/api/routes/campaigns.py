# campaignhub/api/routes/campaigns.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campaignhub.core.deps import Identity, get_current_identity, get_db
from campaignhub.core.errors import BadRequest, NotFound
from campaignhub.core.validation import validate_campaign
from campaignhub.crud.campaigns import campaigns as crud_campaigns
from campaignhub.crud.contacts import contacts as crud_contacts
from campaignhub.schemas.base import MessageOut
from campaignhub.schemas.campaigns import (
    CampaignContactOut,
    CampaignContactsAdd,
    CampaignCreate,
    CampaignDetailOut,
    CampaignMemberOut,
    CampaignOut,
    CampaignUpdate,
)

router = APIRouter(prefix="/campaigns", tags=["campaigns"])

NOT_FOUND = "Campaign not found"


# GET /api/campaigns
@router.get("", response_model=List[CampaignOut])
def list_campaigns(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return crud_campaigns.list_for_owner(db, identity.user_id)


# GET /api/campaigns/{id} (with assigned contacts)
@router.get("/{id}", response_model=CampaignDetailOut)
def get_campaign(id: str, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    found = crud_campaigns.get_with_contacts(db, id, identity.user_id)
    if found is None:
        raise NotFound(NOT_FOUND)
    campaign, members = found
    detail = CampaignDetailOut.model_validate(campaign)
    detail.contacts = [CampaignMemberOut.model_validate(m) for m in members]
    return detail


# POST /api/campaigns
@router.post("", response_model=CampaignOut, status_code=status.HTTP_201_CREATED)
def create_campaign(
    payload: CampaignCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    validate_campaign(payload.model_dump(by_alias=True))
    return crud_campaigns.create(db, identity.user_id, payload.model_dump())


# PUT /api/campaigns/{id} (partial update; status 'sent' stamps sentAt)
@router.put("/{id}", response_model=CampaignOut)
def update_campaign(
    id: str,
    payload: CampaignUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    obj = crud_campaigns.update(db, id, identity.user_id, payload.model_dump(exclude_unset=True))
    if obj is None:
        raise NotFound(NOT_FOUND)
    return obj


# DELETE /api/campaigns/{id}
@router.delete("/{id}", response_model=MessageOut)
def delete_campaign(id: str, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    if not crud_campaigns.delete(db, id, identity.user_id):
        raise NotFound(NOT_FOUND)
    return {"message": "Campaign deleted successfully"}


# GET /api/campaigns/{id}/contacts
@router.get("/{id}/contacts", response_model=List[CampaignContactOut])
def list_campaign_contacts(
    id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    rows = crud_campaigns.list_contacts(db, id, identity.user_id)
    if rows is None:
        raise NotFound(NOT_FOUND)
    return rows


# POST /api/campaigns/{id}/contacts
@router.post("/{id}/contacts", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def add_campaign_contacts(
    id: str,
    payload: CampaignContactsAdd,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    if not payload.contact_ids:
        raise BadRequest("contactIds array is required")

    # All checks first; nothing is written unless every one passes.
    if not crud_campaigns.verify_ownership(db, id, identity.user_id):
        raise NotFound(NOT_FOUND)
    if not crud_contacts.verify_ownership(db, payload.contact_ids, identity.user_id):
        raise BadRequest("One or more contacts not found")

    crud_campaigns.add_contacts(db, id, payload.contact_ids)
    return {"message": "Contacts added to campaign successfully"}


# DELETE /api/campaigns/{id}/contacts/{contact_id}
@router.delete("/{id}/contacts/{contact_id}", response_model=MessageOut)
def remove_campaign_contact(
    id: str,
    contact_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    if not crud_campaigns.verify_ownership(db, id, identity.user_id):
        raise NotFound(NOT_FOUND)
    if not crud_campaigns.remove_contact(db, id, contact_id):
        raise NotFound("Contact not assigned to this campaign")
    return {"message": "Contact removed from campaign successfully"}
