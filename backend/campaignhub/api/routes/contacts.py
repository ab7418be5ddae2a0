# campaignhub/api/routes/contacts.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campaignhub.core.deps import Identity, get_current_identity, get_db
from campaignhub.core.errors import NotFound
from campaignhub.core.validation import validate_contact
from campaignhub.crud.contacts import contacts as crud_contacts
from campaignhub.schemas.base import MessageOut
from campaignhub.schemas.contacts import ContactCreate, ContactOut, ContactUpdate

router = APIRouter(prefix="/contacts", tags=["contacts"])

NOT_FOUND = "Contact not found"


# GET /api/contacts
@router.get("", response_model=List[ContactOut])
def list_contacts(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return crud_contacts.list_for_owner(db, identity.user_id)


# GET /api/contacts/{id}
@router.get("/{id}", response_model=ContactOut)
def get_contact(id: str, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    obj = crud_contacts.get(db, id, identity.user_id)
    if obj is None:
        raise NotFound(NOT_FOUND)
    return obj


# POST /api/contacts
@router.post("", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(
    payload: ContactCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    validate_contact(payload.model_dump(by_alias=True))
    return crud_contacts.create(db, identity.user_id, payload.model_dump())


# PUT /api/contacts/{id} (partial update)
@router.put("/{id}", response_model=ContactOut)
def update_contact(
    id: str,
    payload: ContactUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    obj = crud_contacts.update(db, id, identity.user_id, payload.model_dump(exclude_unset=True))
    if obj is None:
        raise NotFound(NOT_FOUND)
    return obj


# DELETE /api/contacts/{id}
@router.delete("/{id}", response_model=MessageOut)
def delete_contact(id: str, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    if not crud_contacts.delete(db, id, identity.user_id):
        raise NotFound(NOT_FOUND)
    return {"message": "Contact deleted successfully"}
