# backend/campaignhub/crud/base.py
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from campaignhub.models.base import Base, _now

ModelT = TypeVar("ModelT", bound=Base)


class OwnedCRUD(Generic[ModelT]):
    """
    Find/create/update/delete for rows owned by a single user.

    Every statement filters on (id, user_id): a row owned by someone else is
    indistinguishable from a missing one. Update and delete are single
    statements, so a row deleted concurrently simply reports "not found".
    """

    # Columns that may be written through create/update.
    fields: tuple[str, ...] = ()
    # Subset of `fields` that cannot hold NULL; an explicit None leaves them alone.
    required: tuple[str, ...] = ()

    def __init__(self, model: Type[ModelT]):
        self.model = model

    def _owned(self, id: str, owner_id: str):
        return (self.model.id == id, self.model.user_id == owner_id)

    def list_for_owner(self, db: Session, owner_id: str) -> List[ModelT]:
        return db.execute(
            select(self.model)
            .where(self.model.user_id == owner_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        ).scalars().all()

    def get(self, db: Session, id: str, owner_id: str) -> Optional[ModelT]:
        return db.execute(
            select(self.model).where(*self._owned(id, owner_id))
        ).scalar_one_or_none()

    def exists(self, db: Session, id: str, owner_id: str) -> bool:
        return db.execute(
            select(self.model.id).where(*self._owned(id, owner_id))
        ).first() is not None

    def create(self, db: Session, owner_id: str, values: Dict[str, Any]) -> ModelT:
        data = {k: v for k, v in values.items() if k in self.fields and v is not None}
        row = self.model(user_id=owner_id, **data)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row

    def prepare_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        out = {}
        for k, v in changes.items():
            if k not in self.fields:
                continue
            if v is None and k in self.required:
                continue
            out[k] = v
        out["updated_at"] = _now()
        return out

    def update(self, db: Session, id: str, owner_id: str, changes: Dict[str, Any]) -> Optional[ModelT]:
        """Apply only the keys present in `changes`; None if no owned row matches."""
        result = db.execute(
            update(self.model)
            .where(*self._owned(id, owner_id))
            .values(**self.prepare_changes(changes))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            return None
        db.commit()
        return self.get(db, id, owner_id)

    def delete_dependents(self, db: Session, id: str, owner_id: str) -> None:
        pass

    def delete(self, db: Session, id: str, owner_id: str) -> bool:
        self.delete_dependents(db, id, owner_id)
        result = db.execute(
            delete(self.model)
            .where(*self._owned(id, owner_id))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            return False
        db.commit()
        return True
