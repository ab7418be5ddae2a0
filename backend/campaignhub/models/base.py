# backend/campaignhub/models/base.py
from datetime import datetime, timezone
import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)
