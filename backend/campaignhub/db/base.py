from sqlalchemy.engine import Engine
from campaignhub.models.base import Base


def _import_models() -> None:
    """Import all models so their metadata is registered on Base."""
    import campaignhub.models.user              # noqa: F401
    import campaignhub.models.contact           # noqa: F401
    import campaignhub.models.campaign          # noqa: F401


def create_all(engine: Engine) -> None:
    """Create all tables for the registered models (SYNC)."""
    _import_models()
    Base.metadata.create_all(bind=engine)
