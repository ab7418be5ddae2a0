import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campaignhub.api.routes.auth import router as auth_router
from campaignhub.api.routes.campaigns import router as campaigns_router
from campaignhub.api.routes.contacts import router as contacts_router
from campaignhub.api.routes.health import router as health_router

from campaignhub.core.config import get_settings
from campaignhub.core.errors import register_exception_handlers
from campaignhub.core.logging_config import configure_logging, install_request_logging
from campaignhub.db.base import create_all
from campaignhub.db.session import engine

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME, version="1.0", redirect_slashes=False)

allowed_origins = settings.cors_origins_list

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)
install_request_logging(app)
register_exception_handlers(app)

app.include_router(health_router, prefix="/api", tags=["health"])
app.include_router(auth_router, prefix="/api", tags=["auth"])
app.include_router(contacts_router, prefix="/api", tags=["contacts"])
app.include_router(campaigns_router, prefix="/api", tags=["campaigns"])


@app.on_event("startup")
def _startup_db() -> None:
    create_all(engine)
    logger.info("[db] using %s", engine.url.render_as_string(hide_password=True))
    logger.info("[cors] allow_origins = %s", allowed_origins)
