from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.projectbase.api.context import EndUserAuthenticator, SessionCookieAuthenticator
from src.projectbase.api.middlewares import setup_middlewares
from src.projectbase.api.procedures.router import procedure_router
from src.projectbase.api.v1.router import api_router
from src.projectbase.core.config import get_settings
from src.projectbase.core.db import Datastore
from src.projectbase.core.exceptions import setup_exception_handlers
from src.projectbase.core.logging import get_logger, setup_logging
from src.projectbase.services import UserService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(
        f"Starting {settings.app_name}",
        datastore_available=app.state.datastore.available,
    )

    yield

    logger.info("Closing connections...")
    await app.state.datastore.dispose()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "system", "description": "Procedure liveness"},
    {"name": "auth", "description": "End-user session"},
    {"name": "admin", "description": "Operator login and profile"},
    {"name": "projects", "description": "Project management for the owning admin"},
    {"name": "apiKeys", "description": "API key issuance and revocation"},
    {"name": "data", "description": "Dynamic JSON documents scoped to a project"},
    {"name": "project", "description": "Project metadata for API-key holders"},
    {"name": "health", "description": "REST health check"},
]


def create_app(
    datastore: Datastore | None = None,
    authenticator: EndUserAuthenticator | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        datastore: Handle to use instead of one built from DATABASE_URL.
        authenticator: End-user authenticator; defaults to the session cookie one.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Projects, API keys and schemaless JSON data behind one admin panel",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.state.datastore = datastore if datastore is not None else Datastore.from_settings(settings)
    app.state.end_user_authenticator = authenticator or SessionCookieAuthenticator(
        UserService(app.state.datastore, settings), settings
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(procedure_router)
    app.include_router(api_router)

    return app


app = create_app()
