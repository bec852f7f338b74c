from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from profile_service.application.dtos.common_dto import RootResponse
from profile_service.infrastructure.api.error_handlers import register_error_handlers
from profile_service.infrastructure.api.middlewares import add_default_middlewares
from profile_service.infrastructure.api.routes.health_routes import router as health_router
from profile_service.infrastructure.api.routes.profile_routes import router as profile_router
from profile_service.infrastructure.config import Settings
from profile_service.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
    build_profile_repository,
)
from profile_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"User Profile API started with {app.state.profile_repo.backend} storage")
    yield
    logger.info("User Profile API shutting down")
    app.state.profile_repo.close()


def create_app(
    settings: Settings | None = None,
    profile_repo: ProfileRepository | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(
        title="User Profile API",
        version="1.0.0",
        description="""
        ## User Profile API

        CRUD service for user profiles (first name, last name, date of birth).

        ### Dates
        Dates of birth are sent as `dd/mm/yyyy` and returned as UTC timestamps
        such as `1990-01-01T00:00:00.000Z`.

        ### Error Responses
        Errors are returned as `{"error": "<message>"}`:
        - **400 Bad Request**: Invalid profile ID, date or request body
        - **404 Not Found**: Profile does not exist
        - **500 Internal Server Error**: Storage failure
        """,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.profile_repo = profile_repo or build_profile_repository(settings)

    add_default_middlewares(app, settings.env)
    register_error_handlers(app)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the User Profile API",
    )
    def root():
        """Get API root information."""
        return {"status": "ok", "service": "user-profile-service", "version": app.version}

    app.include_router(health_router)
    app.include_router(profile_router)
    return app
