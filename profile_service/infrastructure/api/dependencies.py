from __future__ import annotations

from fastapi import Request

from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository


def get_profile_repo(request: Request) -> ProfileRepository:
    """Return the repository built for this application in create_app()."""
    return request.app.state.profile_repo
