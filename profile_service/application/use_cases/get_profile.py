from __future__ import annotations

from dataclasses import dataclass

from profile_service.application.validation import parse_profile_id
from profile_service.domain.entities.profile import ProfileEntity
from profile_service.domain.errors import ProfileNotFoundError
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository


@dataclass
class GetProfileUseCase:
    profile_repo: ProfileRepository

    def execute(self, raw_id: str) -> ProfileEntity:
        """
        Fetch a single profile by its path id.

        Raises:
            InvalidProfileIdError: If the id is not an integer
            ProfileNotFoundError: If no profile has the id
            StorageError: If the backend fails
        """
        profile_id = parse_profile_id(raw_id)
        profile = self.profile_repo.find_by_id(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile
