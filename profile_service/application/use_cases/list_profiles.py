from __future__ import annotations

from dataclasses import dataclass

from profile_service.domain.entities.profile import ProfileEntity
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository


@dataclass
class ListProfilesUseCase:
    profile_repo: ProfileRepository

    def execute(self) -> list[ProfileEntity]:
        """Return every stored profile. Storage failures propagate as StorageError."""
        return self.profile_repo.find_all()
