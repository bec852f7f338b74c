from __future__ import annotations

from dataclasses import dataclass

from profile_service.application.dtos.profile_dto import ProfileBody
from profile_service.application.validation import validate_profile_body
from profile_service.domain.entities.profile import ProfileEntity
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository


@dataclass
class CreateProfileUseCase:
    profile_repo: ProfileRepository

    def execute(self, body: ProfileBody) -> ProfileEntity:
        """
        Store a new profile with its date of birth converted to a timestamp.

        Raises:
            InvalidDateError: If the date is malformed or out of range
            StorageError: If the backend fails
        """
        fields = validate_profile_body(body)
        return self.profile_repo.insert(
            first_name=fields.first_name,
            last_name=fields.last_name,
            date_of_birth=fields.date_of_birth,
        )
