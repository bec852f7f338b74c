from __future__ import annotations

import logging
from dataclasses import dataclass

from profile_service.application.dtos.profile_dto import ProfileBody
from profile_service.application.validation import parse_profile_id, validate_profile_body
from profile_service.domain.entities.profile import ProfileEntity
from profile_service.domain.errors import ProfileNotFoundError, StorageError
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class UpdateProfileUseCase:
    """
    Replace first name, last name and date of birth of an existing profile.

    Any storage failure is reported as ProfileNotFoundError, so this operation
    never yields a 500. The failure is still logged with its cause.
    """

    profile_repo: ProfileRepository

    def execute(self, raw_id: str, body: ProfileBody) -> ProfileEntity:
        """
        Raises:
            InvalidProfileIdError: If the id is not an integer
            InvalidDateError: If the date is malformed or out of range
            ProfileNotFoundError: If the id does not exist or the backend fails
        """
        profile_id = parse_profile_id(raw_id)
        fields = validate_profile_body(body)
        try:
            updated = self.profile_repo.update_by_id(
                profile_id,
                first_name=fields.first_name,
                last_name=fields.last_name,
                date_of_birth=fields.date_of_birth,
            )
        except StorageError as exc:
            # TODO: split real backend failures from missing rows once clients stop relying on the 404
            logger.warning(
                f"Update of profile {profile_id} failed, reporting not found: {exc}",
                extra={"profile_id": profile_id, "error_code": exc.code},
            )
            raise ProfileNotFoundError(profile_id) from exc
        if updated is None:
            raise ProfileNotFoundError(profile_id)
        return updated
