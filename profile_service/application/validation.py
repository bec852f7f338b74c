"""Input validation for profile operations.

Each function returns the validated value or raises a ProfileValidationError
subclass carrying the client-facing message.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from profile_service.application.dtos.profile_dto import DATE_PATTERN, ProfileBody
from profile_service.domain.errors import InvalidDateError, InvalidProfileIdError
from profile_service.domain.services.date_converter import convert_dmy_to_iso

_PROFILE_ID = re.compile(r"[+-]?[0-9]+")
_DATE_SHAPE = re.compile(DATE_PATTERN)


@dataclass(frozen=True)
class ProfileFields:
    first_name: str
    last_name: str
    date_of_birth: str  # canonical timestamp


def parse_profile_id(raw: str) -> int:
    """Parse a path id. Surrounding whitespace is ignored, anything but an integer is rejected."""
    value = raw.strip()
    if not _PROFILE_ID.fullmatch(value):
        raise InvalidProfileIdError(raw)
    try:
        return int(value)
    except ValueError as exc:
        # beyond the interpreter's integer string length limit
        raise InvalidProfileIdError(raw) from exc


def validate_profile_body(body: ProfileBody) -> ProfileFields:
    """Check the date shape and range and convert it to a canonical timestamp."""
    # shape first, then range
    if not _DATE_SHAPE.fullmatch(body.date_of_birth):
        raise InvalidDateError(body.date_of_birth)
    iso_date = convert_dmy_to_iso(body.date_of_birth)
    if iso_date is None:
        raise InvalidDateError(body.date_of_birth)
    return ProfileFields(
        first_name=body.first_name,
        last_name=body.last_name,
        date_of_birth=iso_date,
    )
