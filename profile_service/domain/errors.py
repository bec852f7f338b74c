"""Error hierarchy for the profile service.

Every error carries a client-facing message, a machine code and the HTTP
status it maps to. ``to_response()`` produces the ``{"error": ...}`` body
returned by the API.
"""
from __future__ import annotations

INVALID_PROFILE_ID = "Invalid profile ID"
INVALID_DATE_FORMAT = "Invalid date format. Expected dd/mm/yyyy."
PROFILE_NOT_FOUND = "Profile not found"
INTERNAL_SERVER_ERROR = "Internal server error"


class ProfileServiceError(Exception):
    """Base exception for all profile service errors."""

    def __init__(self, message: str, code: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict[str, str]:
        return {"error": self.message}


class ProfileValidationError(ProfileServiceError):
    """Malformed client input."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.field = field


class InvalidProfileIdError(ProfileValidationError):
    def __init__(self, raw_id: str) -> None:
        super().__init__(INVALID_PROFILE_ID, "id")
        self.raw_id = raw_id


class InvalidDateError(ProfileValidationError):
    def __init__(self, value: str | None = None) -> None:
        super().__init__(INVALID_DATE_FORMAT, "dateOfBirth")
        self.value = value


class ProfileNotFoundError(ProfileServiceError):
    def __init__(self, profile_id: int) -> None:
        super().__init__(PROFILE_NOT_FOUND, "PROFILE_NOT_FOUND", 404)
        self.profile_id = profile_id


class StorageError(ProfileServiceError):
    """Storage backend failure. The cause is kept for logs, never sent to clients."""

    def __init__(self, operation: str, cause: Exception | str) -> None:
        super().__init__(INTERNAL_SERVER_ERROR, "STORAGE_ERROR", 500)
        self.operation = operation
        self.cause = cause

    def __str__(self) -> str:
        return f"Storage {self.operation} failed: {self.cause}"
