from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from profile_service.domain.entities.profile import ProfileEntity

DATE_PATTERN = r"^[0-9]{2}/[0-9]{2}/[0-9]{4}$"


class ProfileBody(BaseModel):
    """Request body for creating or replacing a profile."""

    first_name: str = Field(..., alias="firstName", min_length=1, description="First name", examples=["Jane"])
    last_name: str = Field(..., alias="lastName", min_length=1, description="Last name", examples=["Doe"])
    date_of_birth: str = Field(
        ...,
        alias="dateOfBirth",
        pattern=DATE_PATTERN,
        description="Date of birth as dd/mm/yyyy",
        examples=["01/01/1990"],
    )


class ProfileResponse(BaseModel):
    """A stored profile."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Identifier assigned by storage", examples=[1])
    first_name: str = Field(..., alias="firstName", description="First name", examples=["Jane"])
    last_name: str = Field(..., alias="lastName", description="Last name", examples=["Doe"])
    date_of_birth: str = Field(
        ...,
        alias="dateOfBirth",
        description="Date of birth as a UTC timestamp",
        examples=["1990-01-01T00:00:00.000Z"],
    )

    @classmethod
    def from_entity(cls, entity: ProfileEntity) -> ProfileResponse:
        return cls(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            date_of_birth=entity.date_of_birth,
        )
