from __future__ import annotations

from fastapi import APIRouter, Depends, status

from profile_service.application.dtos.common_dto import ErrorResponse, ValidationErrorResponse
from profile_service.application.dtos.profile_dto import ProfileBody, ProfileResponse
from profile_service.application.use_cases.create_profile import CreateProfileUseCase
from profile_service.application.use_cases.get_profile import GetProfileUseCase
from profile_service.application.use_cases.list_profiles import ListProfilesUseCase
from profile_service.application.use_cases.update_profile import UpdateProfileUseCase
from profile_service.infrastructure.api.dependencies import get_profile_repo
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository

router = APIRouter(
    prefix="/profiles",
    tags=["Profiles"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal Server Error - Storage failure"},
    },
)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="Get all profiles",
    description="Return every stored profile. The list is empty when nothing has been stored yet.",
    response_description="List of profiles",
)
def list_profiles(profiles: ProfileRepository = Depends(get_profile_repo)):
    uc = ListProfilesUseCase(profile_repo=profiles)
    return [ProfileResponse.from_entity(p) for p in uc.execute()]


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile by ID",
    description="The ID must be a whole number such as `42`. Values like `1.0` or `1e3` are rejected with 400.",
    response_description="The requested profile",
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Profile ID is not a number"},
        404: {"model": ErrorResponse, "description": "Not Found - No profile with this ID"},
    },
)
def get_profile(profile_id: str, profiles: ProfileRepository = Depends(get_profile_repo)):
    uc = GetProfileUseCase(profile_repo=profiles)
    return ProfileResponse.from_entity(uc.execute(profile_id))


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new profile",
    description="""
    Create a profile from a first name, a last name and a date of birth.

    **Request Requirements:**
    - `firstName` and `lastName` must be non-empty strings
    - `dateOfBirth` must be formatted as dd/mm/yyyy, with a day between 1 and 31,
      a month between 1 and 12 and a year from 1900

    The date of birth is stored and returned as a UTC timestamp.
    """,
    response_description="The created profile",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Bad Request - Invalid date or body"},
    },
)
def create_profile(body: ProfileBody, profiles: ProfileRepository = Depends(get_profile_repo)):
    uc = CreateProfileUseCase(profile_repo=profiles)
    return ProfileResponse.from_entity(uc.execute(body))


@router.put(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Update a profile",
    description="""
    Replace the first name, last name and date of birth of an existing profile.

    The ID must be a whole number such as `42`. Values like `1.0` or `1e3` are rejected with 400.

    **Note**: any storage failure during the update is reported as 404.
    """,
    response_description="The updated profile",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Bad Request - Invalid ID, date or body"},
        404: {"model": ErrorResponse, "description": "Not Found - No profile with this ID"},
    },
)
def update_profile(
    profile_id: str,
    body: ProfileBody,
    profiles: ProfileRepository = Depends(get_profile_repo),
):
    uc = UpdateProfileUseCase(profile_repo=profiles)
    return ProfileResponse.from_entity(uc.execute(profile_id, body))
