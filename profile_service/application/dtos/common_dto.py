"""Common DTOs for API responses and error handling."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str = Field(..., description="Error message describing what went wrong", examples=["Profile not found"])


class ValidationErrorDetail(BaseModel):
    """Validation error detail model."""
    field: str = Field(..., description="Location of the error in the request", examples=["body.firstName"])
    message: str = Field(..., description="Error message")
    type: str = Field(..., description="Error type")


class ValidationErrorResponse(BaseModel):
    """Response for request bodies or parameters rejected by schema validation."""
    error: str = Field(..., description="Summary of the problem", examples=["Invalid request body"])
    details: list[ValidationErrorDetail] = Field(default_factory=list, description="List of validation errors")


class RootResponse(BaseModel):
    """Root endpoint response model."""
    status: str = Field(..., description="API status", examples=["ok"])
    service: str = Field(..., description="Service name", examples=["user-profile-service"])
    version: str = Field(..., description="API version", examples=["1.0.0"])


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Health status", examples=["healthy"])


class ReadinessResponse(BaseModel):
    """Readiness probe response model."""
    status: str = Field(..., description="Readiness status", examples=["ready"])
    storage: str = Field(..., description="Active storage backend", examples=["postgres"])
