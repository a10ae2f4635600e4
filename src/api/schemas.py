"""Pydantic request and response models shared across the API layer."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# === Password Validation Schemas ===

class ValidatePasswordRequest(BaseModel):
    """Request model for password validation."""
    model_config = ConfigDict(json_schema_extra={"examples": [{"password": "AbTp9!fok"}]})

    password: StrictStr = Field(..., description="Password to validate")


class ValidatePasswordResponse(BaseModel):
    """Response model for password validation; errors are omitted when valid."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"isValid": True},
                {"isValid": False, "errors": ["password must not contain repeated characters"]},
            ]
        }
    )

    is_valid: bool = Field(..., alias="isValid", description="Whether every rule passed")
    errors: Optional[List[str]] = Field(
        None,
        description="Violation messages in rule order"
    )


class PasswordRuleDescription(BaseModel):
    """Description of one configured rule."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Rule identifier")


class PasswordRequirementsResponse(BaseModel):
    """Active password policy."""
    min_length: int = Field(..., description="Minimum password length")
    length_unit: str = Field(..., description="Unit the minimum length is measured in")
    special_chars: str = Field(..., description="Accepted special characters")
    reject_empty: bool = Field(..., description="Whether empty passwords are rejected before validation")
    max_request_length: int = Field(..., description="Longest password the endpoint accepts")
    rules: List[PasswordRuleDescription] = Field(..., description="Rules in evaluation order")


# === Health Schemas ===

class HealthResponse(BaseModel):
    """Liveness payload."""
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="Current server time (ISO 8601)")
    uptime_seconds: float = Field(..., description="Seconds since process start")
    started_at: str = Field(..., description="Process start time (ISO 8601)")


# === Error Response Schemas ===

class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str = Field(..., description="Error type/code")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[list] = Field(None, description="Additional error details")
    error_id: Optional[str] = Field(None, description="Correlation identifier for logs")
    timestamp: Optional[str] = Field(None, description="Time the error occurred")
