"""Password validation routes."""

import logging

from fastapi import APIRouter, Depends, status

from src.api.schemas import (
    ValidatePasswordRequest,
    ValidatePasswordResponse,
    PasswordRequirementsResponse,
    ErrorResponse
)
from src.config.settings import PasswordPolicySettings, get_password_policy_settings
from src.lib.metrics import record_validation
from src.middleware.error_handler import validation_error_response
from src.validators.password import PasswordValidator, get_password_validator

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(tags=["password"])


@router.post(
    "/validate-password",
    response_model=ValidatePasswordResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="Validate a password",
)
def validate_password_endpoint(
    request: ValidatePasswordRequest,
    validator: PasswordValidator = Depends(get_password_validator),
    policy: PasswordPolicySettings = Depends(get_password_policy_settings),
):
    """
    Check a password against every configured rule.

    All violations are reported together, in rule order. Declared as a plain
    function so FastAPI runs the CPU-bound scan in its threadpool.
    """
    if policy.PASSWORD_REJECT_EMPTY and request.password == "":
        return validation_error_response("Password field is required")

    if len(request.password) > policy.PASSWORD_MAX_REQUEST_LENGTH:
        return validation_error_response(
            f"Password must be no more than {policy.PASSWORD_MAX_REQUEST_LENGTH} characters long"
        )

    result = validator.validate(request.password)
    record_validation(result.is_valid, result.errors)

    logger.debug(
        "Password validated",
        extra={"is_valid": result.is_valid, "violation_count": len(result.errors)}
    )

    return ValidatePasswordResponse(
        is_valid=result.is_valid,
        errors=list(result.errors) if result.errors else None
    )


@router.get(
    "/password-requirements",
    response_model=PasswordRequirementsResponse,
    summary="Describe the active password policy",
)
def get_password_requirements(
    validator: PasswordValidator = Depends(get_password_validator),
    policy: PasswordPolicySettings = Depends(get_password_policy_settings),
):
    """Return the configured rules and transport policy for client-side hints."""
    return PasswordRequirementsResponse(
        min_length=policy.PASSWORD_MIN_LENGTH,
        length_unit=policy.PASSWORD_LENGTH_UNIT,
        special_chars=policy.PASSWORD_SPECIAL_CHARS,
        reject_empty=policy.PASSWORD_REJECT_EMPTY,
        max_request_length=policy.PASSWORD_MAX_REQUEST_LENGTH,
        rules=validator.get_requirements()
    )
