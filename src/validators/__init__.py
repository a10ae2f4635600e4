"""
Password validation for the password validator service.

Rules and the engine that combines them. Shared by the HTTP API
and the command line interface.
"""

from src.validators.password import (
    PasswordValidator,
    ValidationResult,
    get_password_validator,
    reset_password_validator,
    validate_password,
    is_password_valid
)
from src.validators.rules import (
    PasswordRule,
    MinLengthRule,
    DigitRule,
    LowercaseRule,
    UppercaseRule,
    SpecialCharRule,
    NoDuplicatesRule,
    build_default_rules
)

__all__ = [
    "PasswordValidator",
    "ValidationResult",
    "get_password_validator",
    "reset_password_validator",
    "validate_password",
    "is_password_valid",
    "PasswordRule",
    "MinLengthRule",
    "DigitRule",
    "LowercaseRule",
    "UppercaseRule",
    "SpecialCharRule",
    "NoDuplicatesRule",
    "build_default_rules",
]
