"""
Password validation engine.

Runs an ordered, immutable rule set against a password and aggregates every
violation into a single result. The engine has no knowledge of HTTP, JSON or
metrics and can be shared across concurrent callers.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from src.config.settings import PasswordPolicySettings, get_settings
from src.validators.rules import PasswordRule, build_default_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one password: validity flag plus ordered violation messages."""

    is_valid: bool
    errors: Tuple[str, ...] = field(default_factory=tuple)


class PasswordValidator:
    """
    Validate passwords against an ordered rule set.

    Every rule is evaluated on every call, so all applicable violations are
    reported together in rule order. Rule order never affects the verdict.
    """

    def __init__(self, rules: Iterable[PasswordRule]):
        """
        Initialize validator with a fixed rule set.

        Args:
            rules: Rules in the order their violations should be reported

        Raises:
            ValueError: If no rules are supplied
        """
        self._rules: Tuple[PasswordRule, ...] = tuple(rules)
        if not self._rules:
            raise ValueError("PasswordValidator requires at least one rule")

    @classmethod
    def from_settings(cls, settings: Optional[PasswordPolicySettings] = None) -> "PasswordValidator":
        """Build a validator with the standard rules configured from settings."""
        if settings is None:
            settings = get_settings().password
        return cls(build_default_rules(
            min_length=settings.PASSWORD_MIN_LENGTH,
            special_chars=settings.PASSWORD_SPECIAL_CHARS,
            length_unit=settings.PASSWORD_LENGTH_UNIT,
        ))

    @property
    def rules(self) -> Tuple[PasswordRule, ...]:
        return self._rules

    def validate(self, password: str) -> ValidationResult:
        """
        Validate password against all configured rules.

        Args:
            password: Plain text password to validate, may be empty

        Returns:
            ValidationResult with every violation in rule order
        """
        errors: List[str] = []
        for rule in self._rules:
            violation = rule.check(password)
            if violation is not None:
                errors.append(violation)

        return ValidationResult(is_valid=not errors, errors=tuple(errors))

    def is_valid(self, password: str) -> bool:
        """
        Check if password is valid.

        Args:
            password: Plain text password to validate

        Returns:
            True if password meets all requirements, False otherwise
        """
        return self.validate(password).is_valid

    def get_requirements(self) -> List[dict]:
        """
        Describe the configured rules in evaluation order.

        Useful for API documentation and client-side validation.
        """
        return [rule.describe() for rule in self._rules]


# Global validator instance
_validator: Optional[PasswordValidator] = None


def get_password_validator() -> PasswordValidator:
    """
    Get singleton password validator instance.

    Returns:
        Shared PasswordValidator instance
    """
    global _validator
    if _validator is None:
        _validator = PasswordValidator.from_settings()
        logger.info(
            "Password validator configured",
            extra={"rules": [rule.name for rule in _validator.rules]}
        )
    return _validator


def reset_password_validator():
    """Drop the shared validator so the next access rebuilds it (useful for testing)."""
    global _validator
    _validator = None


def validate_password(password: str) -> ValidationResult:
    """Convenience function to validate a password with the shared validator."""
    return get_password_validator().validate(password)


def is_password_valid(password: str) -> bool:
    """Convenience function to check a password with the shared validator."""
    return get_password_validator().is_valid(password)
