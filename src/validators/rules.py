"""
Password policy rules.

Each rule is an immutable, independently evaluable check. ``check`` returns
``None`` when the password satisfies the rule, otherwise the violation message.
Rules never raise for a password value; invalid configuration is rejected
when the rule is constructed.
"""

import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

DEFAULT_MIN_LENGTH = 9
DEFAULT_SPECIAL_CHARS = "!@#$%^&*()-+"

LENGTH_UNIT_CODE_POINTS = "code_points"
LENGTH_UNIT_UTF8_BYTES = "utf8_bytes"
LENGTH_UNITS = (LENGTH_UNIT_CODE_POINTS, LENGTH_UNIT_UTF8_BYTES)

NO_DIGIT_MESSAGE = "password must contain at least one digit"
NO_LOWERCASE_MESSAGE = "password must contain at least one lowercase letter"
NO_UPPERCASE_MESSAGE = "password must contain at least one uppercase letter"
WHITESPACE_MESSAGE = "password must not contain whitespace characters"
REPEATED_CHARACTER_MESSAGE = "password must not contain repeated characters"

# Latin-1 whitespace; beyond Latin-1 only the Zs, Zl and Zp categories count.
# The C0 separators \x1c-\x1f are not whitespace here, unlike str.isspace
_LATIN1_WHITESPACE = frozenset("\t\n\v\f\r \x85\xa0")
_SEPARATOR_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))


def is_whitespace(char: str) -> bool:
    """Return True for a whitespace code point."""
    return char in _LATIN1_WHITESPACE or unicodedata.category(char) in _SEPARATOR_CATEGORIES


class PasswordRule(ABC):
    """Base class for a single password policy check."""

    name: ClassVar[str]

    @abstractmethod
    def check(self, password: str) -> Optional[str]:
        """
        Evaluate the rule against a password.

        Args:
            password: Candidate password, never normalised

        Returns:
            None if the rule is satisfied, otherwise a violation message
        """

    def describe(self) -> dict:
        """Return a serialisable description of the rule and its parameters."""
        return {"name": self.name}


@dataclass(frozen=True)
class MinLengthRule(PasswordRule):
    """Require a minimum password length."""

    name: ClassVar[str] = "min_length"

    min_length: int = DEFAULT_MIN_LENGTH
    length_unit: str = LENGTH_UNIT_CODE_POINTS

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be positive, got {self.min_length}")
        if self.length_unit not in LENGTH_UNITS:
            raise ValueError(
                f"length_unit must be one of {', '.join(LENGTH_UNITS)}, got {self.length_unit!r}"
            )

    def measure(self, password: str) -> int:
        if self.length_unit == LENGTH_UNIT_UTF8_BYTES:
            # surrogatepass keeps lone surrogates from JSON input measurable
            return len(password.encode("utf-8", errors="surrogatepass"))
        return len(password)

    def check(self, password: str) -> Optional[str]:
        if self.measure(password) < self.min_length:
            return f"password must have at least {self.min_length} characters"
        return None

    def describe(self) -> dict:
        return {"name": self.name, "min_length": self.min_length, "length_unit": self.length_unit}


@dataclass(frozen=True)
class DigitRule(PasswordRule):
    """Require at least one decimal digit (Unicode category Nd)."""

    name: ClassVar[str] = "digit"

    def check(self, password: str) -> Optional[str]:
        if any(char.isdecimal() for char in password):
            return None
        return NO_DIGIT_MESSAGE


@dataclass(frozen=True)
class LowercaseRule(PasswordRule):
    """Require at least one lowercase letter (Unicode category Ll)."""

    name: ClassVar[str] = "lowercase"

    def check(self, password: str) -> Optional[str]:
        if any(unicodedata.category(char) == "Ll" for char in password):
            return None
        return NO_LOWERCASE_MESSAGE


@dataclass(frozen=True)
class UppercaseRule(PasswordRule):
    """Require at least one uppercase letter (Unicode category Lu)."""

    name: ClassVar[str] = "uppercase"

    def check(self, password: str) -> Optional[str]:
        if any(unicodedata.category(char) == "Lu" for char in password):
            return None
        return NO_UPPERCASE_MESSAGE


@dataclass(frozen=True)
class SpecialCharRule(PasswordRule):
    """Require at least one character from an allowed special character set."""

    name: ClassVar[str] = "special_char"

    allowed_chars: str = DEFAULT_SPECIAL_CHARS

    def __post_init__(self):
        if not self.allowed_chars:
            raise ValueError("allowed_chars must not be empty")

    def check(self, password: str) -> Optional[str]:
        if any(char in self.allowed_chars for char in password):
            return None
        return f"password must contain at least one special character ({self.allowed_chars})"

    def describe(self) -> dict:
        return {"name": self.name, "allowed_chars": self.allowed_chars}


@dataclass(frozen=True)
class NoDuplicatesRule(PasswordRule):
    """
    Reject whitespace and repeated characters.

    The scan stops at the first whitespace or repeated character, so at most
    one violation is reported. An empty password passes.
    """

    name: ClassVar[str] = "no_duplicates"

    def check(self, password: str) -> Optional[str]:
        seen = set()
        for char in password:
            if is_whitespace(char):
                return WHITESPACE_MESSAGE
            if char in seen:
                return REPEATED_CHARACTER_MESSAGE
            seen.add(char)
        return None


def build_default_rules(
    min_length: int = DEFAULT_MIN_LENGTH,
    special_chars: str = DEFAULT_SPECIAL_CHARS,
    length_unit: str = LENGTH_UNIT_CODE_POINTS,
) -> tuple:
    """Build the standard rule set in its reporting order."""
    return (
        MinLengthRule(min_length=min_length, length_unit=length_unit),
        DigitRule(),
        LowercaseRule(),
        UppercaseRule(),
        SpecialCharRule(allowed_chars=special_chars),
        NoDuplicatesRule(),
    )
