"""Unit tests for the individual password rules."""

import dataclasses

import pytest

from src.validators.rules import (
    DigitRule,
    LowercaseRule,
    MinLengthRule,
    NoDuplicatesRule,
    SpecialCharRule,
    UppercaseRule,
    NO_DIGIT_MESSAGE,
    NO_LOWERCASE_MESSAGE,
    NO_UPPERCASE_MESSAGE,
    REPEATED_CHARACTER_MESSAGE,
    WHITESPACE_MESSAGE,
    build_default_rules,
)


class TestMinLengthRule:
    """Tests for the minimum length rule."""

    @pytest.mark.parametrize("password", ["abcdefghi", "abcdefghij", "123456789"])
    def test_long_enough_passes(self, password):
        assert MinLengthRule(min_length=9).check(password) is None

    @pytest.mark.parametrize("password", ["", "a", "abcdefgh"])
    def test_too_short_fails(self, password):
        assert MinLengthRule(min_length=9).check(password) == "password must have at least 9 characters"

    def test_message_uses_configured_length(self):
        assert MinLengthRule(min_length=4).check("abc") == "password must have at least 4 characters"

    def test_counts_code_points_by_default(self):
        # Four code points, eight UTF-8 bytes
        assert MinLengthRule(min_length=5).check("ãéíõ") is not None

    def test_utf8_bytes_unit_counts_encoded_length(self):
        rule = MinLengthRule(min_length=5, length_unit="utf8_bytes")
        assert rule.check("ãéíõ") is None
        assert rule.measure("ãéíõ") == 8

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            MinLengthRule(min_length=0)

    def test_rejects_unknown_length_unit(self):
        with pytest.raises(ValueError):
            MinLengthRule(length_unit="graphemes")

    def test_describe_includes_parameters(self):
        assert MinLengthRule(min_length=12).describe() == {
            "name": "min_length",
            "min_length": 12,
            "length_unit": "code_points",
        }


class TestCharacterClassRules:
    """Tests for the digit, lowercase and uppercase presence rules."""

    @pytest.mark.parametrize("password", ["1", "abc9", "٣abc"])
    def test_digit_present(self, password):
        assert DigitRule().check(password) is None

    @pytest.mark.parametrize("password", ["", "abc", "²"])
    def test_digit_missing(self, password):
        assert DigitRule().check(password) == NO_DIGIT_MESSAGE

    @pytest.mark.parametrize("password", ["a", "ABCd", "ÉÇã"])
    def test_lowercase_present(self, password):
        assert LowercaseRule().check(password) is None

    @pytest.mark.parametrize("password", ["", "ABC123!", "ÉÇ", "ª", "º", "ʰ", "ⅰ"])
    def test_lowercase_missing(self, password):
        assert LowercaseRule().check(password) == NO_LOWERCASE_MESSAGE

    @pytest.mark.parametrize("password", ["A", "abcD", "ãéÍ"])
    def test_uppercase_present(self, password):
        assert UppercaseRule().check(password) is None

    @pytest.mark.parametrize("password", ["", "abc123!", "ãé", "ǅ", "Ⅰ"])
    def test_uppercase_missing(self, password):
        assert UppercaseRule().check(password) == NO_UPPERCASE_MESSAGE


class TestSpecialCharRule:
    """Tests for the special character rule."""

    @pytest.mark.parametrize("char", list("!@#$%^&*()-+"))
    def test_each_default_char_is_accepted(self, char):
        assert SpecialCharRule().check(f"abc{char}") is None

    @pytest.mark.parametrize("password", ["", "abc", "abc def", "abc_def", "abc.def"])
    def test_chars_outside_set_fail(self, password):
        assert SpecialCharRule().check(password) == (
            "password must contain at least one special character (!@#$%^&*()-+)"
        )

    def test_custom_set(self):
        rule = SpecialCharRule(allowed_chars="_")
        assert rule.check("abc_def") is None
        assert rule.check("abc!def") == "password must contain at least one special character (_)"

    def test_empty_set_is_rejected(self):
        with pytest.raises(ValueError):
            SpecialCharRule(allowed_chars="")


class TestNoDuplicatesRule:
    """Tests for the combined no-duplicates / no-whitespace rule."""

    def test_empty_password_passes(self):
        assert NoDuplicatesRule().check("") is None

    def test_unique_characters_pass(self):
        assert NoDuplicatesRule().check("AbTp9!fok") is None

    def test_repeated_character_fails(self):
        assert NoDuplicatesRule().check("AbTp9!foo") == REPEATED_CHARACTER_MESSAGE

    def test_case_differs_is_not_a_repeat(self):
        assert NoDuplicatesRule().check("aA") is None

    @pytest.mark.parametrize("password", [" ", "ab c", "ab\tc", "ab\nc", "ab\u00a0c", "ab\x85c", "ab\u3000c", "ab\u2028c"])
    def test_whitespace_fails(self, password):
        assert NoDuplicatesRule().check(password) == WHITESPACE_MESSAGE

    @pytest.mark.parametrize("password", ["ab\x1cc", "ab\x1fc", "ab\u200bc"])
    def test_separator_controls_are_not_whitespace(self, password):
        assert NoDuplicatesRule().check(password) is None

    def test_first_problem_wins_whitespace_before_repeat(self):
        assert NoDuplicatesRule().check("a ba") == WHITESPACE_MESSAGE

    def test_first_problem_wins_repeat_before_whitespace(self):
        assert NoDuplicatesRule().check("aa b") == REPEATED_CHARACTER_MESSAGE

    def test_repeated_whitespace_reports_whitespace(self):
        assert NoDuplicatesRule().check("a  b") == WHITESPACE_MESSAGE


class TestRuleSet:
    """Tests for the default rule set composition."""

    def test_default_order(self):
        names = [rule.name for rule in build_default_rules()]
        assert names == ["min_length", "digit", "lowercase", "uppercase", "special_char", "no_duplicates"]

    def test_default_parameters(self):
        rules = build_default_rules()
        assert rules[0].min_length == 9
        assert rules[4].allowed_chars == "!@#$%^&*()-+"

    def test_rules_are_immutable(self):
        rule = MinLengthRule(min_length=9)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.min_length = 1
