"""Tests for fieldcheck.checkers — the built-in rule catalog."""

import re

import pytest

from fieldcheck.checkers import (
    BUILTIN_RULES,
    check_alpha,
    check_alpha_numeric,
    check_between,
    check_confirm,
    check_empty,
    check_format_date,
    check_format_date_time,
    check_format_email,
    check_format_ip,
    check_format_name_file,
    check_format_postal_code,
    check_format_slug,
    check_format_tel,
    check_format_url,
    check_in_array,
    check_integer,
    check_max,
    check_min,
    check_no_regex,
    check_not_in_array,
    check_regex,
    check_required,
)
from fieldcheck.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


class TestRequired:
    def test_absent(self) -> None:
        assert check_required(None, True) is False

    def test_empty_string(self) -> None:
        assert check_required("", True) is False

    def test_filled(self) -> None:
        assert check_required("hello", True) is True

    def test_whitespace_counts_as_filled(self) -> None:
        assert check_required("  ", True) is True

    def test_flag_off(self) -> None:
        assert check_required(None, False) is True


class TestEmpty:
    def test_blank_passes(self) -> None:
        assert check_empty("", True) is True

    def test_filled_fails(self) -> None:
        assert check_empty("bot", True) is False


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


class TestAlpha:
    def test_letters(self) -> None:
        assert check_alpha("Hello", True) is True

    def test_digits_rejected(self) -> None:
        assert check_alpha("abc1", True) is False

    def test_empty_rejected(self) -> None:
        assert check_alpha("", True) is False

    def test_trailing_newline_rejected(self) -> None:
        assert check_alpha("abc\n", True) is False

    def test_non_ascii_case_folds_rejected(self) -> None:
        assert check_alpha("K", True) is False  # Kelvin sign folds to "k"
        assert check_alpha("ſ", True) is False  # long s folds to "s"
        assert check_alpha("İ", True) is False

    def test_flag_off(self) -> None:
        assert check_alpha("123", False) is True


class TestAlphaNumeric:
    def test_mixed(self) -> None:
        assert check_alpha_numeric("abc123XYZ", True) is True

    def test_punctuation_rejected(self) -> None:
        assert check_alpha_numeric("abc-123", True) is False

    def test_non_ascii_letters_rejected(self) -> None:
        assert check_alpha_numeric("ſ1", True) is False
        assert check_alpha_numeric("K9", True) is False


class TestInteger:
    def test_digits(self) -> None:
        assert check_integer("42", True) is True

    def test_negative_rejected(self) -> None:
        assert check_integer("-7", True) is False

    def test_float_rejected(self) -> None:
        assert check_integer("3.14", True) is False


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


class TestBetween:
    def test_inside(self) -> None:
        assert check_between("3", [1, 5]) is True

    def test_upper_bound_inclusive(self) -> None:
        assert check_between("5", [1, 5]) is True

    def test_lower_bound_inclusive(self) -> None:
        assert check_between("1", [1, 5]) is True

    def test_above(self) -> None:
        assert check_between("6", [1, 5]) is False

    def test_below(self) -> None:
        assert check_between("17", [18, 65]) is False

    def test_numeric_not_lexicographic(self) -> None:
        assert check_between("10", [2, 20]) is True

    def test_decimal_value(self) -> None:
        assert check_between("2.5", [1, 3]) is True

    def test_non_numeric_value_fails(self) -> None:
        assert check_between("abc", [1, 5]) is False

    def test_numeric_string_bounds_compare_numerically(self) -> None:
        assert check_between("5", ["1", "10"]) is True
        assert check_between("11", ["1", "10"]) is False

    def test_mixed_number_and_numeric_string_bounds(self) -> None:
        assert check_between("7", [1, "10"]) is True

    def test_non_ascii_digits_are_not_numbers(self) -> None:
        assert check_between("٥", [1, 10]) is False

    def test_string_bounds_compare_lexicographically(self) -> None:
        assert check_between("m", ["a", "z"]) is True
        assert check_between("A", ["a", "z"]) is False

    def test_single_bound_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            check_between("3", [1])


class TestConfirm:
    def test_equal(self) -> None:
        assert check_confirm("", ["secret", "secret"]) is True

    def test_different(self) -> None:
        assert check_confirm("", ["secret", "Secret"]) is False

    def test_not_a_pair(self) -> None:
        with pytest.raises(ConfigurationError):
            check_confirm("", "secret")


class TestInArray:
    def test_member(self) -> None:
        assert check_in_array("red", ["red", "green"]) is True

    def test_not_member(self) -> None:
        assert check_in_array("blue", ["red", "green"]) is False

    def test_loose_comparison(self) -> None:
        assert check_in_array("5", [5, 10]) is True

    def test_string_argument_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            check_in_array("r", "red")


class TestNotInArray:
    def test_member_fails(self) -> None:
        assert check_not_in_array("admin", ["admin", "root"]) is False

    def test_other_passes(self) -> None:
        assert check_not_in_array("alice", ["admin", "root"]) is True


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


class TestLength:
    def test_max_at_limit(self) -> None:
        assert check_max("12345", 5) is True

    def test_max_exceeded(self) -> None:
        assert check_max("123456", 5) is False

    def test_min_below(self) -> None:
        assert check_min("ab", 3) is False

    def test_min_counts_code_points(self) -> None:
        assert check_min("été", 3) is True

    def test_max_counts_code_points(self) -> None:
        assert check_max("ééé", 3) is True

    def test_non_integer_length(self) -> None:
        with pytest.raises(ConfigurationError):
            check_max("abc", "3")


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


class TestRegex:
    def test_match(self) -> None:
        assert check_regex("abc123", r"^[a-z]+\d+$") is True

    def test_no_match(self) -> None:
        assert check_regex("123abc", r"^[a-z]+\d+$") is False

    def test_search_semantics(self) -> None:
        assert check_regex("xx42yy", r"\d+") is True

    def test_compiled_pattern(self) -> None:
        assert check_regex("ABC", re.compile("abc", re.IGNORECASE)) is True

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ConfigurationError):
            check_regex("abc", "[unclosed")


class TestNoRegex:
    def test_match_fails(self) -> None:
        assert check_no_regex("hello world", r"\s") is False

    def test_no_match_passes(self) -> None:
        assert check_no_regex("hello", r"\s") is True


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


class TestFormats:
    def test_blank_values_always_pass(self) -> None:
        for name, rule in BUILTIN_RULES.items():
            if name.startswith("format_"):
                assert rule.check("", True) is True, name

    def test_flag_off_always_passes(self) -> None:
        for name, rule in BUILTIN_RULES.items():
            if name.startswith("format_"):
                assert rule.check("???", False) is True, name

    def test_date(self) -> None:
        assert check_format_date("25/12/2024", True) is True
        assert check_format_date("2024-12-25", True) is False

    def test_date_non_ascii_digits_rejected(self) -> None:
        assert check_format_date("١٢/٠١/٢٠٢٠", True) is False

    def test_date_time(self) -> None:
        assert check_format_date_time("25/12/2024 18:30", True) is True
        assert check_format_date_time("25/12/2024", True) is False

    def test_date_time_fullwidth_digits_rejected(self) -> None:
        assert check_format_date_time("１２/01/2020 10:00", True) is False

    def test_email(self) -> None:
        assert check_format_email("ada@example.com", True) is True
        assert check_format_email("ada.example.com", True) is False
        assert check_format_email("ada@", True) is False

    def test_ip(self) -> None:
        assert check_format_ip("192.168.1.10", True) is True
        assert check_format_ip("::1", True) is True
        assert check_format_ip("256.1.1.1", True) is False

    def test_name_file(self) -> None:
        assert check_format_name_file("report-2024.pdf", True) is True
        assert check_format_name_file("../etc/passwd", True) is False
        assert check_format_name_file("résumé.pdf", True) is False
        assert check_format_name_file("my file.txt", True) is False

    def test_postal_code(self) -> None:
        assert check_format_postal_code("75001", True) is True
        assert check_format_postal_code("7500", True) is False

    def test_slug(self) -> None:
        assert check_format_slug("hello-world-2", True) is True
        assert check_format_slug("Hello_World", True) is False

    def test_tel(self) -> None:
        assert check_format_tel("+33 (0)1 23 45 67 89", True) is True
        assert check_format_tel("123", True) is False
        assert check_format_tel("call me", True) is False

    def test_url(self) -> None:
        assert check_format_url("https://example.com/path?q=1", True) is True
        assert check_format_url("mailto:ada@example.com", True) is True
        assert check_format_url("example.com", True) is False
        assert check_format_url("http://", True) is False
        assert check_format_url("http://exa mple.com", True) is False


class TestBuiltinTable:
    def test_interpolating_rules(self) -> None:
        interpolating = {name for name, rule in BUILTIN_RULES.items() if rule.interpolate}
        assert interpolating == {"between", "max", "min", "regex", "no_regex"}

    def test_keys_match_names(self) -> None:
        for name, rule in BUILTIN_RULES.items():
            assert rule.name == name
