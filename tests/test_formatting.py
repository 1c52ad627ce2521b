"""
Tests for number formatting, permalink encoding and initials.
"""
import pytest

from constraint_nodes.nodes.formatting import (
    MAXIMUM_PERMALINK_LENGTH,
    character_count,
    format_number,
    initial_of,
    make_permalink,
    percent_encode_alphanumerics,
)


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (5.0, "5"),
        (0.0, "0"),
        (-0.0, "0"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (1234567.0, "1234567"),
        (1e20, "100000000000000000000"),
    ])
    def test_unbounded_trims_trailing_zeros(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (1.0 / 3, "0.333"),
        (2.0 / 3, "0.667"),
        (2.0, "2"),
        (0.5, "0.5"),
        (1.2504, "1.25"),
        (0.0004, "0"),
        (-0.0004, "0"),
    ])
    def test_caps_fraction_digits(self, value, expected):
        assert format_number(value, maximum_fraction_digits=3) == expected

    def test_keeps_sign_of_negative_values(self):
        assert format_number(-2.25) == "-2.25"

    @pytest.mark.parametrize("value, expected", [
        (float("nan"), "NaN"),
        (float("inf"), "∞"),
        (float("-inf"), "-∞"),
    ])
    def test_non_finite_values(self, value, expected):
        assert format_number(value) == expected
        assert format_number(value, maximum_fraction_digits=3) == expected


class TestPercentEncoding:

    def test_keeps_only_alphanumerics(self):
        assert percent_encode_alphanumerics("a.b == c") == "a%2Eb%20%3D%3D%20c"

    def test_encodes_utf8_bytes_in_uppercase_hex(self):
        assert percent_encode_alphanumerics("\u2014") == "%E2%80%94"

    def test_non_ascii_letters_are_alphanumeric(self):
        assert percent_encode_alphanumerics("\u00c9tiquette") == "\u00c9tiquette"

    def test_lone_surrogate_fails(self):
        assert percent_encode_alphanumerics("ab\ud800") is None


class TestPermalink:

    def test_short_raw_text(self):
        assert make_permalink("view.top == 8") == "view%2Etop%20%3D%3D%208"

    def test_length_just_below_limit(self):
        raw = "a" * (MAXIMUM_PERMALINK_LENGTH - 1)
        assert make_permalink(raw) == raw

    def test_length_at_limit_is_dropped(self):
        assert make_permalink("a" * MAXIMUM_PERMALINK_LENGTH) is None

    def test_limit_applies_to_encoded_length(self):
        # 667 spaces encode to 2001 characters
        assert make_permalink(" " * 667) is None
        assert make_permalink(" " * 666) == "%20" * 666

    def test_character_count_groups_combining_marks(self):
        assert character_count("e\u0301x") == 2
        assert character_count("%20") == 3

    def test_limit_counts_user_perceived_characters(self):
        # "e" + combining acute accent: two code points, one character
        decomposed = "e\u0301" * 1000
        assert make_permalink(decomposed) == decomposed
        assert make_permalink("e\u0301" * MAXIMUM_PERMALINK_LENGTH) is None

    def test_encoding_failure(self):
        assert make_permalink("\udfff") is None


class TestInitial:

    @pytest.mark.parametrize("name, expected", [
        ("Label", "L"),
        ("button", "B"),
        ("3D Rotation", "3"),
        ("\u2014Button", "B"),
        ("  _stack", "S"),
        ("---", ""),
        ("", ""),
    ])
    def test_first_alphanumeric_upper_cased(self, name, expected):
        assert initial_of(name) == expected
