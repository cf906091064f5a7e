"""Tests for drop rate parsing."""

import pytest

from osrs_drops.rates import parse_rate


class TestFractionNotation:
    def test_simple_fraction(self):
        assert parse_rate("1/128") == 1 / 128

    def test_thousands_separator_and_decimal_in_denominator(self):
        assert parse_rate("1/1,092.3") == pytest.approx(1 / 1092.3)
        assert parse_rate("1/1,092.3") == pytest.approx(0.0009155, rel=1e-3)

    def test_numerator_greater_than_one(self):
        assert parse_rate("5/128") == 5 / 128

    def test_decimal_denominator(self):
        assert parse_rate("1/102.4") == pytest.approx(1 / 102.4)

    def test_fraction_with_surrounding_text(self):
        assert parse_rate("Rare (1/512)") == 1 / 512

    def test_first_rate_wins_for_multi_rate_strings(self):
        assert parse_rate("1/128; 1/65") == 1 / 128

    def test_zero_denominator_is_unparseable(self):
        assert parse_rate("1/0") is None

    def test_rate_above_one_is_unparseable(self):
        assert parse_rate("3/2") is None

    def test_zero_numerator_is_unparseable(self):
        assert parse_rate("0/128") is None


class TestOneInNotation:
    def test_one_in(self):
        assert parse_rate("1 in 256") == 1 / 256

    def test_one_in_case_insensitive(self):
        assert parse_rate("1 IN 50") == 1 / 50

    def test_colon(self):
        assert parse_rate("1:50") == 1 / 50

    def test_colon_with_whitespace(self):
        assert parse_rate("1 : 64") == 1 / 64

    def test_one_in_without_spaces_around_denominator(self):
        assert parse_rate("1in10") == 1 / 10

    def test_one_in_with_thousands_separator(self):
        assert parse_rate("1 in 5,000") == 1 / 5000

    def test_does_not_match_inside_larger_number(self):
        assert parse_rate("11 in 50") is None

    def test_zero_denominator(self):
        assert parse_rate("1 in 0") is None


class TestUnparseable:
    @pytest.mark.parametrize(
        "raw", [None, "", "   ", "Common", "Rare", "Always", "Very rare", "2-5", "N/A"]
    )
    def test_returns_none(self, raw):
        assert parse_rate(raw) is None

    @pytest.mark.parametrize("raw", ["/", "1/", "/128", "1/,", "1 in", ":::", "1//2"])
    def test_malformed_never_raises(self, raw):
        assert parse_rate(raw) is None
