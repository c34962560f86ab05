"""Tests for quantity parsing, formatting and pantry arithmetic."""

import pytest

from dietplan.models import ParsedQuantity
from dietplan.pantry.quantity import (
    format_quantity,
    is_depleted,
    parse_quantity,
    subtract_quantity,
)


class TestParseQuantity:
    def test_glued_unit(self):
        assert parse_quantity("150g") == ParsedQuantity(150.0, "g")

    def test_spaced_unit(self):
        assert parse_quantity("250 ml latte") == ParsedQuantity(250.0, "ml")

    def test_word_unit(self):
        assert parse_quantity("1 banana") == ParsedQuantity(1.0, "banana")

    def test_bare_number(self):
        assert parse_quantity("3") == ParsedQuantity(3.0, "unità")

    def test_range_takes_lower_bound(self):
        assert parse_quantity("2-3 noci") == ParsedQuantity(2.0, "noci")
        assert parse_quantity("100 - 150 g riso") == ParsedQuantity(100.0, "g")

    def test_number_words(self):
        assert parse_quantity("mezza cipolla") == ParsedQuantity(0.5, "cipolla")
        assert parse_quantity("Due uova") == ParsedQuantity(2.0, "uova")
        assert parse_quantity("una") == ParsedQuantity(1.0, "unità")

    def test_decimal_comma(self):
        assert parse_quantity("1,5 kg patate") == ParsedQuantity(1.5, "kg")

    def test_fraction(self):
        assert parse_quantity("1/2 limone") == ParsedQuantity(0.5, "limone")

    def test_zero_denominator(self):
        assert parse_quantity("1/0 limone") is None

    @pytest.mark.parametrize("text", ["sale q.b.", "", "olio a piacere"])
    def test_not_quantifiable(self, text):
        assert parse_quantity(text) is None


class TestFormatQuantity:
    def test_round_trip(self):
        for text in ("150g", "1 banana", "1.5kg", "250ml"):
            assert format_quantity(parse_quantity(text)) == text

    def test_generic_unit_omitted(self):
        assert format_quantity(ParsedQuantity(3.0, "unità")) == "3"

    def test_rounding(self):
        assert format_quantity(ParsedQuantity(1 / 3, "kg")) == "0.33kg"
        assert format_quantity(ParsedQuantity(-0.001, "g")) == "0g"

    def test_none(self):
        assert format_quantity(None) == "-"


class TestSubtractQuantity:
    def test_deplete(self):
        assert subtract_quantity(500.0, "200g") == 300.0

    def test_restore(self):
        assert subtract_quantity(300.0, "200g", reverse=True) == 500.0

    def test_not_idempotent(self):
        value = subtract_quantity(500.0, "200g")
        assert subtract_quantity(value, "200g") == 100.0

    def test_non_quantifiable_unchanged(self):
        assert subtract_quantity(500.0, "sale q.b.") == 500.0

    def test_untracked_value(self):
        assert subtract_quantity(None, "200g") is None

    def test_can_go_negative(self):
        assert subtract_quantity(1.0, "2 mele") == -1.0


class TestIsDepleted:
    def test_depleted(self):
        assert is_depleted(0.0)
        assert is_depleted(-1.0)

    def test_not_depleted(self):
        assert not is_depleted(1.0)
        assert not is_depleted(None)
        assert not is_depleted(0.0, reverse=True)
