"""
Unit Tests for Distance

Tests for physical lengths, unit conversion and parsing.
"""

import pytest

from boardgame_toolkit.core.models.units import (
    ZERO,
    Distance,
    Unit,
    centimeters,
    inches,
    millimeters,
    points,
)


class TestDistance:
    """Tests for Distance dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Conversion Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_eq_when_same_length_in_different_units_then_equal(self):
        """Equality compares physical length, not the display unit."""
        assert inches(1) == millimeters(25.4)
        assert centimeters(2.54) == inches(1)
        assert points(72) == inches(1)

    def test_hash_when_equal_lengths_then_same_hash(self):
        """Equal distances must be usable as the same dict key."""
        assert hash(inches(1)) == hash(millimeters(25.4))

    def test_to_when_millimeters_then_exact(self):
        """Metric values survive a round trip through inches without drift."""
        d = millimeters(8)
        assert d.to(Unit.MILLIMETERS) == 8.0
        assert d.to("cm") == 0.8

    def test_to_when_inches_then_converts(self):
        assert millimeters(12.7).to(Unit.INCHES) == 0.5

    def test_value_when_created_then_in_display_unit(self):
        assert millimeters(6).value == 6.0
        assert millimeters(6).unit is Unit.MILLIMETERS
        assert inches(0.125).value == 0.125

    def test_in_unit_when_called_then_same_length_new_unit(self):
        d = inches(1).in_unit("mm")
        assert d.unit is Unit.MILLIMETERS
        assert d.value == 25.4
        assert d == inches(1)

    # ─────────────────────────────────────────────────────────────────────────
    # Parsing Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_parse_when_number_and_unit_then_creates_distance(self):
        assert Distance.parse("2.5in") == inches(2.5)
        assert Distance.parse("8 mm") == millimeters(8)
        assert Distance.parse(" .5CM ") == millimeters(5)

    def test_parse_when_negative_then_allowed(self):
        assert Distance.parse("-2in") == -inches(2)

    def test_parse_when_no_unit_then_raises_error(self):
        with pytest.raises(ValueError, match="Invalid distance"):
            Distance.parse("12")

    def test_parse_when_unknown_unit_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown unit"):
            Distance.parse("3 furlongs")

    # ─────────────────────────────────────────────────────────────────────────
    # Arithmetic Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_add_when_mixed_units_then_keeps_left_unit(self):
        total = inches(1) + millimeters(10)
        assert total.to(Unit.MILLIMETERS) == 35.4
        assert total.unit is Unit.INCHES

    def test_sub_when_result_negative_then_allowed(self):
        assert (millimeters(2) - millimeters(5)) == millimeters(-3)

    def test_mul_when_number_then_scales(self):
        assert millimeters(4) * 2 == millimeters(8)
        assert 2 * millimeters(4) == millimeters(8)

    def test_div_when_number_then_scales(self):
        assert millimeters(281) / 2 == millimeters(140.5)

    def test_ordering_when_compared_then_by_length(self):
        assert millimeters(25) < inches(1) < millimeters(26)
        assert max(millimeters(10), centimeters(2)) == centimeters(2)

    def test_bool_when_zero_then_false(self):
        assert not ZERO
        assert millimeters(0.5)

    def test_repr_when_called_then_shows_display_unit(self):
        assert repr(millimeters(8)) == "Distance(8mm)"
