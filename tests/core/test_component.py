"""
Unit Tests for Component Model

Tests for component geometry, zones and backs.
"""

import pytest

from boardgame_toolkit.core.models import ZERO, Component, Size, inches, millimeters


class TestComponent:
    """Tests for Component dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_defaults_then_eighth_inch_bleed_and_trim(self):
        card = Component.of(inches(2.5), inches(3.5))
        assert card.bleed == inches(0.125)
        assert card.trim == inches(0.125)
        assert card.back is None

    def test_init_when_zero_size_then_raises_error(self):
        with pytest.raises(ValueError, match="must be positive"):
            Component.of(ZERO, inches(3.5))

    def test_init_when_negative_bleed_then_raises_error(self):
        with pytest.raises(ValueError, match="bleed must be >= 0"):
            Component.of(inches(2.5), inches(3.5), bleed=millimeters(-1))

    def test_init_when_trim_exceeds_half_size_then_raises_error(self):
        """A 5mm token cannot take the default eighth-inch trim on both sides."""
        with pytest.raises(ValueError, match="exceeds half the component size"):
            Component.of(millimeters(5), millimeters(5))

    def test_init_when_trim_exceeds_half_of_shorter_edge_then_raises_error(self):
        with pytest.raises(ValueError, match="exceeds half the component size"):
            Component.of(millimeters(5), millimeters(50), trim=millimeters(3))

    def test_zones_when_trim_is_exactly_half_size_then_safe_area_empty(self):
        token = Component.of(millimeters(5), millimeters(5), trim=millimeters(2.5))
        assert token.zones.safe.extent == Size.zero()

    def test_with_back_when_dimensions_differ_then_raises_error(self):
        card = Component.of(inches(2.5), inches(3.5))
        with pytest.raises(ValueError, match="Back dimensions differ"):
            card.with_back(Component.of(inches(2.5), inches(3)))

    def test_with_back_when_back_has_back_then_raises_error(self):
        card = Component.of(inches(2.5), inches(3.5))
        nested = card.with_back(Component.of(inches(2.5), inches(3.5)))
        with pytest.raises(ValueError, match="cannot have a back"):
            card.with_back(nested)

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_extent_when_bleed_then_adds_bleed_on_every_edge(self):
        card = Component.of(inches(2.5), inches(3.5), bleed=millimeters(1))
        assert card.extent == Size(millimeters(65.5), millimeters(90.9))

    def test_portrait_oriented_extent_when_landscape_then_rotated(self):
        tile = Component.of(inches(3.5), inches(2.5), bleed=ZERO)
        assert tile.is_landscape
        assert tile.portrait_oriented_extent == Size(inches(2.5), inches(3.5))

    def test_zones_when_bleed_and_trim_then_nested(self):
        card = Component.of(inches(2.5), inches(3.5))
        zones = card.zones
        assert zones.full.extent == Size(inches(2.75), inches(3.75))
        assert zones.real.extent == Size(inches(2.5), inches(3.5))
        assert zones.real.bottom == inches(0.125)
        assert zones.safe.extent == Size(inches(2.25), inches(3.25))
        assert zones.full.contains(zones.real)
        assert zones.real.contains(zones.safe)

    # ─────────────────────────────────────────────────────────────────────────
    # Back Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_back_or_blank_when_no_back_then_blank_with_same_dimensions(self):
        card = Component.of(inches(2.5), inches(3.5), name="Goblin")
        blank = card.back_or_blank()
        assert blank.is_blank
        assert blank.name == "Goblin (blank)"
        assert blank.extent == card.extent
        assert card.matches(blank)

    def test_back_or_blank_when_back_then_returns_back(self):
        back = Component.of(inches(2.5), inches(3.5), name="Card back")
        card = Component.of(inches(2.5), inches(3.5)).with_back(back)
        assert card.has_back
        assert card.back_or_blank() is back
