"""
Unit Tests for Paper Model

Tests for paper presets, margins and orientation.
"""

import pytest

from boardgame_toolkit.core.models import A4, LETTER, Paper, Size, millimeters


class TestPaper:
    """Tests for Paper dataclass."""

    def test_inner_bounds_when_a4_then_subtracts_both_margins(self):
        assert A4.inner_bounds == Size(millimeters(194), millimeters(281))

    def test_inner_bounds_when_letter_then_subtracts_both_margins(self):
        assert LETTER.inner_bounds == Size(millimeters(196.4), millimeters(259.9))

    def test_init_when_margins_exceed_width_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed paper width"):
            Paper(Size(millimeters(100), millimeters(100)), Size(millimeters(50), millimeters(0)))

    def test_init_when_margins_exceed_height_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed paper height"):
            Paper(Size(millimeters(100), millimeters(100)), Size(millimeters(0), millimeters(60)))

    def test_init_when_negative_margin_then_raises_error(self):
        with pytest.raises(ValueError, match="must not be negative"):
            Paper(Size(millimeters(100), millimeters(100)), Size(millimeters(-1), millimeters(0)))

    def test_marginless_when_created_then_inner_bounds_equal_extent(self):
        extent = Size(millimeters(194), millimeters(134.5))
        assert Paper.marginless(extent).inner_bounds == extent

    def test_landscape_when_portrait_then_transposes_extent_and_margin(self):
        paper = Paper(Size(millimeters(200), millimeters(300)), Size(millimeters(5), millimeters(10)))
        landscape = paper.landscape
        assert landscape.extent == Size(millimeters(300), millimeters(200))
        assert landscape.margin == Size(millimeters(10), millimeters(5))
        assert landscape.is_landscape

    def test_portrait_when_already_portrait_then_unchanged(self):
        assert A4.portrait == A4
        assert A4.landscape.portrait == A4
