"""
Unit Tests for Sheet Controller

Tests for fit validation, splitting by size and whole-sheet arrangement.
"""

import logging

import pytest

from boardgame_toolkit.core.models import A4, ZERO, Component, Size, millimeters
from boardgame_toolkit.sheet import (
    Arrangement,
    ArrangementResult,
    Custom,
    Duplex,
    Fold,
    Layout,
    Natural,
    OutOfBoundsError,
    SheetConfig,
    arrange_sheet,
    split_by_size,
    validate_fit,
)


class TestValidateFit:
    """Tests for validate_fit function."""

    def test_when_exactly_inner_bounds_then_fits(self):
        component = Component.of(millimeters(194), millimeters(281), bleed=ZERO)
        validate_fit([Layout([component])], A4)

    def test_when_landscape_rotates_into_bounds_then_fits(self):
        component = Component.of(millimeters(281), millimeters(194), bleed=ZERO)
        validate_fit([Layout([component])], A4)

    def test_when_one_mm_too_wide_then_raises_with_size(self, card_factory):
        """The offending portrait-oriented extent is reported."""
        too_big = Component.of(millimeters(195), millimeters(281), bleed=ZERO)
        layouts = [Layout([card_factory()]), Layout([too_big], Duplex())]
        with pytest.raises(OutOfBoundsError) as excinfo:
            validate_fit(layouts, A4)
        assert excinfo.value.size == Size(millimeters(195), millimeters(281))
        assert excinfo.value.bounds == A4.inner_bounds


class TestSplitBySize:
    """Tests for split_by_size function."""

    def test_when_sizes_change_then_split_into_runs_in_order(self, card_factory):
        cards = [
            card_factory(name="p1"),
            card_factory(name="p2"),
            card_factory(1.75, 2.5, name="m1"),
            card_factory(1.75, 2.5, name="m2"),
            card_factory(name="p3"),
        ]
        split = split_by_size([Layout(cards, Duplex())])
        assert [[c.name for c in layout.components] for layout in split] == [
            ["p1", "p2"], ["m1", "m2"], ["p3"],
        ]
        assert all(isinstance(layout.method, Duplex) for layout in split)

    def test_when_landscape_and_portrait_of_same_size_then_not_split(self, card_factory):
        cards = [card_factory(2.5, 3.5), card_factory(3.5, 2.5)]
        assert len(split_by_size([Layout(cards)])) == 1

    def test_when_custom_then_passed_through(self, card_factory):
        layout = Layout(
            [card_factory(), card_factory(1.75, 2.5)],
            Custom([Arrangement.at(ZERO, ZERO)]),
        )
        assert split_by_size([layout]) == [layout]

    def test_when_empty_layout_then_dropped(self):
        assert split_by_size([Layout([])]) == []


class TestArrangeSheet:
    """Tests for arrange_sheet function."""

    def test_when_nine_poker_cards_on_a4_then_one_page(self, card_factory):
        # Arrange
        config = SheetConfig.portrait([Layout([card_factory() for _ in range(9)])])

        # Act
        result = arrange_sheet(config)

        # Assert
        assert isinstance(result, ArrangementResult)
        assert result.page_count == 1
        assert result.total_placements == 9
        assert result.warnings == ()
        assert result.paper == A4

    def test_when_mixed_sizes_then_page_break_between_sizes(self, card_factory):
        cards = [card_factory(), card_factory(1.75, 2.5), card_factory()]
        result = arrange_sheet(SheetConfig(A4, [Layout(cards, Natural())]))
        assert [len(p.components) for p in result.pages] == [1, 1, 1]

    def test_when_several_layouts_then_pages_concatenated_in_order(self, card_factory):
        config = SheetConfig(A4, [
            Layout([card_factory(name="simplex")], Natural()),
            Layout([card_factory(name="duplex")], Duplex()),
            Layout([card_factory(name="fold", bleed=millimeters(3))], Fold()),
        ])
        result = arrange_sheet(config)
        names = [p.components[0].component.name for p in result.pages]
        assert names == ["simplex", "duplex", "duplex (blank)", "fold"]

    def test_when_component_too_large_then_raises_before_arranging(self, card_factory):
        too_big = Component.of(millimeters(200), millimeters(300), bleed=ZERO)
        config = SheetConfig(A4, [Layout([card_factory()]), Layout([too_big])])
        with pytest.raises(OutOfBoundsError):
            arrange_sheet(config)

    def test_when_no_layouts_then_warning_and_no_pages(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = arrange_sheet(SheetConfig(A4, []))
        assert result.pages == ()
        assert len(result.warnings) == 1
        assert "did not provide any layouts" in caplog.text

    def test_when_layout_empty_then_warning_and_others_arranged(self, card_factory, caplog):
        config = SheetConfig(A4, [Layout([]), Layout([card_factory()], Duplex())])
        with caplog.at_level(logging.WARNING):
            result = arrange_sheet(config)
        assert result.page_count == 2
        assert result.warnings == ("Layout 0 has no components; skipped",)
        assert "Layout 0 has no components" in caplog.text

    def test_when_arranged_then_logs_summary(self, card_factory, caplog):
        config = SheetConfig(A4, [Layout([card_factory() for _ in range(10)])])
        with caplog.at_level(logging.INFO, logger="boardgame_toolkit.sheet.controller"):
            arrange_sheet(config)
        assert "Arranged 10 components from 1 layouts onto 2 pages" in caplog.text

    @pytest.mark.parametrize("count", [1, 8, 9, 10, 30])
    def test_when_duplex_then_even_page_count(self, card_factory, count):
        cards = [card_factory() for _ in range(count)] + [card_factory(1.75, 2.5)]
        result = arrange_sheet(SheetConfig(A4, [Layout(cards, Duplex())]))
        assert result.page_count % 2 == 0

    def test_when_repeated_then_identical_pages(self, card_factory):
        cards = [card_factory(name=str(i), with_back=i % 2 == 0) for i in range(23)]
        config = SheetConfig(A4, [Layout(cards, Duplex()), Layout(cards, Fold())])
        first = arrange_sheet(config)
        second = arrange_sheet(config)
        assert [p.elements for p in first.pages] == [p.elements for p in second.pages]

    def test_when_every_placement_then_within_inner_bounds(self, card_factory):
        cards = [card_factory() for _ in range(25)]
        result = arrange_sheet(SheetConfig(A4, [Layout(cards)]))
        for page in result.pages:
            assert page.bounding_box.fits_within(A4.inner_bounds)
            for placed in page.components:
                assert placed.x >= ZERO and placed.y >= ZERO
