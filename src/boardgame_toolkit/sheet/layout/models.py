"""
Module: sheet.layout.models

Purpose:
    Data models for arranged pages.
    A Page accumulates placed components and guide marks for one physical
    sheet; placements and guides are immutable records.

Key Classes:
    - Turn: Clockwise quarter-turn rotation
    - Axis: Direction of a guide line
    - CoordinateMode: What page coordinates are relative to
    - PlacedComponent: Component positioned on a page
    - Guide: Cut or fold line
    - Page: Ordered element list for one sheet

Dependencies:
    - dataclasses (std)
    - core.models: Component, Size, Distance

Used By:
    - sheet.layout.packer: Creates Pages
    - sheet.layout.methods: Creates and fills Pages
    - core.utils.serialization: Exports Pages
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from boardgame_toolkit.core.models import Component, Distance, Size, millimeters

CUT_THICKNESS = millimeters(0.25)
FOLD_THICKNESS = millimeters(0.5)


@dataclass(frozen=True, slots=True)
class Turn:
    """
    Rotation in clockwise quarter turns (immutable).

    Attributes:
        clockwise: Number of clockwise quarter turns (1-3)

    Example:
        >>> Turn.ccw(1) == Turn.cw(3)
        True
        >>> Turn.cw(2).degrees
        180
    """

    clockwise: int

    def __post_init__(self) -> None:
        """Validate turn count on construction."""
        if self.clockwise not in (1, 2, 3):
            raise ValueError(f"Turn must be 1-3 quarter turns: {self.clockwise}")

    @classmethod
    def cw(cls, times: int = 1) -> Turn:
        return cls(times)

    @classmethod
    def ccw(cls, times: int = 1) -> Turn:
        if times not in (1, 2, 3):
            raise ValueError(f"Turn must be 1-3 quarter turns: {times}")
        return cls(4 - times)

    @property
    def degrees(self) -> int:
        return self.clockwise * 90


class Axis(str, Enum):
    """Direction a guide line runs in."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def __str__(self) -> str:
        return self.value


class GuideKind(str, Enum):
    CUT = "cut"
    FOLD = "fold"

    def __str__(self) -> str:
        return self.value


class CoordinateMode(str, Enum):
    """
    Origin that element coordinates on a page are relative to.

    RELATIVE_TO_BOUNDING_BOX: Content is centred on the page as a block;
        coordinates start at the block's top-left corner.
    RELATIVE_TO_PAGE_MARGINS: Coordinates start at the top-left corner of
        the paper's inner bounds.
    """
    RELATIVE_TO_PAGE_MARGINS = "page_margins"
    RELATIVE_TO_BOUNDING_BOX = "bounding_box"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PlacedComponent:
    """
    A component positioned on a page.

    Attributes:
        component: Component to draw
        x: Left edge offset
        y: Top edge offset
        turn: Optional rotation applied when drawing
        guides: Whether trim/safe guide overlays are drawn on this face
    """

    component: Component
    x: Distance
    y: Distance
    turn: Optional[Turn] = None
    guides: bool = False

    @property
    def offset(self) -> Size:
        return Size(self.x, self.y)

    @property
    def extent(self) -> Size:
        """Portrait-oriented extent the placement occupies."""
        return self.component.portrait_oriented_extent


@dataclass(frozen=True, slots=True)
class Guide:
    """
    Non-printing cut or fold line.

    The line is centred on (x, y) across its thickness.

    Attributes:
        kind: CUT or FOLD
        x: Start x coordinate
        y: Start y coordinate
        distance: Length of the line
        axis: HORIZONTAL runs along x, VERTICAL along y
        thickness: Line thickness
    """

    kind: GuideKind
    x: Distance
    y: Distance
    distance: Distance
    axis: Axis = Axis.HORIZONTAL
    thickness: Distance = CUT_THICKNESS

    def bounds(self) -> Tuple[Size, Size]:
        """
        Rectangle covered by the line.

        Returns:
            (offset, size) of the rectangle, centred on the guide coordinate
        """
        center_adjustment = self.thickness / 2
        if self.axis is Axis.HORIZONTAL:
            return (
                Size(self.x, self.y - center_adjustment),
                Size(self.distance, self.thickness),
            )
        return (
            Size(self.x - center_adjustment, self.y),
            Size(self.thickness, self.distance),
        )


Element = Union[PlacedComponent, Guide]


class Page:
    """
    One physical sheet being arranged.

    Elements are kept in paint order. Guides are inserted at the front so
    they sit beneath any component placed on the page. Entries are never
    removed.

    Attributes:
        extent: Paper size of the sheet
        mode: What element coordinates are relative to

    Example:
        >>> page = Page(A4.extent)
        >>> page.arrange(card, x=ZERO, y=ZERO)
        >>> page.fold(ZERO, inches(4), distance=inches(7))
        >>> type(page.elements[0]).__name__
        'Guide'
    """

    def __init__(
        self,
        extent: Size,
        mode: CoordinateMode = CoordinateMode.RELATIVE_TO_BOUNDING_BOX,
    ) -> None:
        self.extent = extent
        self.mode = mode
        self._elements: List[Element] = []

    @property
    def elements(self) -> Tuple[Element, ...]:
        return tuple(self._elements)

    @property
    def components(self) -> Tuple[PlacedComponent, ...]:
        """Placed components, in placement order."""
        return tuple(e for e in self._elements if isinstance(e, PlacedComponent))

    @property
    def guides(self) -> Tuple[Guide, ...]:
        return tuple(e for e in self._elements if isinstance(e, Guide))

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def bounding_box(self) -> Size:
        """
        Smallest size covering every placed component.

        Uses portrait-oriented extents and is independent of the page extent.
        """
        offsets: List[Size] = []
        for placed in self.components:
            offsets.append(placed.offset)
            offsets.append(placed.offset + placed.extent)
        return Size.containing_offsets(offsets)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def arrange(
        self,
        component: Component,
        x: Distance,
        y: Distance,
        turn: Optional[Turn] = None,
        *,
        guides: bool = False,
    ) -> PlacedComponent:
        """Append a placed component and return it."""
        placed = PlacedComponent(component=component, x=x, y=y, turn=turn, guides=guides)
        self._elements.append(placed)
        return placed

    def cut(
        self,
        x: Distance,
        y: Distance,
        distance: Distance,
        axis: Axis = Axis.HORIZONTAL,
    ) -> Guide:
        """Insert a cut guide beneath all current content."""
        guide = Guide(GuideKind.CUT, x, y, distance, axis, CUT_THICKNESS)
        self._elements.insert(0, guide)
        return guide

    def fold(
        self,
        x: Distance,
        y: Distance,
        distance: Distance,
        axis: Axis = Axis.HORIZONTAL,
    ) -> Guide:
        """Insert a fold guide beneath all current content."""
        guide = Guide(GuideKind.FOLD, x, y, distance, axis, FOLD_THICKNESS)
        self._elements.insert(0, guide)
        return guide

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return (
            f"Page({len(self.components)} components, "
            f"{len(self.guides)} guides, mode={self.mode})"
        )
