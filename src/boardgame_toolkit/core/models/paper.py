"""
Module: paper

Purpose:
    Provides the Paper dataclass - a physical sheet with uniform margins.
    Derives the inner bounds that components are laid out within and
    produces portrait/landscape variants.

Key Functions:
    - Paper.inner_bounds: Extent minus margins on both sides
    - Paper.portrait / Paper.landscape: Oriented variants
    - Paper.marginless(extent): Paper without margins

Dependencies:
    - dataclasses (std)
    - .geometry.Size
    - .units

Used By:
    - sheet.config.SheetConfig
    - sheet.layout.packer: Row/page wrap limits
    - sheet.controller: Fit validation
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Size
from .units import ZERO, millimeters


@dataclass(frozen=True, slots=True)
class Paper:
    """
    Sheet of paper (immutable).

    Attributes:
        extent: Physical size of the sheet
        margin: Margin on each side; width applies left and right,
            height applies top and bottom

    Invariants:
        - margin >= 0 on both axes
        - inner_bounds > 0 on both axes

    Example:
        >>> A4.inner_bounds == Size(millimeters(194), millimeters(281))
        True
    """

    extent: Size
    margin: Size = Size.zero()

    def __post_init__(self) -> None:
        """Validate paper on construction."""
        if self.margin.width < ZERO or self.margin.height < ZERO:
            raise ValueError(f"margin must not be negative: {self.margin!r}")
        inner = self.inner_bounds
        if inner.width <= ZERO:
            raise ValueError("Margins exceed paper width")
        if inner.height <= ZERO:
            raise ValueError("Margins exceed paper height")

    @classmethod
    def marginless(cls, extent: Size) -> Paper:
        return cls(extent=extent, margin=Size.zero())

    @property
    def inner_bounds(self) -> Size:
        """Area available for content (extent minus both margins)."""
        return Size(
            self.extent.width - self.margin.width * 2,
            self.extent.height - self.margin.height * 2,
        )

    @property
    def is_landscape(self) -> bool:
        return self.extent.is_landscape

    @property
    def portrait(self) -> Paper:
        """This paper turned so that its longer edge is vertical."""
        if not self.extent.is_landscape:
            return self
        return Paper(self.extent.transposed(), self.margin.transposed())

    @property
    def landscape(self) -> Paper:
        """This paper turned so that its longer edge is horizontal."""
        if self.extent.is_landscape or self.extent.width == self.extent.height:
            return self
        return Paper(self.extent.transposed(), self.margin.transposed())


A4 = Paper(
    extent=Size(millimeters(210), millimeters(297)),
    margin=Size(millimeters(8), millimeters(8)),
)

LETTER = Paper(
    extent=Size(millimeters(215.9), millimeters(279.4)),
    margin=Size(millimeters(9.75), millimeters(9.75)),
)
