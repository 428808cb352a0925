"""
Module: geometry

Purpose:
    Provides the Size and Area value types. Size is a width/height pair of
    Distances; Area is a rectangle described by its insets from a root
    extent, used to describe the bleed/trim/safe zones of a component.

Key Functions:
    - Size.zero(): Additive identity
    - Size.portrait_oriented: Rotate so the longer edge is vertical
    - Size.containing_offsets(offsets): Smallest size covering a point set
    - Area.root(extent): Top-level area without insets
    - Area.inset_in(parent, ...): Area inset from a parent area

Dependencies:
    - dataclasses (std)
    - .units.Distance

Used By:
    - core.models.paper.Paper
    - core.models.component.Component
    - sheet.layout.models.Page: bounding boxes
    - sheet.layout.packer: row-fill arithmetic
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .units import Distance, ZERO


@dataclass(frozen=True, slots=True)
class Size:
    """
    Width and height pair (immutable).

    Also used as an (x, y) offset, with width as x and height as y.

    Example:
        >>> s = Size(inches(3.5), inches(2.5))
        >>> s.portrait_oriented == Size(inches(2.5), inches(3.5))
        True
    """

    width: Distance
    height: Distance

    @classmethod
    def zero(cls) -> Size:
        return cls(ZERO, ZERO)

    @classmethod
    def square(cls, side: Distance) -> Size:
        return cls(side, side)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_landscape(self) -> bool:
        """True when strictly wider than tall."""
        return self.width > self.height

    @property
    def portrait_oriented(self) -> Size:
        """This size rotated so that the longer edge is vertical."""
        return Size(min(self.width, self.height), max(self.width, self.height))

    @property
    def landscape_oriented(self) -> Size:
        """This size rotated so that the longer edge is horizontal."""
        return Size(max(self.width, self.height), min(self.width, self.height))

    @property
    def is_positive(self) -> bool:
        return self.width > ZERO and self.height > ZERO

    def fits_within(self, bounds: Size) -> bool:
        """Check that neither edge exceeds the corresponding edge of `bounds`."""
        return self.width <= bounds.width and self.height <= bounds.height

    def transposed(self) -> Size:
        return Size(self.height, self.width)

    # ─────────────────────────────────────────────────────────────────────────
    # Arithmetic
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, factor) -> Size:
        return Size(self.width * factor, self.height * factor)

    __rmul__ = __mul__

    @staticmethod
    def containing_offsets(offsets: Iterable[Size]) -> Size:
        """
        Smallest size covering every offset.

        Args:
            offsets: Points, as Sizes with width as x and height as y

        Returns:
            (max x - min x, max y - min y), or zero when there are no offsets
        """
        offsets = list(offsets)
        if not offsets:
            return Size.zero()
        xs = [offset.width for offset in offsets]
        ys = [offset.height for offset in offsets]
        return Size(max(xs) - min(xs), max(ys) - min(ys))

    def __repr__(self) -> str:
        return f"Size({self.width!r} x {self.height!r})"


@dataclass(frozen=True, slots=True)
class Area:
    """
    Rectangle described by its insets from the root extent (immutable).

    Edge insets are absolute: an area nested inside another carries the sum
    of its own inset and every ancestor's inset on each edge. Opposite edges
    are independent; setting `top` never clears `bottom`.

    Attributes:
        extent: Size of this area
        top: Distance from the root's top edge
        left: Distance from the root's left edge
        right: Distance from the root's right edge
        bottom: Distance from the root's bottom edge

    Invariants:
        - extent is >= zero on both axes

    Example:
        >>> full = Area.root(Size(inches(2.75), inches(3.75)))
        >>> real = Area.uniform(inches(0.125), full)
        >>> real.extent == Size(inches(2.5), inches(3.5))
        True
    """

    extent: Size
    top: Distance = ZERO
    left: Distance = ZERO
    right: Distance = ZERO
    bottom: Distance = ZERO

    def __post_init__(self) -> None:
        """Validate area on construction."""
        if self.extent.width < ZERO or self.extent.height < ZERO:
            raise ValueError(f"Area extent must not be negative: {self.extent!r}")

    @classmethod
    def root(cls, extent: Size) -> Area:
        return cls(extent=extent)

    @classmethod
    def inset_in(
        cls,
        parent: Area,
        *,
        top: Optional[Distance] = None,
        left: Optional[Distance] = None,
        right: Optional[Distance] = None,
        bottom: Optional[Distance] = None,
    ) -> Area:
        """
        Create an area inset from a parent area.

        Edges left as None are not inset.

        Raises:
            ValueError: If the insets exceed the parent extent
        """
        top = top if top is not None else ZERO
        left = left if left is not None else ZERO
        right = right if right is not None else ZERO
        bottom = bottom if bottom is not None else ZERO
        extent = Size(
            parent.extent.width - (left + right),
            parent.extent.height - (top + bottom),
        )
        return cls(
            extent=extent,
            top=top + parent.top,
            left=left + parent.left,
            right=right + parent.right,
            bottom=bottom + parent.bottom,
        )

    @classmethod
    def uniform(cls, inset: Distance, parent: Area) -> Area:
        """Create an area inset by the same distance on every edge."""
        return cls.inset_in(parent, top=inset, left=inset, right=inset, bottom=inset)

    def contains(self, other: Area) -> bool:
        """Check that `other` lies entirely inside this area."""
        return (
            other.top >= self.top
            and other.left >= self.left
            and other.right >= self.right
            and other.bottom >= self.bottom
        )
