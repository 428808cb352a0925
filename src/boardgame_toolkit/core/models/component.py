"""
Module: component

Purpose:
    Provides the Component dataclass - the read-only view of a boardgame
    component (card, token, sheet) that the arrangement engine consumes.
    A component knows its cut size, bleed and trim, the zones derived from
    them, and optionally owns a back.

Key Functions:
    - Component.extent: Full size including bleed
    - Component.portrait_oriented_extent: Extent with the longer edge vertical
    - Component.zones: full ⊇ real ⊇ safe areas
    - Component.with_back(back): Copy with a back attached
    - Component.blank(): Placeholder sized like this component

Dependencies:
    - dataclasses (std)
    - .geometry: Size, Area
    - .units: Distance

Used By:
    - sheet.layout.layout.Layout
    - sheet.layout.packer
    - sheet.layout.methods
    - sheet.controller: Fit validation and size splitting

Design Notes:
    Visual content (boxes, text, images) is authored elsewhere and is not
    part of this view. A back belongs to exactly one front and never has a
    back of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .geometry import Area, Size
from .units import Distance, ZERO, inches

DEFAULT_BLEED = inches(0.125)
DEFAULT_TRIM = inches(0.125)


@dataclass(frozen=True, slots=True)
class Zones:
    """
    Nested areas of a component.

    Attributes:
        full: Largest area, including bleed
        real: Final cut area (full minus bleed)
        safe: Area guaranteed inside the trim line (real minus trim)
    """

    full: Area
    real: Area
    safe: Area


@dataclass(frozen=True, slots=True)
class Component:
    """
    Boardgame component (immutable).

    Attributes:
        size: Final cut dimensions
        bleed: Distance extending outwards from the cut dimensions
        trim: Distance extending inwards from the cut dimensions
        name: Optional label, carried into exports
        back: Optional back side, owned by this component
        is_blank: True for placeholders standing in for a missing back

    Invariants:
        - size > 0 on both axes
        - bleed >= 0, 0 <= trim <= half the shorter cut edge
        - back has no back of its own
        - back shares size, bleed and trim with the front

    Example:
        >>> card = Component.of(inches(2.5), inches(3.5), bleed=millimeters(1))
        >>> card.portrait_oriented_extent.height.to("mm")
        90.9
    """

    size: Size
    bleed: Distance = DEFAULT_BLEED
    trim: Distance = DEFAULT_TRIM
    name: str = ""
    back: Optional[Component] = None
    is_blank: bool = False

    def __post_init__(self) -> None:
        """Validate component on construction."""
        if not self.size.is_positive:
            raise ValueError(f"Component size must be positive: {self.size!r}")
        if self.bleed < ZERO:
            raise ValueError(f"bleed must be >= 0: {self.bleed!r}")
        if self.trim < ZERO:
            raise ValueError(f"trim must be >= 0: {self.trim!r}")
        if self.trim * 2 > self.size.width or self.trim * 2 > self.size.height:
            raise ValueError(
                f"trim {self.trim!r} exceeds half the component size {self.size!r}"
            )
        if self.back is not None:
            if self.back.back is not None:
                raise ValueError("A back cannot have a back of its own")
            if not self.matches(self.back):
                raise ValueError(
                    f"Back dimensions differ from front: "
                    f"{self.back.size!r} vs {self.size!r}"
                )

    @classmethod
    def of(
        cls,
        width: Distance,
        height: Distance,
        *,
        bleed: Distance = DEFAULT_BLEED,
        trim: Distance = DEFAULT_TRIM,
        name: str = "",
    ) -> Component:
        """Create a component from its cut width and height."""
        return cls(size=Size(width, height), bleed=bleed, trim=trim, name=name)

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def extent(self) -> Size:
        """Full size, including bleed on every edge."""
        return Size(self.size.width + self.bleed * 2, self.size.height + self.bleed * 2)

    @property
    def portrait_oriented_extent(self) -> Size:
        return self.extent.portrait_oriented

    @property
    def is_landscape(self) -> bool:
        """True when the full extent is wider than tall."""
        return self.extent.is_landscape

    @property
    def zones(self) -> Zones:
        full = Area.root(self.extent)
        real = Area.uniform(self.bleed, full)
        safe = Area.uniform(self.trim, real)
        return Zones(full=full, real=real, safe=safe)

    def matches(self, other: Component) -> bool:
        """Check that `other` can serve as the back of this component."""
        return (
            other.size == self.size
            and other.bleed == self.bleed
            and other.trim == self.trim
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Components
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def has_back(self) -> bool:
        return self.back is not None

    def with_back(self, back: Component) -> Component:
        """
        Copy of this component with `back` attached.

        Raises:
            ValueError: If `back` has a back or differs in dimensions
        """
        return replace(self, back=back)

    def blank(self) -> Component:
        """Empty placeholder with the same dimensions as this component."""
        return Component(
            size=self.size,
            bleed=self.bleed,
            trim=self.trim,
            name=f"{self.name} (blank)" if self.name else "",
            is_blank=True,
        )

    def back_or_blank(self) -> Component:
        """The back of this component, or a blank placeholder if it has none."""
        return self.back if self.back is not None else self.blank()
