"""
Module: sheet.layout.layout

Purpose:
    Describes one batch of components and how to arrange them.
    A Layout pairs an ordered component list with a Method; the method
    variants carry their own parameters (gap, gutter, template).

Key Classes:
    - Order: Which faces a method operates on, and in what order
    - GuideDistribution: Which faces carry trim/safe guides
    - Natural, Duplex, Fold, Custom: Method variants
    - Arrangement: One directive in a custom template
    - Layout: Components plus method

Dependencies:
    - dataclasses (std)
    - core.models: Component, Size, Distance
    - .models: Turn, Axis
    - .packer: interleave

Used By:
    - sheet.layout.methods: Dispatches on the method variant
    - sheet.controller: Splits layouts by size
    - sheet.config.SheetConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple, Union

from boardgame_toolkit.core.models import ZERO, Component, Distance, Size, millimeters

from .models import Axis, Turn
from .packer import interleave

DEFAULT_GUTTER = millimeters(6)


class Order(Enum):
    """
    Which component faces a method arranges, and in what order.

    Attributes:
        SKIPPING_BACKS: Fronts only
        FRONTS_THEN_BACKS: All fronts, then every existing back
        INTERLEAVING_BACKS: Fronts alternated with the existing backs
    """

    SKIPPING_BACKS = auto()
    FRONTS_THEN_BACKS = auto()
    INTERLEAVING_BACKS = auto()


class GuideDistribution(Enum):
    """Which faces show trim/safe guide overlays."""

    FRONT = auto()
    BACK = auto()
    FRONT_AND_BACK = auto()

    @property
    def on_front(self) -> bool:
        return self in (GuideDistribution.FRONT, GuideDistribution.FRONT_AND_BACK)

    @property
    def on_back(self) -> bool:
        return self in (GuideDistribution.BACK, GuideDistribution.FRONT_AND_BACK)


def _check_gap(gap: Size) -> None:
    if gap.width < ZERO or gap.height < ZERO:
        raise ValueError(f"gap must not be negative: {gap!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Method Variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Natural:
    """
    Single-sided printing, left to right.

    Every component is treated as a front, including backs pulled in by
    the order.

    Attributes:
        order: Which faces to arrange
        gap: Horizontal and vertical spacing between components
    """

    order: Order = Order.FRONTS_THEN_BACKS
    gap: Size = field(default_factory=Size.zero)

    def __post_init__(self) -> None:
        _check_gap(self.gap)


@dataclass(frozen=True)
class Duplex:
    """
    Double-sided printing: fronts on odd pages, backs on even pages.

    Back pages flow right to left so each back lands behind its front when
    the sheet is flipped. Portrait paper needs long-edge binding, landscape
    paper short-edge binding.

    Attributes:
        gap: Horizontal and vertical spacing between components
        guides: Which faces show trim/safe guides
    """

    gap: Size = field(default_factory=Size.zero)
    guides: GuideDistribution = GuideDistribution.BACK

    def __post_init__(self) -> None:
        _check_gap(self.gap)


@dataclass(frozen=True)
class Fold:
    """
    Fronts and backs on the same sheet, mirrored across a fold line.

    Attributes:
        gap: Spacing between components
        gutter: Distance from the fold line to each component's trim edge
        guides: Which faces show trim/safe guides
    """

    gap: Size = field(default_factory=Size.zero)
    gutter: Distance = DEFAULT_GUTTER
    guides: GuideDistribution = GuideDistribution.BACK

    def __post_init__(self) -> None:
        _check_gap(self.gap)
        if self.gutter < ZERO:
            raise ValueError(f"gutter must not be negative: {self.gutter!r}")


class ArrangementKind(Enum):
    PLACEMENT = auto()
    PAGEBREAK = auto()
    CUT = auto()
    FOLD = auto()


@dataclass(frozen=True)
class Arrangement:
    """
    One directive in a custom layout template.

    Build with the factory methods rather than the constructor.

    Example:
        >>> template = [
        ...     Arrangement.at(ZERO, ZERO),
        ...     Arrangement.at(inches(3), ZERO, turned=Turn.cw()),
        ...     Arrangement.cut(ZERO, inches(3.5), distance=inches(6)),
        ... ]
    """

    kind: ArrangementKind
    offset: Optional[Size] = None
    turn: Optional[Turn] = None
    distance: Optional[Distance] = None
    axis: Axis = Axis.HORIZONTAL

    def __post_init__(self) -> None:
        """Validate directive on construction."""
        if self.kind is not ArrangementKind.PAGEBREAK and self.offset is None:
            raise ValueError(f"{self.kind.name.lower()} directive requires an offset")
        if self.kind in (ArrangementKind.CUT, ArrangementKind.FOLD) and self.distance is None:
            raise ValueError(f"{self.kind.name.lower()} directive requires a distance")

    @classmethod
    def at(cls, x: Distance, y: Distance, turned: Optional[Turn] = None) -> Arrangement:
        """Slot for the next component, optionally rotated."""
        return cls(ArrangementKind.PLACEMENT, offset=Size(x, y), turn=turned)

    @classmethod
    def pagebreak(cls) -> Arrangement:
        return cls(ArrangementKind.PAGEBREAK)

    @classmethod
    def cut(
        cls,
        x: Distance,
        y: Distance,
        distance: Distance,
        vertically: bool = False,
    ) -> Arrangement:
        return cls(
            ArrangementKind.CUT,
            offset=Size(x, y),
            distance=distance,
            axis=Axis.VERTICAL if vertically else Axis.HORIZONTAL,
        )

    @classmethod
    def fold(
        cls,
        x: Distance,
        y: Distance,
        distance: Distance,
        vertically: bool = False,
    ) -> Arrangement:
        return cls(
            ArrangementKind.FOLD,
            offset=Size(x, y),
            distance=distance,
            axis=Axis.VERTICAL if vertically else Axis.HORIZONTAL,
        )

    @property
    def is_placement(self) -> bool:
        return self.kind is ArrangementKind.PLACEMENT


@dataclass(frozen=True)
class Custom:
    """
    Components put into pre-defined slots on a page.

    The template repeats until every component has been placed. Useful for
    matching a die-cutter or pre-perforated paper. Coordinates are relative
    to the page margins, and sizes may be mixed freely.

    Attributes:
        arrangements: Template directives, in order
        order: Which faces to arrange
    """

    arrangements: Tuple[Arrangement, ...]
    order: Order = Order.FRONTS_THEN_BACKS

    def __post_init__(self) -> None:
        object.__setattr__(self, "arrangements", tuple(self.arrangements))

    @property
    def placement_count(self) -> int:
        return sum(1 for a in self.arrangements if a.is_placement)


Method = Union[Natural, Duplex, Fold, Custom]


# ─────────────────────────────────────────────────────────────────────────────
# Layout
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Layout:
    """
    An ordered batch of components and the method that arranges them.

    Attributes:
        components: Front components, in order
        method: Natural, Duplex, Fold or Custom

    Example:
        >>> layout = Layout(cards, Duplex(gap=Size.square(millimeters(2))))
        >>> len(layout)
        52
    """

    components: Tuple[Component, ...]
    method: Method = field(default_factory=Natural)

    def __post_init__(self) -> None:
        """Validate layout on construction."""
        object.__setattr__(self, "components", tuple(self.components))
        if not isinstance(self.method, (Natural, Duplex, Fold, Custom)):
            raise TypeError(f"Unknown layout method: {self.method!r}")

    def __len__(self) -> int:
        return len(self.components)

    @property
    def is_empty(self) -> bool:
        return not self.components

    @property
    def backs(self) -> List[Component]:
        return [c.back for c in self.components if c.back is not None]

    def components_ordered_by(self, order: Order) -> List[Component]:
        """
        Components as seen by a method using `order`.

        Args:
            order: Ordering policy

        Returns:
            New list of components (fronts and/or backs)
        """
        if order is Order.SKIPPING_BACKS:
            return list(self.components)
        if order is Order.FRONTS_THEN_BACKS:
            return list(self.components) + self.backs
        if order is Order.INTERLEAVING_BACKS:
            return interleave(list(self.components), self.backs)
        raise ValueError(f"Unknown order: {order!r}")

    def with_components(self, components: Sequence[Component]) -> Layout:
        """Same method, different components."""
        return Layout(tuple(components), self.method)
