"""
Module: units

Purpose:
    Provides the Distance value type - a physical length that keeps track
    of the unit it was given in. All geometry in the toolkit is built from
    Distances so that inches and millimeters can be mixed freely.

Key Functions:
    - inches(), millimeters(), centimeters(), points(): Constructors
    - Distance.of(value, unit): Generic constructor
    - Distance.parse(text): Parse "2.5in", "8 mm", "40pt"
    - Distance.to(unit): Convert to a float in another unit

Dependencies:
    - decimal (std)
    - dataclasses (std)

Used By:
    - core.models.geometry: Size, Area
    - core.models.paper: Paper
    - core.models.component: Component
    - sheet.layout: All placement arithmetic

Design Notes:
    Lengths are stored as Decimal millimeters quantized to 1e-9. Inches,
    centimeters and millimeters convert exactly, so building the same
    physical length from different units yields equal Distances,
    which the size-splitting logic relies on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_EVEN
from enum import Enum
from typing import Union


class Unit(str, Enum):
    """Length units understood by Distance."""
    INCHES = "in"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    POINTS = "pt"

    def __str__(self) -> str:
        return self.value


UNITS_TO_MM: dict[Unit, Decimal] = {
    Unit.INCHES: Decimal("25.4"),
    Unit.MILLIMETERS: Decimal("1"),
    Unit.CENTIMETERS: Decimal("10"),
    Unit.POINTS: Decimal("25.4") / Decimal("72"),
}

_QUANTUM = Decimal("1E-9")

_DISTANCE_RE = re.compile(r"^\s*(-?(?:\d+(?:\.\d+)?|\.\d+))\s*([a-zA-Z]+)\s*$")

Number = Union[int, float, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    return Decimal(str(value))


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True, slots=True, order=True)
class Distance:
    """
    Physical length (immutable).

    Attributes:
        mm: Canonical length in millimeters
        unit: Display unit; ignored by equality, ordering and hashing

    Example:
        >>> millimeters(25.4) == inches(1)
        True
        >>> (inches(1) + millimeters(10)).to(Unit.MILLIMETERS)
        35.4
    """

    mm: Decimal
    unit: Unit = field(default=Unit.INCHES, compare=False)

    def __post_init__(self) -> None:
        """Normalize the canonical value."""
        object.__setattr__(self, "mm", _quantize(_to_decimal(self.mm)))
        object.__setattr__(self, "unit", Unit(self.unit))

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def of(cls, value: Number, unit: Unit | str) -> Distance:
        """
        Create a Distance from a value expressed in the given unit.

        Args:
            value: Magnitude in `unit`
            unit: Unit or unit symbol ("in", "mm", "cm", "pt")

        Returns:
            Distance displayed in `unit`
        """
        unit = Unit(unit)
        return cls(_to_decimal(value) * UNITS_TO_MM[unit], unit)

    @classmethod
    def parse(cls, text: str) -> Distance:
        """
        Parse a distance such as "2.5in" or "8 mm".

        Raises:
            ValueError: If the text is not a number followed by a known unit
        """
        match = _DISTANCE_RE.match(text)
        if not match:
            raise ValueError(f"Invalid distance: {text!r}")
        value, symbol = match.groups()
        try:
            unit = Unit(symbol.lower())
        except ValueError:
            raise ValueError(f"Unknown unit {symbol!r} in {text!r}") from None
        return cls.of(Decimal(value), unit)

    # ─────────────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────────────

    def to(self, unit: Unit | str) -> float:
        """Magnitude of this distance in another unit."""
        unit = Unit(unit)
        return float(self.mm / UNITS_TO_MM[unit])

    @property
    def value(self) -> float:
        """Magnitude in the display unit."""
        return self.to(self.unit)

    def in_unit(self, unit: Unit | str) -> Distance:
        """Same length, displayed in another unit."""
        return Distance(self.mm, Unit(unit))

    # ─────────────────────────────────────────────────────────────────────────
    # Arithmetic
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: Distance) -> Distance:
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.mm + other.mm, self.unit)

    def __sub__(self, other: Distance) -> Distance:
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.mm - other.mm, self.unit)

    def __neg__(self) -> Distance:
        return Distance(-self.mm, self.unit)

    def __abs__(self) -> Distance:
        return Distance(abs(self.mm), self.unit)

    def __mul__(self, factor: Number) -> Distance:
        if isinstance(factor, Distance):
            return NotImplemented
        return Distance(self.mm * _to_decimal(factor), self.unit)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Distance:
        if isinstance(divisor, Distance):
            return NotImplemented
        return Distance(self.mm / _to_decimal(divisor), self.unit)

    def __bool__(self) -> bool:
        return self.mm != 0

    def __repr__(self) -> str:
        return f"Distance({self.value:g}{self.unit})"


ZERO = Distance(Decimal(0))


def inches(value: Number) -> Distance:
    """Physical inches."""
    return Distance.of(value, Unit.INCHES)


def millimeters(value: Number) -> Distance:
    return Distance.of(value, Unit.MILLIMETERS)


def centimeters(value: Number) -> Distance:
    return Distance.of(value, Unit.CENTIMETERS)


def points(value: Number) -> Distance:
    """Typographic points (1/72 inch)."""
    return Distance.of(value, Unit.POINTS)
