"""
Core Models Package

Immutable, validated value types shared by the arrangement engine.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. Layouts and papers can be reused across arrangements without copying
2. Components can be used as dict keys or in sets
3. Equal physical sizes compare equal, whatever unit they were built in
"""

from .units import (
    Distance,
    Unit,
    ZERO,
    inches,
    millimeters,
    centimeters,
    points,
)
from .geometry import Size, Area
from .paper import Paper, A4, LETTER
from .component import Component, Zones

__all__ = [
    "Distance",
    "Unit",
    "ZERO",
    "inches",
    "millimeters",
    "centimeters",
    "points",
    "Size",
    "Area",
    "Paper",
    "A4",
    "LETTER",
    "Component",
    "Zones",
]
