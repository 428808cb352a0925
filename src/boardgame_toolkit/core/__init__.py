"""
Boardgame Toolkit Core Package

Shared value types (lengths, sizes, paper, components), the page document
schema, and serialization helpers. Everything the arrangement engine in
`boardgame_toolkit.sheet` builds on lives here.
"""

from .models import (
    Distance,
    Unit,
    Size,
    Area,
    Paper,
    Component,
    Zones,
)

__all__ = [
    "Distance",
    "Unit",
    "Size",
    "Area",
    "Paper",
    "Component",
    "Zones",
]
