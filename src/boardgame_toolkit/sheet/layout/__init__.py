"""
Module: sheet.layout

Purpose:
    Page arrangement for a single layout.
    Turns an ordered batch of components into positioned pages using one
    of four methods: natural, duplex, fold or custom.

Key Functions:
    - arrange_layout(): Run a layout's method
    - arrange_left_to_right(): Shared row-fill packer

Key Classes:
    - Layout: Components plus method
    - Natural, Duplex, Fold, Custom: Method variants
    - Arrangement: Custom template directive
    - Page: Arranged sheet

Dependencies:
    - boardgame_toolkit.core.models: Component, Paper, Size, Distance

Used By:
    - sheet.controller: Sheet orchestration
"""

from .models import (
    Axis,
    CoordinateMode,
    Guide,
    GuideKind,
    Page,
    PlacedComponent,
    Turn,
)
from .layout import (
    Arrangement,
    ArrangementKind,
    Custom,
    Duplex,
    Fold,
    GuideDistribution,
    Layout,
    Method,
    Natural,
    Order,
)
from .packer import arrange_left_to_right, interleave
from .methods import (
    arrange_custom,
    arrange_duplex,
    arrange_fold,
    arrange_layout,
    arrange_natural,
)

__all__ = [
    # Models
    "Axis",
    "CoordinateMode",
    "Guide",
    "GuideKind",
    "Page",
    "PlacedComponent",
    "Turn",
    # Layout
    "Arrangement",
    "ArrangementKind",
    "Custom",
    "Duplex",
    "Fold",
    "GuideDistribution",
    "Layout",
    "Method",
    "Natural",
    "Order",
    # Functions
    "arrange_left_to_right",
    "interleave",
    "arrange_layout",
    "arrange_natural",
    "arrange_duplex",
    "arrange_fold",
    "arrange_custom",
]
