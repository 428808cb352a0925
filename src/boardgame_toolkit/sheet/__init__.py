"""
Module: sheet

Purpose:
    Arrangement engine for printing boardgame components.
    Validates component sizes against the paper, splits mixed-size layouts,
    and arranges each layout into pages of positioned components and
    cut/fold guides.

Key Functions:
    - arrange_sheet(): Main entry point for arranging a sheet
    - split_by_size(): Force page breaks between component sizes
    - validate_fit(): Reject oversized components up front

Key Classes:
    - SheetConfig: Paper plus layouts
    - Layout: Components plus method
    - Page: Arranged sheet
    - ArrangementResult: Pages plus warnings

Dependencies:
    - boardgame_toolkit.core.models: Units, geometry, paper, components

Used By:
    - Rendering collaborators that turn pages into markup or PDF
"""

from .config import SheetConfig, SheetDescription
from .errors import (
    ArrangementError,
    InternalLayoutError,
    OutOfBoundsError,
    SheetError,
)
from .layout import (
    Arrangement,
    Custom,
    Duplex,
    Fold,
    GuideDistribution,
    Layout,
    Natural,
    Order,
    Page,
    Turn,
)
from .controller import ArrangementResult, arrange_sheet, split_by_size, validate_fit

__all__ = [
    # Config
    "SheetConfig",
    "SheetDescription",
    # Errors
    "SheetError",
    "OutOfBoundsError",
    "ArrangementError",
    "InternalLayoutError",
    # Layout
    "Arrangement",
    "Custom",
    "Duplex",
    "Fold",
    "GuideDistribution",
    "Layout",
    "Natural",
    "Order",
    "Page",
    "Turn",
    # Controller
    "arrange_sheet",
    "split_by_size",
    "validate_fit",
    "ArrangementResult",
]
