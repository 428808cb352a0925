"""
Module: sheet.controller

Purpose:
    Orchestrate arranging a whole sheet.
    Validate → Split by size → Arrange each layout → Concatenate

Key Functions:
    - arrange_sheet(): Main entry point
    - validate_fit(): Reject components larger than the paper
    - split_by_size(): Break layouts into runs of equally sized components

Key Classes:
    - ArrangementResult: Pages plus warnings

Dependencies:
    - sheet.layout: Layout methods
    - sheet.config: SheetConfig
    - sheet.errors: OutOfBoundsError

Used By:
    - core.utils.serialization.save_document() callers
    - Rendering collaborators consuming the page model
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from boardgame_toolkit.core.models import Component, Paper, Size

from .config import SheetConfig
from .errors import OutOfBoundsError
from .layout import Custom, Layout, Order, Page, arrange_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArrangementResult:
    """
    Arranged pages with diagnostics (immutable).

    Attributes:
        pages: Pages in output order
        paper: Paper the pages were arranged on
        warnings: Messages about degenerate input

    Example:
        >>> result = arrange_sheet(config)
        >>> result.page_count
        6
    """

    pages: tuple[Page, ...]
    paper: Paper
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of placed components across all pages."""
        return sum(len(page.components) for page in self.pages)


def validate_fit(layouts: Sequence[Layout], paper: Paper) -> None:
    """
    Check every component, fronts and backs, against the paper's inner bounds.

    Args:
        layouts: Layouts to check
        paper: Target paper

    Raises:
        OutOfBoundsError: For the first component that does not fit
    """
    bounds = paper.inner_bounds
    for layout in layouts:
        for component in layout.components_ordered_by(Order.FRONTS_THEN_BACKS):
            extent = component.portrait_oriented_extent
            if not extent.fits_within(bounds):
                raise OutOfBoundsError(extent, bounds)


def split_by_size(layouts: Sequence[Layout]) -> List[Layout]:
    """
    Split layouts so that each one holds a single component size.

    Consecutive components sharing a portrait-oriented extent stay together;
    a size change starts a new layout with the same method, which forces a
    page break. Custom layouts are kept as they are since their slots may
    mix sizes on purpose.

    Args:
        layouts: Layouts in output order

    Returns:
        Layouts in the same order, components in the same order
    """
    split: List[Layout] = []
    for layout in layouts:
        if isinstance(layout.method, Custom):
            split.append(layout)
            continue

        chunks: List[List[Component]] = []
        previous: Optional[Size] = None
        for component in layout.components:
            extent = component.portrait_oriented_extent
            if previous is None or extent != previous:
                chunks.append([])
            chunks[-1].append(component)
            previous = extent

        if len(chunks) > 1:
            logger.debug(
                f"Split {type(layout.method).__name__} layout of {len(layout)} "
                f"components into {len(chunks)} runs by size"
            )
        split.extend(layout.with_components(chunk) for chunk in chunks)
    return split


def arrange_sheet(config: SheetConfig) -> ArrangementResult:
    """
    Arrange every layout of a sheet onto pages.

    Pipeline:
    1. Reject any component that does not fit the paper
    2. Split layouts into runs of equally sized components
    3. Arrange each layout with its method
    4. Concatenate pages in layout order

    Args:
        config: Paper and layouts

    Returns:
        ArrangementResult with pages and warnings

    Raises:
        OutOfBoundsError: If a component is larger than the paper's inner bounds
        ArrangementError: If a custom template has no placements
        InternalLayoutError: If a method breaks one of its invariants

    Example:
        >>> config = SheetConfig.portrait([Layout(cards, Natural())])
        >>> result = arrange_sheet(config)
        >>> print(f"Arranged {result.total_placements} components")
    """
    warnings: List[str] = []

    if not config.layouts:
        message = "Configuration did not provide any layouts; nothing arranged"
        logger.warning(message)
        return ArrangementResult(pages=(), paper=config.paper, warnings=(message,))

    for index, layout in enumerate(config.layouts):
        if layout.is_empty:
            message = f"Layout {index} has no components; skipped"
            logger.warning(message)
            warnings.append(message)

    validate_fit(config.layouts, config.paper)

    pages: List[Page] = []
    for layout in split_by_size(config.layouts):
        pages.extend(arrange_layout(layout, config.paper))

    logger.info(
        f"Arranged {config.component_count} components from "
        f"{len(config.layouts)} layouts onto {len(pages)} pages"
    )

    return ArrangementResult(
        pages=tuple(pages),
        paper=config.paper,
        warnings=tuple(warnings),
    )
