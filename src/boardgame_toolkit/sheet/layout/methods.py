"""
Module: sheet.layout.methods

Purpose:
    The four arrangement algorithms, one function per method variant.

Key Functions:
    - arrange_layout(): Dispatch a Layout to its method
    - arrange_natural(): Single-sided, left to right
    - arrange_duplex(): Front pages interleaved with mirrored back pages
    - arrange_fold(): Fronts above a fold line, backs mirrored below
    - arrange_custom(): Fill a repeating template of slots

Dependencies:
    - core.models: Component, Paper, Size
    - .layout: Layout and method variants
    - .packer: arrange_left_to_right, interleave
    - .models: Page, Turn, Axis, CoordinateMode

Used By:
    - sheet.controller: Runs every (split) layout
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from boardgame_toolkit.core.models import ZERO, Paper, Size

from ..errors import ArrangementError, InternalLayoutError
from .layout import (
    ArrangementKind,
    Custom,
    Duplex,
    Fold,
    Layout,
    Natural,
)
from .models import Axis, CoordinateMode, Page, Turn
from .packer import arrange_left_to_right, interleave

logger = logging.getLogger(__name__)


def arrange_natural(layout: Layout, method: Natural, paper: Paper) -> List[Page]:
    """
    Arrange components for single-sided printing.

    Every component is treated as a front, even when the order pulls in
    backs; no back pages are produced.
    """
    components = layout.components_ordered_by(method.order)
    return arrange_left_to_right(
        components,
        paper,
        method.gap,
        guides=True,
    )


def arrange_duplex(layout: Layout, method: Duplex, paper: Paper) -> List[Page]:
    """
    Arrange components for double-sided printing.

    Fronts flow left to right; backs (or blank placeholders for components
    without one) flow right to left so they line up once the sheet is
    flipped. Front and back pages alternate.

    Raises:
        InternalLayoutError: If fronts and backs do not pair up into an
            even number of pages
    """
    fronts = list(layout.components)
    front_pages = arrange_left_to_right(
        fronts,
        paper,
        method.gap,
        guides=method.guides.on_front,
    )

    backs = [front.back_or_blank() for front in fronts]
    back_pages = arrange_left_to_right(
        backs,
        paper,
        method.gap,
        reverse=True,
        guides=method.guides.on_back,
    )

    pages = interleave(front_pages, back_pages)
    if len(pages) % 2 != 0:
        raise InternalLayoutError(
            f"Duplex arrangement produced an odd number of pages: "
            f"{len(front_pages)} front pages, {len(back_pages)} back pages"
        )
    return pages


def arrange_fold(layout: Layout, method: Fold, paper: Paper) -> List[Page]:
    """
    Arrange fronts and backs on the same sheet, mirrored across a fold.

    Fronts are packed into the upper half of the sheet. The upper region
    runs from the top margin to `gutter` short of the middle, measured to the
    trim edge rather than the bleed edge, so the bleed of the lowest row may
    reach closer to the fold than the gutter. Each back is placed mirrored
    below the fold line: landscape components unturned (they fold on a
    left/right edge), portrait components turned 180 degrees (they fold on
    their bottom edge).

    Raises:
        InternalLayoutError: If the first component does not fit the upper region
    """
    fronts = list(layout.components)
    if not fronts:
        return []

    reference = fronts[0]
    real = reference.zones.real
    bounds = paper.inner_bounds

    bounded = Size(
        bounds.width,
        (bounds.height / 2 - method.gutter) + real.bottom,
    )
    if not reference.portrait_oriented_extent.fits_within(bounded):
        raise InternalLayoutError(
            f"Component of size {reference.portrait_oriented_extent!r} does not fit "
            f"the folding region {bounded!r}; reduce the margin, bleed or gutter"
        )

    upper_pages = arrange_left_to_right(
        fronts,
        Paper.marginless(bounded),
        method.gap,
        guides=method.guides.on_front,
    )

    pages: List[Page] = []
    for arranged in upper_pages:
        page = Page(paper.extent)
        box = arranged.bounding_box
        fold_offset = box.height - real.bottom + method.gutter

        # Fold spans the inner width; x is relative to the centred content block
        page.fold(
            ZERO - (bounds.width / 2 - box.width / 2),
            fold_offset,
            distance=bounds.width,
            axis=Axis.HORIZONTAL,
        )

        bottom = fold_offset + method.gutter - real.bottom + box.height
        for placed in arranged.components:
            page.arrange(
                placed.component,
                placed.x,
                placed.y,
                placed.turn,
                guides=placed.guides,
            )
            component = placed.component
            turn = None if component.is_landscape else Turn.cw(2)
            back_y = bottom - component.portrait_oriented_extent.height - placed.y
            page.arrange(
                component.back_or_blank(),
                placed.x,
                back_y,
                turn,
                guides=method.guides.on_back,
            )

        pages.append(page)

    return pages


def arrange_custom(layout: Layout, method: Custom, paper: Paper) -> List[Page]:
    """
    Put components into the template's slots, repeating it until all are placed.

    Placement directives take the next component and are skipped once none
    are left; cut and fold directives always apply; a pagebreak starts a new
    page mid-template.

    Raises:
        ArrangementError: If the template has no placement directive
    """
    if method.placement_count == 0:
        raise ArrangementError("Custom arrangement has no placements; it would never finish")

    # Reversed so pop() yields components front to back
    remaining = list(reversed(layout.components_ordered_by(method.order)))

    pages: List[Page] = []
    while remaining:
        page = Page(paper.extent, CoordinateMode.RELATIVE_TO_PAGE_MARGINS)

        for arrangement in method.arrangements:
            offset = arrangement.offset
            if arrangement.kind is ArrangementKind.PLACEMENT:
                if not remaining:
                    continue
                page.arrange(
                    remaining.pop(),
                    offset.width,
                    offset.height,
                    arrangement.turn,
                    guides=True,
                )
            elif arrangement.kind is ArrangementKind.PAGEBREAK:
                pages.append(page)
                page = Page(paper.extent, CoordinateMode.RELATIVE_TO_PAGE_MARGINS)
            elif arrangement.kind is ArrangementKind.CUT:
                page.cut(offset.width, offset.height, arrangement.distance, arrangement.axis)
            elif arrangement.kind is ArrangementKind.FOLD:
                page.fold(offset.width, offset.height, arrangement.distance, arrangement.axis)

        pages.append(page)

    return pages


_METHODS: Dict[type, Callable[..., List[Page]]] = {
    Natural: arrange_natural,
    Duplex: arrange_duplex,
    Fold: arrange_fold,
    Custom: arrange_custom,
}


def arrange_layout(layout: Layout, paper: Paper) -> List[Page]:
    """
    Arrange a single layout with its own method.

    Args:
        layout: Components and method
        paper: Target paper

    Returns:
        Pages produced by the method, in order
    """
    arrange = _METHODS.get(type(layout.method))
    if arrange is None:
        raise TypeError(f"Unknown layout method: {layout.method!r}")

    pages = arrange(layout, layout.method, paper)
    logger.debug(
        f"{type(layout.method).__name__} layout: "
        f"{len(layout)} components onto {len(pages)} pages"
    )
    return pages
