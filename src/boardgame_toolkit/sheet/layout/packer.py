"""
Module: sheet.layout.packer

Purpose:
    Flow components onto pages in rows, left to right and top to bottom.
    Shared by the natural, duplex and fold methods.

Key Functions:
    - arrange_left_to_right(): Row-fill components onto pages
    - interleave(): Alternate the items of two lists

Algorithm:
    Greedy, single pass, insertion order preserved:
    1. Buffer each component at the current (x, y) offset
    2. Advance x; wrap to the next row when the next right edge would
       exceed the paper's inner width
    3. Flush the buffer as a page when the next bottom edge would exceed
       the paper's inner height
    4. Flush whatever is left as the final page

    Offsets are buffered rather than placed right away because a reverse
    (right-to-left) flow needs the width of the finished block to mirror
    each position.

Dependencies:
    - core.models: Component, Paper, Size
    - .models: Page

Used By:
    - sheet.layout.methods: natural, duplex, fold
    - sheet.layout.layout: Order.INTERLEAVING_BACKS
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, TypeVar

from boardgame_toolkit.core.models import ZERO, Component, Paper, Size

from ..errors import OutOfBoundsError
from .models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")


def interleave(first: Sequence[T], second: Sequence[T]) -> List[T]:
    """
    Alternate items from two sequences.

    Once the shorter sequence runs out, the rest of the longer one follows.

    Example:
        >>> interleave([1, 2, 3], ["a"])
        [1, 'a', 2, 3]
    """
    merged: List[T] = []
    for index in range(max(len(first), len(second))):
        if index < len(first):
            merged.append(first[index])
        if index < len(second):
            merged.append(second[index])
    return merged


def arrange_left_to_right(
    components: Sequence[Component],
    paper: Paper,
    spacing: Size,
    *,
    reverse: bool = False,
    guides: bool = False,
) -> List[Page]:
    """
    Arrange components in rows across as many pages as needed.

    Args:
        components: Components to place, in order
        paper: Paper whose inner bounds limit each row and page
        spacing: Horizontal (width) and vertical (height) gap between components
        reverse: Mirror each row so the flow runs right to left
        guides: Mark every placement as carrying guide overlays

    Returns:
        Pages in bounding-box coordinate mode, each sized like the paper

    Raises:
        ValueError: If spacing is negative
        OutOfBoundsError: If a component does not fit the paper's inner bounds

    Example:
        >>> pages = arrange_left_to_right(cards, A4, Size.zero())
        >>> len(pages[0].components)
        9
    """
    if spacing.width < ZERO or spacing.height < ZERO:
        raise ValueError(f"spacing must not be negative: {spacing!r}")

    bounds = paper.inner_bounds
    pages: List[Page] = []

    page = Page(paper.extent)
    content: List[Tuple[Size, Component]] = []
    x = ZERO
    y = ZERO

    def flush() -> None:
        offsets: List[Size] = []
        for offset, component in content:
            offsets.append(offset)
            offsets.append(offset + component.portrait_oriented_extent)
        box = Size.containing_offsets(offsets)

        for offset, component in content:
            if reverse:
                mirrored_x = box.width - offset.width - component.portrait_oriented_extent.width
                page.arrange(component, mirrored_x, offset.height, guides=guides)
            else:
                page.arrange(component, offset.width, offset.height, guides=guides)

        logger.debug(
            f"Flushed page {len(pages)} with {len(content)} components "
            f"({'right-to-left' if reverse else 'left-to-right'})"
        )
        content.clear()
        pages.append(page)

    for component in components:
        extent = component.portrait_oriented_extent
        if not extent.fits_within(bounds):
            raise OutOfBoundsError(extent, bounds)

        offset = Size(x, y)
        content.append((offset, component))

        x = offset.width + extent.width + spacing.width

        # Wrap when the next component of this size would cross the right edge
        if x + extent.width > bounds.width:
            x = ZERO
            y = offset.height + extent.height + spacing.height

        # New page when the next row would cross the bottom edge
        if y + extent.height > bounds.height:
            flush()
            page = Page(paper.extent)
            x = ZERO
            y = ZERO

    if content:
        flush()

    return pages
