"""
Module: sheet.errors

Purpose:
    Exceptions raised while arranging components onto pages.

Key Classes:
    - SheetError: Base class for arrangement failures
    - OutOfBoundsError: A component does not fit the paper
    - ArrangementError: A custom layout template is unusable
    - InternalLayoutError: An algorithm invariant was broken

Used By:
    - sheet.layout.packer
    - sheet.layout.methods
    - sheet.controller
"""

from __future__ import annotations

from typing import Optional

from boardgame_toolkit.core.models import Size


class SheetError(Exception):
    """Error while arranging a sheet."""
    pass


class OutOfBoundsError(SheetError):
    """
    Raised when a component is larger than the area it must fit in.

    Attributes:
        size: Portrait-oriented extent of the offending component
        bounds: Area it was checked against
    """

    def __init__(self, size: Size, bounds: Optional[Size] = None):
        message = f"Component of size {size!r} does not fit"
        if bounds is not None:
            message += f" within {bounds!r}"
        super().__init__(message)
        self.size = size
        self.bounds = bounds


class ArrangementError(SheetError):
    """Raised when a custom arrangement template cannot be used."""
    pass


class InternalLayoutError(SheetError):
    """Raised when a layout algorithm produces a state it should never reach."""
    pass
