"""
Module: sheet.config

Purpose:
    Configuration dataclasses for arranging a sheet. Immutable
    configuration with validation on construction.

Key Classes:
    - SheetConfig: Paper plus the layouts to arrange on it
    - SheetDescription: Document metadata carried into exports

Dependencies:
    - dataclasses (std)
    - core.models.paper: Paper, A4
    - sheet.layout: Layout

Used By:
    - sheet.controller: arrange_sheet()
    - core.utils.serialization: Document export
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from boardgame_toolkit.core.models import A4, Paper

from .layout import Layout


@dataclass(frozen=True)
class SheetDescription:
    """
    Document metadata (immutable).

    Attributes:
        title: Document title
        author: Author name
        copyright: Copyright notice
    """

    title: Optional[str] = None
    author: Optional[str] = None
    copyright: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            key: value
            for key, value in (
                ("title", self.title),
                ("author", self.author),
                ("copyright", self.copyright),
            )
            if value is not None
        }


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for arranging a sheet (immutable).

    Attributes:
        paper: Paper every layout is arranged on
        layouts: Layouts, in output order
        description: Optional document metadata

    Example:
        >>> config = SheetConfig.portrait([Layout(cards, Duplex())])
        >>> config.paper == A4
        True
    """

    paper: Paper
    layouts: Tuple[Layout, ...] = field(default_factory=tuple)
    description: Optional[SheetDescription] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.paper, Paper):
            raise TypeError(f"paper must be a Paper: {self.paper!r}")
        object.__setattr__(self, "layouts", tuple(self.layouts))
        for layout in self.layouts:
            if not isinstance(layout, Layout):
                raise TypeError(f"layouts must contain Layout objects: {layout!r}")

    @classmethod
    def portrait(
        cls,
        layouts: Sequence[Layout],
        paper: Paper = A4,
        description: Optional[SheetDescription] = None,
    ) -> SheetConfig:
        """Configuration on `paper` turned to portrait orientation."""
        return cls(paper=paper.portrait, layouts=tuple(layouts), description=description)

    @classmethod
    def landscape(
        cls,
        layouts: Sequence[Layout],
        paper: Paper = A4,
        description: Optional[SheetDescription] = None,
    ) -> SheetConfig:
        """Configuration on `paper` turned to landscape orientation."""
        return cls(paper=paper.landscape, layouts=tuple(layouts), description=description)

    @property
    def component_count(self) -> int:
        return sum(len(layout) for layout in self.layouts)
