"""
Serialization Utilities

Exports arranged pages as a JSON page document for rendering collaborators.

Every distance is written as `{"value": float, "unit": str}` in its display
unit, so a document built from millimeter paper and inch cards keeps both.
Documents are validated against the packaged schema before they are written
and after they are read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from boardgame_toolkit.sheet.config import SheetDescription
from boardgame_toolkit.sheet.layout.models import Guide, Page, PlacedComponent

from ..models import Component, Distance, Paper, Size
from ..schemas.validator import (
    PAGE_DOCUMENT_SCHEMA_VERSION,
    ValidationError,
    validate_page_document,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Value Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_distance(distance: Distance) -> dict[str, Any]:
    return {"value": distance.value, "unit": str(distance.unit)}


def serialize_size(size: Size) -> dict[str, Any]:
    return {
        "width": serialize_distance(size.width),
        "height": serialize_distance(size.height),
    }


def serialize_component(component: Component) -> dict[str, Any]:
    """
    Serialize the parts of a component a renderer needs to place artwork.

    Backs are not nested; each face is its own placement on a page.
    """
    data: dict[str, Any] = {
        "size": serialize_size(component.size),
        "bleed": serialize_distance(component.bleed),
        "trim": serialize_distance(component.trim),
    }
    if component.name:
        data["name"] = component.name
    if component.is_blank:
        data["is_blank"] = True
    return data


# ─────────────────────────────────────────────────────────────────────────────
# Page Serialization
# ─────────────────────────────────────────────────────────────────────────────

def _serialize_placement(placed: PlacedComponent) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": "component",
        "component": serialize_component(placed.component),
        "x": serialize_distance(placed.x),
        "y": serialize_distance(placed.y),
        "guides": placed.guides,
    }
    if placed.turn is not None:
        data["turn"] = placed.turn.clockwise
    return data


def _serialize_guide(guide: Guide) -> dict[str, Any]:
    return {
        "type": "guide",
        "kind": str(guide.kind),
        "x": serialize_distance(guide.x),
        "y": serialize_distance(guide.y),
        "distance": serialize_distance(guide.distance),
        "axis": str(guide.axis),
        "thickness": serialize_distance(guide.thickness),
    }


def serialize_page(page: Page) -> dict[str, Any]:
    """
    Serialize a Page to a dictionary.

    Elements keep their paint order: guides first, then components.

    Args:
        page: Arranged page

    Returns:
        Dictionary suitable for JSON serialization
    """
    elements = []
    for element in page.elements:
        if isinstance(element, PlacedComponent):
            elements.append(_serialize_placement(element))
        elif isinstance(element, Guide):
            elements.append(_serialize_guide(element))
        else:
            raise TypeError(f"Unknown page element: {element!r}")

    return {
        "extent": serialize_size(page.extent),
        "mode": str(page.mode),
        "elements": elements,
    }


def serialize_pages(
    pages: Sequence[Page],
    paper: Paper,
    description: Optional[SheetDescription] = None,
) -> dict[str, Any]:
    """
    Serialize arranged pages into a page document.

    Args:
        pages: Pages in output order
        paper: Paper the pages were arranged on
        description: Optional document metadata

    Returns:
        Dictionary that passes validate_page_document()
    """
    data: dict[str, Any] = {
        "schema_version": PAGE_DOCUMENT_SCHEMA_VERSION,
        "paper": {
            "extent": serialize_size(paper.extent),
            "margin": serialize_size(paper.margin),
        },
        "pages": [serialize_page(page) for page in pages],
    }
    if description is not None:
        data["description"] = description.to_dict()
    return data


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def save_document(
    path: Path,
    pages: Sequence[Page],
    paper: Paper,
    description: Optional[SheetDescription] = None,
) -> Path:
    """
    Validate and save a page document as JSON.

    Args:
        path: Output path
        pages: Pages in output order
        paper: Paper the pages were arranged on
        description: Optional document metadata

    Returns:
        Path written

    Raises:
        ValidationError: If the serialized document is invalid
    """
    path = Path(path)
    data = serialize_pages(pages, paper, description)
    validate_page_document(data)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved {len(pages)} pages to {path}")
    return path


def load_document(path: Path) -> dict[str, Any]:
    """
    Load and validate a page document.

    Args:
        path: Path to a document written by save_document()

    Returns:
        Document dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Page document not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Error parsing {path.name}: {e}",
                path=str(path),
                errors=[str(e)]
            ) from e

    validate_page_document(data)
    return data
