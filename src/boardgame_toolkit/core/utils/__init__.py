"""
Utils Package

Page document serialization.
"""

from .serialization import (
    serialize_distance,
    serialize_size,
    serialize_component,
    serialize_page,
    serialize_pages,
    save_document,
    load_document,
)

__all__ = [
    "serialize_distance",
    "serialize_size",
    "serialize_component",
    "serialize_page",
    "serialize_pages",
    "save_document",
    "load_document",
]
