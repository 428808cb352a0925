"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_page_document,
    ValidationError,
    PAGE_DOCUMENT_SCHEMA_VERSION,
)

__all__ = [
    "validate_page_document",
    "ValidationError",
    "PAGE_DOCUMENT_SCHEMA_VERSION",
]
