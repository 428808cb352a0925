"""
Schema Validation Utilities

Validates exported page documents before they are written.

Two passes:
- Cheap structural checks (required fields, schema version) with precise
  error paths
- Full JSON Schema validation against the packaged
  `page_document.schema.json`
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
PAGE_DOCUMENT_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_page_document(data: dict[str, Any]) -> None:
    """
    Validate an exported page document.

    Args:
        data: Document dictionary, as produced by serialize_pages()

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Page document must be a dict, got {type(data).__name__}")

    required = ["schema_version", "paper", "pages"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != PAGE_DOCUMENT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported page document schema version: {version} "
            f"(expected {PAGE_DOCUMENT_SCHEMA_VERSION})",
            path="schema_version"
        )

    pages = data.get("pages")
    if not isinstance(pages, list):
        raise ValidationError("pages must be a list", path="pages")

    schema = _load_schema("page_document")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message]
        ) from e
