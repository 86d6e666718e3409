"""
Schema Validation Utilities

Validates warehouse snapshots and run results against the JSON schemas
shipped next to this module. Fails fast: every violation is collected
into one ValidationError instead of being fixed up silently.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


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


def validate_warehouse(data: dict[str, Any]) -> None:
    """
    Validate a serialized warehouse.

    Args:
        data: Dictionary of the form {"stacks": [[...], ...]}

    Raises:
        ValidationError: If data is invalid
    """
    _validate(data, "warehouse")


def validate_result(data: dict[str, Any]) -> None:
    """
    Validate a serialized solve result.

    Raises:
        ValidationError: If data is invalid
    """
    _validate(data, "result")
    stack_count = len(data["warehouse"]["stacks"])
    if data["stack_count"] != stack_count:
        raise ValidationError(
            f"stack_count {data['stack_count']} does not match "
            f"{stack_count} stacks in warehouse",
            path="stack_count",
        )
    if len(data["top_of_stacks"]) != stack_count:
        raise ValidationError(
            f"top_of_stacks has {len(data['top_of_stacks'])} characters "
            f"for {stack_count} stacks",
            path="top_of_stacks",
        )


def _validate(data: Any, schema_name: str) -> None:
    validator = jsonschema.Draft7Validator(_load_schema(schema_name))
    errors = sorted(
        validator.iter_errors(data),
        key=lambda e: "/".join(str(p) for p in e.path),
    )
    if errors:
        first = errors[0]
        path = "/".join(str(p) for p in first.path)
        raise ValidationError(
            f"Invalid {schema_name}: {first.message}",
            path=path,
            errors=[e.message for e in errors],
        )
