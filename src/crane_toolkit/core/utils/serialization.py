"""
Serialization Utilities

Provides to/from JSON utilities for the warehouse and run results.

- `serialize_*` / `deserialize_*` pairs wrap the models' `to_dict()`
  and `from_dict()` methods
- Validation via schemas before deserialization and after serialization
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..models.warehouse import Warehouse
from ..schemas.validator import validate_result, validate_warehouse

if TYPE_CHECKING:
    from crane_toolkit.controller import SolveResult


# ─────────────────────────────────────────────────────────────────────────────
# Warehouse Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_warehouse(warehouse: Warehouse) -> dict[str, Any]:
    """
    Serialize a Warehouse to a dictionary.

    The output can be written to JSON and will pass schema validation.
    """
    return warehouse.to_dict()


def deserialize_warehouse(data: dict[str, Any], *, validate: bool = True) -> Warehouse:
    """
    Deserialize a Warehouse from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first

    Returns:
        Warehouse instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_warehouse(data)
    return Warehouse.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_result(result: SolveResult, *, validate: bool = True) -> dict[str, Any]:
    """
    Serialize a SolveResult to a dictionary.

    Args:
        result: Result of a crane run
        validate: Whether to check the output against the result schema

    Raises:
        ValidationError: If validate=True and the output is invalid
    """
    data = result.to_dict()
    if validate:
        validate_result(data)
    return data


def result_to_json(result: SolveResult, *, indent: int = 2) -> str:
    """Serialize a SolveResult to a validated JSON string."""
    return json.dumps(serialize_result(result), indent=indent)
