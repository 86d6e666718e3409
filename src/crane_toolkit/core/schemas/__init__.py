"""JSON schemas for warehouse snapshots and run results."""

from .validator import validate_warehouse, validate_result, ValidationError

__all__ = [
    "validate_warehouse",
    "validate_result",
    "ValidationError",
]
