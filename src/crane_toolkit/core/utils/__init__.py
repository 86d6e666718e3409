"""Serialization helpers for core models."""

from .serialization import (
    serialize_warehouse,
    deserialize_warehouse,
    serialize_result,
    result_to_json,
)

__all__ = [
    "serialize_warehouse",
    "deserialize_warehouse",
    "serialize_result",
    "result_to_json",
]
