"""
Crane Toolkit Core Package

Shared data models, the error hierarchy, and serialization helpers.
Everything else in the toolkit builds on these types.
"""

from .errors import (
    CraneError,
    InputError,
    DiagramParseError,
    InstructionParseError,
    ExecutionError,
)
from .models import Move, MoveList, Warehouse

__all__ = [
    "CraneError",
    "InputError",
    "DiagramParseError",
    "InstructionParseError",
    "ExecutionError",
    "Move",
    "MoveList",
    "Warehouse",
]
