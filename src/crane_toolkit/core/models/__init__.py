"""
Core Models Package

Data models shared by the parsers and the crane.

Moves are frozen dataclasses: once parsed, an instruction never changes.
The Warehouse is the one mutable model, owned by a single crane run.
"""

from .moves import Move, MoveList
from .warehouse import Warehouse, DEFAULT_BLANK_MARKER

__all__ = [
    "Move",
    "MoveList",
    "Warehouse",
    "DEFAULT_BLANK_MARKER",
]
