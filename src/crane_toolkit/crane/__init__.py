"""
Module: crane

Purpose:
    Crane policies and the executor that replays moves on a warehouse.

Key Classes:
    - CranePolicy: SINGLE_ITEM / BLOCK_PRESERVING
    - Crane: Executes a MoveList with a fixed policy
"""

from .policy import CranePolicy
from .executor import Crane, execute_moves

__all__ = [
    "CranePolicy",
    "Crane",
    "execute_moves",
]
