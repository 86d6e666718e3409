"""
Module: crane.policy

Purpose:
    Enum naming the two crane transfer policies and the names the CLI
    accepts for each.

Key Classes:
    - CranePolicy: SINGLE_ITEM or BLOCK_PRESERVING

Used By:
    - crane.executor: Crane dispatch table
    - config: SolverConfig
    - cli: stage argument
"""

from __future__ import annotations

from enum import Enum


class CranePolicy(str, Enum):
    """
    How a multi-crate move is carried out.

    Attributes:
        SINGLE_ITEM: One crate at a time (CrateMover 9000). A moved block
            lands reversed.
        BLOCK_PRESERVING: The whole block at once (CrateMover 9001). A moved
            block keeps its order.

    Example:
        >>> CranePolicy.from_name("stage2")
        <CranePolicy.BLOCK_PRESERVING: 'block_preserving'>
    """

    SINGLE_ITEM = "single_item"
    BLOCK_PRESERVING = "block_preserving"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> CranePolicy:
        """
        Resolve a policy from a user-facing name (case-insensitive).

        Raises:
            ValueError: If the name is unknown
        """
        key = name.strip().lower().replace("-", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(
                f"Unknown crane policy {name!r}; expected one of: "
                f"{', '.join(sorted(_ALIASES))}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        """All accepted policy names, sorted."""
        return sorted(_ALIASES)


_ALIASES = {
    "stage1": CranePolicy.SINGLE_ITEM,
    "single": CranePolicy.SINGLE_ITEM,
    "single_item": CranePolicy.SINGLE_ITEM,
    "9000": CranePolicy.SINGLE_ITEM,
    "stage2": CranePolicy.BLOCK_PRESERVING,
    "block": CranePolicy.BLOCK_PRESERVING,
    "block_preserving": CranePolicy.BLOCK_PRESERVING,
    "9001": CranePolicy.BLOCK_PRESERVING,
}
