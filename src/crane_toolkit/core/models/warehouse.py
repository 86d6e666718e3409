"""
Module: warehouse

Purpose:
    Provides the Warehouse - the indexed collection of crate stacks that a
    crane mutates in place. Unlike the other models it is deliberately
    mutable: one crane run owns it from parse to final query.

Key Functions:
    - Warehouse.pop_from(index): Remove the top crate of a stack
    - Warehouse.push_to(index, item): Put a crate on top of a stack
    - Warehouse.take_block(index, count): Remove the top N crates as a block
    - Warehouse.insert_preserving_order(index, items): Append a block as-is
    - Warehouse.top_of_every_stack(): Read the top crate of every stack
    - Warehouse.to_dict() / Warehouse.from_dict(): Serialization

Dependencies:
    - core.errors.ExecutionError

Used By:
    - parsing.diagram: Builds the initial warehouse
    - crane.executor: Mutates it move by move
    - core.utils.serialization
    - controller
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..errors import ExecutionError

DEFAULT_BLANK_MARKER = " "


class Warehouse:
    """
    Ordered stacks of single-character crates.

    Stacks are addressed with 0-based indices; stack ``i`` is printed
    as ``i + 1`` in input diagrams. Each stack is stored bottom-to-top,
    so the last element is the top crate.

    Invariants:
        - Every crate is a one-character string
        - Pops never read past the bottom of a stack

    Example:
        >>> wh = Warehouse.from_stacks([["Z", "N"], ["M", "C", "D"], ["P"]])
        >>> wh.top_of_every_stack()
        'NDP'
        >>> wh.push_to(2, wh.pop_from(1))
        >>> wh.top_of_every_stack()
        'NCD'
    """

    def __init__(self, stack_count: int) -> None:
        if stack_count < 1:
            raise ValueError(f"Warehouse needs at least one stack: {stack_count}")
        self._stacks: List[List[str]] = [[] for _ in range(stack_count)]

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_stacks(cls, stacks: Sequence[Iterable[str]]) -> Warehouse:
        """
        Create a warehouse from bottom-to-top stack contents.

        Args:
            stacks: One iterable of crates per stack, bottom first

        Raises:
            ValueError: If no stacks given or a crate is not one character
        """
        warehouse = cls(len(stacks))
        for index, items in enumerate(stacks):
            for item in items:
                warehouse.push_to(index, item)
        return warehouse

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Warehouse:
        """Deserialize from ``{"stacks": [[...], ...]}``."""
        return cls.from_stacks([list(stack) for stack in data["stacks"]])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{"stacks": [[...], ...]}`` (bottom-to-top)."""
        return {"stacks": [list(stack) for stack in self._stacks]}

    def copy(self) -> Warehouse:
        """Independent copy of the current state."""
        return Warehouse.from_stacks(self._stacks)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def stack_count(self) -> int:
        """Number of stacks."""
        return len(self._stacks)

    def stack(self, index: int) -> Tuple[str, ...]:
        """Contents of one stack, bottom-to-top (a snapshot, not a view)."""
        return tuple(self._stacks[self._check_index(index)])

    def height(self, index: int) -> int:
        """Number of crates in one stack."""
        return len(self._stacks[self._check_index(index)])

    def heights(self) -> Tuple[int, ...]:
        """Number of crates in each stack."""
        return tuple(len(stack) for stack in self._stacks)

    def top_of_every_stack(self, blank: str = DEFAULT_BLANK_MARKER) -> str:
        """
        Top crate of each stack, in stack order.

        Args:
            blank: Marker used for an empty stack

        Returns:
            String with one character per stack
        """
        return "".join(stack[-1] if stack else blank for stack in self._stacks)

    def render(self) -> str:
        """
        Multi-line dump, one stack per line, bottom crate first.

        Example:
            >>> print(Warehouse.from_stacks([["Z", "N"], ["P"]]).render())
            1: ZN
            2: P
        """
        return "\n".join(
            f"{i + 1}: {''.join(stack)}" for i, stack in enumerate(self._stacks)
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def pop_from(self, index: int) -> str:
        """
        Remove and return the top crate of a stack.

        Raises:
            ExecutionError: If the index is out of range or the stack is empty
        """
        stack = self._stacks[self._check_index(index)]
        if not stack:
            raise ExecutionError(f"Cannot pop from empty stack {index + 1}")
        return stack.pop()

    def push_to(self, index: int, item: str) -> None:
        """
        Put a crate on top of a stack.

        Raises:
            ExecutionError: If the index is out of range
            ValueError: If item is not a single character
        """
        _check_item(item)
        self._stacks[self._check_index(index)].append(item)

    def take_block(self, index: int, count: int) -> List[str]:
        """
        Remove the top ``count`` crates as one block.

        The block is returned bottom-to-top, in the same order it sat on
        the stack. The stack is left untouched if it is too short.

        Raises:
            ExecutionError: If the index is out of range or the stack holds
                fewer than ``count`` crates
        """
        stack = self._stacks[self._check_index(index)]
        if count < 0:
            raise ExecutionError(f"Cannot take a negative block: {count}")
        if count > len(stack):
            raise ExecutionError(
                f"Stack {index + 1} holds {len(stack)} crates, cannot take {count}"
            )
        if count == 0:
            return []
        block = stack[-count:]
        del stack[-count:]
        return block

    def insert_preserving_order(self, index: int, items: Iterable[str]) -> None:
        """
        Append a block of crates on top of a stack, keeping their order.

        Args:
            index: Destination stack
            items: Crates bottom-to-top; the last one becomes the new top
        """
        items = list(items)
        for item in items:
            _check_item(item)
        self._stacks[self._check_index(index)].extend(items)

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _check_index(self, index: int) -> int:
        # Negative indices would silently wrap around in a Python list.
        if not 0 <= index < len(self._stacks):
            raise ExecutionError(
                f"No stack {index + 1} in a warehouse of {len(self._stacks)} stacks"
            )
        return index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Warehouse):
            return NotImplemented
        return self._stacks == other._stacks

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Warehouse({self._stacks!r})"


def _check_item(item: str) -> None:
    if not isinstance(item, str) or len(item) != 1:
        raise ValueError(f"Crate must be a single character: {item!r}")
