"""
Module: crane.executor

Purpose:
    Replay a MoveList on a Warehouse under one CranePolicy. Moves run
    strictly in order, each on the state left by the previous one.

Key Classes:
    - Crane: Executes moves with a fixed policy

Key Functions:
    - execute_moves(): One-shot helper around Crane

Dependencies:
    - core.models: Move, MoveList, Warehouse
    - crane.policy: CranePolicy

Used By:
    - controller: solve_sections()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from crane_toolkit.core.errors import ExecutionError
from crane_toolkit.core.models import Move, MoveList, Warehouse

from .policy import CranePolicy

logger = logging.getLogger(__name__)


def _move_single_items(move: Move, warehouse: Warehouse) -> None:
    """Pop and push one crate at a time; the block lands reversed."""
    for _ in range(move.count):
        warehouse.push_to(move.destination, warehouse.pop_from(move.source))


def _move_block(move: Move, warehouse: Warehouse) -> None:
    """Lift the top crates as one block; the block keeps its order."""
    block = warehouse.take_block(move.source, move.count)
    warehouse.insert_preserving_order(move.destination, block)


_HANDLERS: Dict[CranePolicy, Callable[[Move, Warehouse], None]] = {
    CranePolicy.SINGLE_ITEM: _move_single_items,
    CranePolicy.BLOCK_PRESERVING: _move_block,
}


@dataclass(frozen=True)
class Crane:
    """
    A crane bound to one transfer policy.

    Attributes:
        policy: How multi-crate moves are carried out

    Example:
        >>> wh = Warehouse.from_stacks([["A", "B", "C"], []])
        >>> Crane(CranePolicy.SINGLE_ITEM).execute(MoveList.of([Move(2, 0, 1)]), wh)
        1
        >>> wh.stack(1)
        ('C', 'B')
    """

    policy: CranePolicy

    def execute(self, moves: MoveList, warehouse: Warehouse) -> int:
        """
        Apply every move to the warehouse in place.

        Each move is checked before any crate is touched, so a failing
        move leaves the warehouse as the previous move left it.

        Args:
            moves: Moves in execution order
            warehouse: Warehouse to mutate

        Returns:
            Number of moves applied

        Raises:
            ExecutionError: If a move names a missing stack or its source
                holds fewer crates than requested
        """
        handler = _HANDLERS[self.policy]
        for number, move in enumerate(moves, start=1):
            try:
                _check_preconditions(move, warehouse)
                handler(move, warehouse)
            except ExecutionError as e:
                raise ExecutionError(
                    f"Move #{number} ({move}) failed: {e}", move_number=number
                ) from e
            logger.debug(f"#{number} {move} -> {warehouse.top_of_every_stack()!r}")

        logger.debug(f"{self.policy} crane applied {len(moves)} moves")
        return len(moves)


def execute_moves(
    moves: MoveList,
    warehouse: Warehouse,
    policy: CranePolicy,
) -> Warehouse:
    """
    Run a crane with the given policy and return the (mutated) warehouse.
    """
    Crane(policy).execute(moves, warehouse)
    return warehouse


def _check_preconditions(move: Move, warehouse: Warehouse) -> None:
    """Validate stack indices and source height for one move."""
    count = warehouse.stack_count
    for label, index in (("source", move.source), ("destination", move.destination)):
        if index >= count:
            raise ExecutionError(
                f"{label} stack {index + 1} does not exist ({count} stacks)"
            )
    available = warehouse.height(move.source)
    if available < move.count:
        raise ExecutionError(
            f"stack {move.source + 1} holds {available} crates, {move.count} requested"
        )
