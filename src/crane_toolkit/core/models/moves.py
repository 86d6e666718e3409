"""
Module: moves

Purpose:
    Provides the Move and MoveList dataclasses - immutable crane
    instructions parsed from "move N from A to B" lines.

Key Classes:
    - Move: One instruction (count, source, destination)
    - MoveList: Ordered, immutable sequence of moves

Dependencies:
    - dataclasses (std)

Used By:
    - parsing.instructions
    - crane.executor
    - controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True, slots=True)
class Move:
    """
    A single crane instruction.

    Stack indices are 0-based; the text form used in input files
    is 1-based and produced by ``__str__``.

    Attributes:
        count: Number of crates to move
        source: 0-based index of the stack crates are taken from
        destination: 0-based index of the stack crates land on

    Invariants:
        - count >= 0
        - source >= 0 and destination >= 0
        - source != destination unless count == 0

    Example:
        >>> move = Move(count=3, source=0, destination=2)
        >>> str(move)
        'move 3 from 1 to 3'
    """

    count: int
    source: int
    destination: int

    def __post_init__(self) -> None:
        """Validate move on construction."""
        if self.count < 0:
            raise ValueError(f"Move count cannot be negative: {self.count}")
        if self.source < 0 or self.destination < 0:
            raise ValueError(
                f"Stack indices cannot be negative: {self.source}, {self.destination}"
            )
        if self.source == self.destination and self.count > 0:
            raise ValueError(
                f"Source and destination are the same stack: {self.source + 1}"
            )

    @classmethod
    def from_one_based(cls, count: int, source: int, destination: int) -> Move:
        """
        Create a move from the 1-based stack numbers printed in input.

        Raises:
            ValueError: If a stack number is below 1
        """
        if source < 1 or destination < 1:
            raise ValueError(
                f"Stack numbers start at 1: got {source} and {destination}"
            )
        return cls(count=count, source=source - 1, destination=destination - 1)

    def __str__(self) -> str:
        return f"move {self.count} from {self.source + 1} to {self.destination + 1}"


@dataclass(frozen=True, slots=True)
class MoveList:
    """
    Ordered moves, executed strictly in listed order.

    Attributes:
        moves: Immutable tuple of moves
    """

    moves: Tuple[Move, ...] = ()

    @classmethod
    def of(cls, moves: Iterable[Move]) -> MoveList:
        """Build a MoveList from any iterable of moves."""
        return cls(moves=tuple(moves))

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __getitem__(self, index: int) -> Move:
        return self.moves[index]

    @property
    def total_crates(self) -> int:
        """Sum of crate counts over all moves."""
        return sum(m.count for m in self.moves)
