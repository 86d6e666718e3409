"""
Module: parsing.instructions

Purpose:
    Parse crane instructions of the form "move 3 from 1 to 2" into a
    MoveList. Fail-fast: the first bad line rejects the whole section.

Key Functions:
    - parse_move(): Parse a single instruction line
    - parse_instructions(): Parse the instruction section

Dependencies:
    - re (std)
    - core.models.Move, MoveList

Used By:
    - controller: solve_sections()
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from crane_toolkit.core.errors import InstructionParseError
from crane_toolkit.core.models import Move, MoveList

logger = logging.getLogger(__name__)

_MOVE_PATTERN = re.compile(
    r"move\s+(?P<count>\d+)\s+from\s+(?P<source>\d+)\s+to\s+(?P<destination>\d+)",
    re.ASCII,
)


def parse_move(line: str, *, line_number: Optional[int] = None) -> Move:
    """
    Parse one instruction line.

    Stack numbers in the text are 1-based; the returned Move holds
    0-based indices.

    Args:
        line: Raw line, surrounding whitespace ignored
        line_number: Position of the line, used in error messages

    Returns:
        Parsed Move

    Raises:
        InstructionParseError: If the line does not match the pattern,
            names stack 0, or moves crates onto their own stack

    Example:
        >>> parse_move("move 1 from 2 to 1")
        Move(count=1, source=1, destination=0)
    """
    text = line.strip()
    match = _MOVE_PATTERN.fullmatch(text)
    where = f"line {line_number}" if line_number is not None else "instruction"
    if match is None:
        raise InstructionParseError(
            f"Invalid {where}: expected 'move <count> from <src> to <dst>', got {text!r}",
            line_number=line_number,
            line=line,
        )

    try:
        return Move.from_one_based(
            count=int(match.group("count")),
            source=int(match.group("source")),
            destination=int(match.group("destination")),
        )
    except ValueError as e:
        raise InstructionParseError(
            f"Invalid {where} {text!r}: {e}",
            line_number=line_number,
            line=line,
        ) from e


def parse_instructions(lines: Sequence[str]) -> MoveList:
    """
    Parse the instruction section.

    Args:
        lines: Instruction lines in execution order

    Returns:
        MoveList with one Move per line

    Raises:
        InstructionParseError: On the first line that fails to parse.
            No partial MoveList is returned.
    """
    moves: List[Move] = []
    for number, line in enumerate(lines, start=1):
        moves.append(parse_move(line, line_number=number))

    move_list = MoveList.of(moves)
    logger.debug(f"Parsed {len(move_list)} moves ({move_list.total_crates} crates)")
    return move_list
