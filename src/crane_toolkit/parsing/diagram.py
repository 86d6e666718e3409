"""
Module: parsing.diagram

Purpose:
    Parse the ASCII crate diagram into a Warehouse. The diagram is
    printed top row first and ends with a header naming the stacks:

            [D]
        [N] [C]
        [Z] [M] [P]
         1   2   3

    Columns are positional: stack k lives at characters
    [k * width, (k + 1) * width) of every row, so an empty slot is
    recognised by position alone.

Key Functions:
    - parse_diagram(): Build a Warehouse from the diagram section
    - parse_header(): Read the stack count from the header line
    - parse_crate(): Read one fixed-width cell

Dependencies:
    - re (std)
    - core.models.Warehouse

Used By:
    - controller: solve_sections()
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from crane_toolkit.core.errors import DiagramParseError
from crane_toolkit.core.models import Warehouse

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_WIDTH = 4

# One visible, non-bracket character between brackets: "[A]"
_CRATE_PATTERN = re.compile(r"\[(?P<item>[^\s\[\]])\]")


def parse_crate(cell: str) -> Optional[str]:
    """
    Read the crate in one diagram cell.

    Args:
        cell: Fixed-width slice of a diagram row, e.g. "[A] " or "    "

    Returns:
        The crate character, or None for padding. Anything that is not
        a bracketed single character counts as padding.

    Example:
        >>> parse_crate("[Q] ")
        'Q'
        >>> parse_crate("    ") is None
        True
    """
    match = _CRATE_PATTERN.fullmatch(cell.strip())
    if match is None:
        return None
    return match.group("item")


def parse_header(line: str, *, line_number: Optional[int] = None) -> int:
    """
    Read the number of stacks from the header line.

    The header lists stack numbers separated by spaces; the largest
    number is the stack count. Tokens that are not plain ASCII integers
    are ignored.

    Raises:
        DiagramParseError: If the header holds no integer token, or
            declares no stacks

    Example:
        >>> parse_header(" 1   2  stacks")
        2
    """
    numbers: List[int] = [
        int(token) for token in line.split() if token.isascii() and token.isdigit()
    ]
    if not numbers:
        raise DiagramParseError(
            f"Diagram header names no stacks: {line.strip()!r}", line_number
        )

    stack_count = max(numbers)
    if stack_count < 1:
        raise DiagramParseError(
            f"Diagram header declares no stacks: {line.strip()!r}", line_number
        )
    return stack_count


def parse_diagram(
    lines: Sequence[str],
    *,
    column_width: int = DEFAULT_COLUMN_WIDTH,
) -> Warehouse:
    """
    Build a Warehouse from the diagram section.

    Algorithm:
    1. Read the stack count from the last line (header)
    2. Walk the remaining rows from the bottom up
    3. Cut each row into fixed-width cells and push any crate found
       onto the stack for that column

    Args:
        lines: Diagram rows, top row first, header last
        column_width: Characters per stack column (4 for "[X] ")

    Returns:
        Warehouse with every stack populated bottom-to-top

    Raises:
        DiagramParseError: If the section is empty, the header is invalid,
            or a crate sits in a column beyond the declared stacks

    Example:
        >>> wh = parse_diagram(["    [D]", "[N] [C]", "[Z] [M] [P]", " 1   2   3"])
        >>> wh.top_of_every_stack()
        'NDP'
    """
    if column_width < 1:
        raise ValueError(f"column_width must be positive: {column_width}")
    if not lines:
        raise DiagramParseError("Diagram section is empty")

    header_number = len(lines)
    stack_count = parse_header(lines[-1], line_number=header_number)
    warehouse = Warehouse(stack_count)

    # Bottom row first so the row just above the header ends up at the bottom.
    for row_index in range(len(lines) - 2, -1, -1):
        row = lines[row_index]
        for column, start in enumerate(range(0, len(row), column_width)):
            item = parse_crate(row[start:start + column_width])
            if item is None:
                continue
            if column >= stack_count:
                raise DiagramParseError(
                    f"Crate {item!r} in column {column + 1} but only "
                    f"{stack_count} stacks declared",
                    line_number=row_index + 1,
                )
            warehouse.push_to(column, item)

    logger.debug(
        f"Parsed diagram: {stack_count} stacks, "
        f"{sum(warehouse.heights())} crates over {len(lines) - 1} rows"
    )
    return warehouse
