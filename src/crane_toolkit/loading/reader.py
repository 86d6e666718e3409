"""
Module: loading.reader

Purpose:
    Read a puzzle input file and split it into the diagram section and
    the instruction section.

Key Functions:
    - read_lines(): Read a UTF-8 file into lines
    - split_sections(): Split lines at the first blank line

Dependencies:
    - pathlib (std)

Used By:
    - controller: solve()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from crane_toolkit.core.errors import DiagramParseError, InputError

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> List[str]:
    """
    Read an input file into lines.

    Line endings are removed; trailing spaces are kept because diagram
    columns are positional.

    Args:
        path: Input file path

    Returns:
        Lines in file order

    Raises:
        InputError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.is_file():
        raise InputError(f"Input file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read {path}: {e}") from e

    lines = text.splitlines()
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def split_sections(lines: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split input lines into (diagram, instructions).

    The first blank (or whitespace-only) line separates the sections.
    Trailing blank lines after the instructions are dropped; any other
    blank line stays and will fail instruction parsing.

    Args:
        lines: All input lines

    Returns:
        Tuple of diagram lines and instruction lines

    Raises:
        DiagramParseError: If no blank line separates the sections

    Example:
        >>> split_sections(["[A]", " 1 ", "", "move 1 from 1 to 2", ""])
        (['[A]', ' 1 '], ['move 1 from 1 to 2'])
    """
    for index, line in enumerate(lines):
        if not line.strip():
            break
    else:
        raise DiagramParseError(
            "No blank line found between the diagram and the instructions"
        )

    diagram = list(lines[:index])
    instructions = list(lines[index + 1:])
    while instructions and not instructions[-1].strip():
        instructions.pop()
    return diagram, instructions
