"""
Module: parsing

Purpose:
    Text parsers for the two input sections: the crate diagram and the
    crane instructions.

Key Functions:
    - parse_diagram(): Diagram rows → Warehouse
    - parse_instructions(): Instruction lines → MoveList

Used By:
    - controller: solve_sections()
"""

from .diagram import parse_diagram, parse_header, parse_crate, DEFAULT_COLUMN_WIDTH
from .instructions import parse_instructions, parse_move

__all__ = [
    "parse_diagram",
    "parse_header",
    "parse_crate",
    "DEFAULT_COLUMN_WIDTH",
    "parse_instructions",
    "parse_move",
]
