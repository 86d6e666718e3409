"""
Module: loading

Purpose:
    Input file reading and section splitting.

Key Functions:
    - read_lines(): Read a UTF-8 input file
    - split_sections(): Separate diagram and instructions

Used By:
    - controller: solve()
"""

from .reader import read_lines, split_sections

__all__ = [
    "read_lines",
    "split_sections",
]
