"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the parsers, the warehouse model and the
    crane executor. Every failure of a run is one of these types, so callers
    can tell a bad diagram from a bad move line from an impossible move.

Key Classes:
    - CraneError: Base class, carries the CLI exit code
    - InputError: Input file missing or unreadable
    - DiagramParseError: Structural failure in the diagram section
    - InstructionParseError: A move line does not match the pattern
    - ExecutionError: A move's precondition fails during a crane run

Used By:
    - parsing.diagram, parsing.instructions
    - core.models.warehouse, crane.executor
    - loading.reader, controller, cli
"""

from __future__ import annotations

from typing import Optional


class CraneError(Exception):
    """Base error for a failed run."""

    exit_code: int = 1


class InputError(CraneError):
    """Input file could not be read."""

    exit_code = 1


class DiagramParseError(CraneError):
    """
    Diagram section is structurally invalid.

    Attributes:
        line_number: 1-based line within the diagram section, if known
    """

    exit_code = 2

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class InstructionParseError(CraneError):
    """
    A move line could not be parsed.

    Attributes:
        line_number: 1-based line within the instruction section, if known
        line: The offending text
    """

    exit_code = 3

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: str = "",
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ExecutionError(CraneError):
    """
    A move cannot be applied to the current warehouse state.

    Attributes:
        move_number: 1-based position of the failing move, when raised
            by the crane executor
    """

    exit_code = 4

    def __init__(self, message: str, move_number: Optional[int] = None):
        super().__init__(message)
        self.move_number = move_number
