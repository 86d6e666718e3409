"""
Module: controller

Purpose:
    Orchestrate a complete solver run.
    Read → Split → Parse diagram → Parse moves → Run crane → Read tops

Key Functions:
    - solve(): Main entry point, driven by a SolverConfig
    - solve_sections(): Run on already-split input lines

Key Classes:
    - SolveResult: Outcome of a run

Dependencies:
    - loading: Input reading and section splitting
    - parsing: Diagram and instruction parsers
    - crane: Crane policies and executor

Used By:
    - cli: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from crane_toolkit.core.models import Warehouse, DEFAULT_BLANK_MARKER
from crane_toolkit.crane import Crane, CranePolicy
from crane_toolkit.loading import read_lines, split_sections
from crane_toolkit.parsing import parse_diagram, parse_instructions, DEFAULT_COLUMN_WIDTH

from .config import SolverConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of one crane run (immutable).

    Attributes:
        top_of_stacks: Top crate of every stack, blank marker for empty ones
        policy: Crane policy that produced the result
        stack_count: Number of stacks in the warehouse
        move_count: Number of moves applied
        warehouse: Final warehouse state
        elapsed_s: Wall-clock time of the run in seconds

    Example:
        >>> result = solve(config)
        >>> print(f"Top of stacks: {result.top_of_stacks}")
    """
    top_of_stacks: str
    policy: CranePolicy
    stack_count: int
    move_count: int
    warehouse: Warehouse
    elapsed_s: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "policy": self.policy.value,
            "top_of_stacks": self.top_of_stacks,
            "stack_count": self.stack_count,
            "move_count": self.move_count,
            "elapsed_s": round(self.elapsed_s, 6),
            "warehouse": self.warehouse.to_dict(),
        }


def solve_sections(
    diagram_lines: Sequence[str],
    instruction_lines: Sequence[str],
    policy: CranePolicy,
    *,
    column_width: int = DEFAULT_COLUMN_WIDTH,
    blank_marker: str = DEFAULT_BLANK_MARKER,
) -> SolveResult:
    """
    Parse both input sections and replay the moves.

    Both sections are parsed before any move runs, so a bad instruction
    line is reported even if an earlier move would also fail.

    Args:
        diagram_lines: Diagram rows, header last
        instruction_lines: Move lines in order
        policy: Crane policy to use
        column_width: Characters per diagram column
        blank_marker: Character reported for an empty stack

    Returns:
        SolveResult with the final tops and warehouse

    Raises:
        DiagramParseError: If the diagram is structurally invalid
        InstructionParseError: If a move line is malformed
        ExecutionError: If a move cannot be applied
    """
    start_time = time.perf_counter()

    warehouse = parse_diagram(diagram_lines, column_width=column_width)
    logger.info(
        f"Parsed {warehouse.stack_count} stacks holding {sum(warehouse.heights())} crates"
    )

    moves = parse_instructions(instruction_lines)
    logger.info(f"Parsed {len(moves)} moves")

    applied = Crane(policy).execute(moves, warehouse)
    top_of_stacks = warehouse.top_of_every_stack(blank_marker)

    elapsed = time.perf_counter() - start_time
    logger.info(f"{policy} crane finished in {elapsed:.4f}s: {top_of_stacks!r}")
    logger.debug(f"Final stacks:\n{warehouse.render()}")

    return SolveResult(
        top_of_stacks=top_of_stacks,
        policy=policy,
        stack_count=warehouse.stack_count,
        move_count=applied,
        warehouse=warehouse,
        elapsed_s=elapsed,
    )


def solve(config: SolverConfig) -> SolveResult:
    """
    Solve a puzzle input file.

    Pipeline:
    1. Read the input file
    2. Split at the blank line into diagram and instructions
    3. Parse, execute and read the tops (solve_sections)

    Args:
        config: Solver configuration

    Returns:
        SolveResult for the configured policy

    Raises:
        InputError: If the input file cannot be read
        DiagramParseError: If no blank line separates the sections or
            the diagram is invalid
        InstructionParseError: If a move line is malformed
        ExecutionError: If a move cannot be applied
    """
    logger.info(f"Solving {config.input_path} with the {config.policy} crane")

    lines = read_lines(config.input_path)
    diagram_lines, instruction_lines = split_sections(lines)
    logger.debug(
        f"Sections: {len(diagram_lines)} diagram lines, "
        f"{len(instruction_lines)} instruction lines"
    )

    return solve_sections(
        diagram_lines,
        instruction_lines,
        config.policy,
        column_width=config.column_width,
        blank_marker=config.blank_marker,
    )
