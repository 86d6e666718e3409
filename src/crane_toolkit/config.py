"""
Module: config

Purpose:
    Configuration dataclass for a solver run. Immutable configuration
    with validation on construction.

Key Classes:
    - SolverConfig: Input path, crane policy and output options

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: solve()
    - cli: built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from crane_toolkit.core.models.warehouse import DEFAULT_BLANK_MARKER
from crane_toolkit.crane.policy import CranePolicy
from crane_toolkit.parsing.diagram import DEFAULT_COLUMN_WIDTH

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for one solver run (immutable).

    Attributes:
        input_path: Puzzle input file
        policy: Crane policy used to replay the moves
        column_width: Characters per diagram column ("[X] " is 4)
        blank_marker: Character reported for an empty stack
        output_format: "text" or "json"
        dump_stacks: Whether to print the final stacks after the result

    Example:
        >>> config = SolverConfig(
        ...     input_path=Path("input.txt"),
        ...     policy=CranePolicy.BLOCK_PRESERVING,
        ... )
    """

    # Required
    input_path: Path
    policy: CranePolicy

    # Parsing
    column_width: int = DEFAULT_COLUMN_WIDTH

    # Output
    blank_marker: str = DEFAULT_BLANK_MARKER
    output_format: str = "text"
    dump_stacks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.policy, CranePolicy):
            raise ValueError(f"policy must be a CranePolicy: {self.policy!r}")
        # "[X]" is the narrowest cell that can hold a crate.
        if self.column_width < 3:
            raise ValueError(f"column_width must be at least 3: {self.column_width}")
        if len(self.blank_marker) != 1:
            raise ValueError(
                f"blank_marker must be a single character: {self.blank_marker!r}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}: {self.output_format!r}"
            )
