"""
Command-line interface for the crane toolkit.

Usage:
    crane-toolkit stage1 input.txt
    crane-toolkit stage2 input.txt --format json
    crane-toolkit block input.txt --dump --verbose

The result goes to stdout; progress and errors are logged to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from crane_toolkit import __version__
from crane_toolkit.config import OUTPUT_FORMATS, SolverConfig
from crane_toolkit.controller import solve
from crane_toolkit.core.errors import CraneError
from crane_toolkit.core.utils import result_to_json
from crane_toolkit.crane import CranePolicy
from crane_toolkit.parsing import DEFAULT_COLUMN_WIDTH

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="crane-toolkit",
        description="Replay crane moves on a crate diagram and report the top crates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Stages:
  stage1, single, 9000   move crates one at a time (blocks land reversed)
  stage2, block, 9001    move crates as a block (order preserved)

Examples:
  crane-toolkit stage1 input.txt
  crane-toolkit stage2 input.txt --format json
        """,
    )
    parser.add_argument(
        "stage",
        type=str.lower,
        choices=CranePolicy.names(),
        metavar="STAGE",
        help="Crane policy: stage1/single/9000 or stage2/block/9001",
    )
    parser.add_argument("input", type=Path, help="Puzzle input file")
    parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--dump", action="store_true", help="Print the final stacks after the result"
    )
    parser.add_argument(
        "--blank-marker",
        default=" ",
        help="Character reported for an empty stack (default: space)",
    )
    parser.add_argument(
        "--column-width",
        type=int,
        default=DEFAULT_COLUMN_WIDTH,
        help=f"Characters per diagram column (default: {DEFAULT_COLUMN_WIDTH})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, otherwise the failing
        CraneError's exit_code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = SolverConfig(
            input_path=args.input,
            policy=CranePolicy.from_name(args.stage),
            column_width=args.column_width,
            blank_marker=args.blank_marker,
            output_format=args.format,
            dump_stacks=args.dump,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = solve(config)
    except CraneError as e:
        logger.error(f"Error: {e}")
        return e.exit_code

    if config.output_format == "json":
        print(result_to_json(result))
    else:
        print(f"Top of stacks: {result.top_of_stacks}")

    if config.dump_stacks:
        print(result.warehouse.render())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
