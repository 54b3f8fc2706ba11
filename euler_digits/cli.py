"""Command-line interface for computing and checking digits of e.

Usage:
    python -m euler_digits compute 100
    python -m euler_digits compute 100000 --check
    python -m euler_digits sweep --steps 50 --step 100
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import load_settings
from .engine import EulerNumber
from .errors import ConfigurationError, InvalidArgument, OutOfRange, ReferenceUnavailable
from .logging_config import setup_logging
from .reference import ReferenceOracle

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_REFERENCE_FAILED = 3


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="euler-digits",
        description="Compute Euler's number to arbitrary precision and check it against a reference",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compute 100
  %(prog)s compute 100000 --check --reference control_e.txt
  %(prog)s sweep --steps 50 --step 100
""",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level (default: EULER_DIGITS_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compute_parser = subparsers.add_parser(
        "compute",
        help="Compute e to a number of decimal places",
    )
    compute_parser.add_argument("decimal_places", type=int, help="Number of decimal places")
    compute_parser.add_argument(
        "--round",
        action="store_true",
        help="Round the last digit instead of truncating",
    )
    compute_parser.add_argument(
        "--check",
        action="store_true",
        help="Compare the result against the reference file",
    )
    compute_parser.add_argument(
        "--reference",
        type=Path,
        help="Reference file (default: EULER_DIGITS_REFERENCE or control_e.txt)",
    )

    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Check every precision from 1 to steps * step",
        description="Compute e for every precision up to steps * step and stop at the first wrong one.",
    )
    sweep_parser.add_argument("--steps", type=int, default=50, help="Number of progress blocks (default: 50)")
    sweep_parser.add_argument("--step", type=int, default=100, help="Precisions per block (default: 100)")
    sweep_parser.add_argument(
        "--reference",
        type=Path,
        help="Reference file (default: EULER_DIGITS_REFERENCE or control_e.txt)",
    )

    return parser


def _oracle(args: argparse.Namespace) -> ReferenceOracle:
    if args.reference is not None:
        return ReferenceOracle(args.reference)
    return ReferenceOracle.from_settings(args.settings)


def cmd_compute(args: argparse.Namespace) -> int:
    """Execute the 'compute' command."""
    started = time.perf_counter()
    euler_number = EulerNumber(args.decimal_places)
    elapsed = time.perf_counter() - started

    if args.round:
        euler_number.round()

    print(euler_number)
    print(f"Calculated {args.decimal_places} decimal places in {elapsed:.2f} seconds.", file=sys.stderr)

    if not args.check:
        return EXIT_SUCCESS

    oracle = _oracle(args)
    if oracle.is_correct(euler_number):
        print("Correct: True")
        return EXIT_SUCCESS

    prefix = oracle.first_correct_prefix(euler_number)
    print("Correct: False")
    print(f"First correct part: {len(prefix)} characters")
    return EXIT_ERROR


def cmd_sweep(args: argparse.Namespace) -> int:
    """Execute the 'sweep' command."""
    if args.steps <= 0 or args.step <= 0:
        raise InvalidArgument("--steps and --step must be positive", value=(args.steps, args.step))

    oracle = _oracle(args)
    oracle.cache(args.steps * args.step + 2)

    print(f"Calculating e from 1 to {args.steps * args.step} decimal places until one is not correct.")
    for block in range(args.steps):
        for offset in range(1, args.step + 1):
            decimal_places = block * args.step + offset
            if not oracle.is_correct(EulerNumber(decimal_places)):
                print(f"Error: e with {decimal_places} decimal places isn't correct.", file=sys.stderr)
                return EXIT_ERROR
        print(f"{(block + 1) * args.step} decimal places calculated")

    print("All of them were correct.")
    return EXIT_SUCCESS


COMMANDS = {
    "compute": cmd_compute,
    "sweep": cmd_sweep,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        args.settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    setup_logging(args.log_level or args.settings.log_level)

    try:
        return COMMANDS[args.command](args)
    except InvalidArgument as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except (ReferenceUnavailable, OutOfRange) as e:
        logger.error("Reference check failed: %s", e)
        print(f"Reference error: {e}", file=sys.stderr)
        return EXIT_REFERENCE_FAILED


if __name__ == "__main__":
    sys.exit(main())
