#!/usr/bin/env python3
# run_solver.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Command-line interface for classifying formulas and finding witnesses

import sys
import argparse
from pathlib import Path
from typing import Mapping, Optional, Sequence

from logic import Classification, classify, find_witness, find_counterexample
from parser import parse
from parser.exceptions import ParseError
from utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}") from e

    if not content:
        raise ValueError("Formula file is empty")

    return content


def format_assignment(assignment: Mapping[str, bool]) -> str:
    """Render an assignment as ``NAME=true|false`` lines sorted by name."""
    return "\n".join(
        f"  {name}={'true' if assignment[name] else 'false'}"
        for name in sorted(assignment)
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propsat naive propositional satisfiability checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py -f "A && (A => B) => B"
  python run_solver.py -p formula.prop
  python run_solver.py -f "A || B" --counterexample
  python run_solver.py -p formula.prop --debug
  python run_solver.py -f "A => B" -v

Formula syntax:
  Variables are identifiers; operators are ! && || => <=> (loosest last).
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--formula", type=str, help="Formula text")
    source.add_argument(
        "-p", "--property", type=Path, help="Path to a file containing the formula"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--counterexample",
        action="store_true",
        help="Also print an assignment falsifying the formula, if any",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the solver.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        text = args.formula if args.formula is not None else read_formula_file(args.property)
        formula = parse(text)
        logger.formula_loaded(str(formula))

        classification = classify(formula)
        logger.info(f"Classification: {classification}")

        # Results go to stdout regardless of the log level
        print(f"{formula} is {classification}")

        if classification is not Classification.UNSATISFIABLE:
            print("Witness:")
            print(format_assignment(find_witness(formula)))

        if args.counterexample:
            counterexample = find_counterexample(formula)
            if counterexample is None:
                print("No counterexample: formula is a tautology")
            else:
                print("Counterexample:")
                print(format_assignment(counterexample))

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Solving interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
