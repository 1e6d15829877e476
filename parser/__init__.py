# parser/__init__.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Formula parsing for propositional logic expressions

"""Propositional formula parsing.

Converts formula text into formula trees. The accepted syntax is the one
produced by ``str(formula)`` (``!``, ``&&``, ``||`` and parentheses) extended
with ``=>`` and ``<=>``. Variable names must be identifiers
(``[A-Za-z_][A-Za-z0-9_]*``); for formulas whose atoms all have such names
``parse(str(f)) == f``. Other names render fine but do not parse back.

Core Functions:
    parse: Converts formula strings into formula trees

Example:
    >>> from parser import parse
    >>> parse("A && !B")
    And(left=Atom(name='A'), right=Not(operand=Atom(name='B')))
"""

from .exceptions import ParseError
from .grammar import _PropParser
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into a formula tree.

    Uses a fresh parser instance for each invocation so that parsing holds no
    state between calls.

    Args:
        source: Formula string to parse

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula text is empty or malformed
    """
    parser = _PropParser()

    # _PropParser.parse logs the formula and the outcome
    try:
        return parser.parse(source)

    except ParseError:
        raise

    except Exception as exc:
        get_logger().debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = ["parse", "ParseError"]
