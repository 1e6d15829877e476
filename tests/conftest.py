# tests/conftest.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Propsat test suite.

The configuration handles:
- Python path setup for module imports
- A seeded random formula generator for property-style tests
- A brute-force truth table used to cross-check the search
"""

import io
import itertools
import random
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from formula import Atom, And, Or, Not  # noqa: E402
from logic import Value, evaluate, get_variables  # noqa: E402
from utils.logger import get_logger  # noqa: E402

# Create the global logger up front so its handler binds to the session-wide
# stdout rather than a per-test capture stream that is closed after the test.
get_logger()


def _random_formula(rng: random.Random, names, depth: int):
    if depth == 0 or rng.random() < 0.2:
        return Atom(rng.choice(names))

    kind = rng.choice(("and", "or", "not"))
    if kind == "not":
        return Not(_random_formula(rng, names, depth - 1))

    left = _random_formula(rng, names, depth - 1)
    right = _random_formula(rng, names, depth - 1)
    return And(left, right) if kind == "and" else Or(left, right)


def _assignments(names):
    names = sorted(names)
    for values in itertools.product((True, False), repeat=len(names)):
        yield dict(zip(names, values))


def _truth_table(formula):
    """Evaluate a formula under every total assignment of its variables."""
    table = []
    for assignment in _assignments(get_variables(formula)):
        result = evaluate(formula, assignment)
        assert isinstance(result, Value)
        table.append((assignment, result.value))
    return table


@pytest.fixture
def random_formulas():
    """Provide a factory of reproducible random formulas.

    Returns:
        Callable[[int, int, int], List[Expr]]: count, variable count and
        maximum depth to generated formulas
    """

    def make(count: int = 50, variable_count: int = 4, depth: int = 5, seed: int = 1234):
        rng = random.Random(seed)
        names = [f"V{i}" for i in range(variable_count)]
        return [_random_formula(rng, names, depth) for _ in range(count)]

    return make


@pytest.fixture
def assignments():
    """Provide the generator of all total assignments over a set of names."""
    return _assignments


@pytest.fixture
def truth_table():
    """Provide the brute-force truth table function."""
    return _truth_table


@pytest.fixture
def log_output():
    """Redirect the solver logger to a buffer for the duration of a test.

    Yields:
        io.StringIO: Buffer receiving everything the solver logger emits
    """
    logger = get_logger()
    handler = logger.logger.handlers[0]
    previous_level = logger.level
    buffer = io.StringIO()
    previous_stream = handler.setStream(buffer)

    yield buffer

    handler.setStream(previous_stream)
    logger.set_level(previous_level)
