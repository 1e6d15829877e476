# logic/search.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Naive witness search by recursive case splitting

"""Naive satisfiability checking by exhaustive case splitting.

The search walks the free variables of a formula in a fixed order and tries
each variable as true, then as false. After every split the formula is
partially evaluated under the new binding:

- ``Value(True)``: the branch succeeds; the variables not yet split on do not
  matter and receive ``DONT_CARE_DEFAULT``.
- ``Value(False)``: the branch is dead.
- ``Residual(p)``: the search continues on ``p`` over the variables still
  occurring in it.

Partial evaluation is the only pruning: a subtree is abandoned as soon as the
formula becomes constant. There are no variable-ordering heuristics, no
propagation and no memoization across sibling branches, so the worst case is
``2^k`` leaf evaluations for ``k`` free variables.

The recursion depth equals the number of free variables.
"""

from __future__ import annotations
from typing import Dict, Optional, Sequence

from formula import ast_nodes as ast
from utils.logger import get_logger

from .evaluator import Value, evaluate, get_variables
from .verdict import Classification

Witness = Dict[str, bool]

# Value given to variables whose value no longer affects the outcome
DONT_CARE_DEFAULT = True


class NaiveWitnessSearch:
    """Depth-first search for a satisfying assignment of one formula.

    A fresh instance is used for every query, so concurrent queries share no
    state.

    Attributes:
        formula: Formula being searched
        variables: Free variables of the formula in split order
        branches_explored: Number of single-variable bindings evaluated so far
    """

    def __init__(self, formula: ast.Expr):
        self.formula = formula
        self.variables = sorted(get_variables(formula))
        self.branches_explored = 0

    def run(self) -> Optional[Witness]:
        """Search for a witness.

        Returns:
            A total assignment over ``self.variables`` making the formula
            true, or None if the formula is unsatisfiable
        """
        logger = get_logger()
        if logger.is_debug():
            logger.search_start(str(self.formula), len(self.variables))

        witness = self._search(self.formula, self.variables)

        logger.search_result(witness is not None, self.branches_explored)
        return witness

    def _search(self, formula: ast.Expr, variables: Sequence[str]) -> Optional[Witness]:
        # every free variable of formula is in variables, so it is non-empty
        name, rest = variables[0], variables[1:]
        for value in (True, False):
            witness = self._branch(formula, rest, name, value)
            if witness is not None:
                return witness
        return None

    def _branch(
        self, formula: ast.Expr, rest: Sequence[str], name: str, value: bool
    ) -> Optional[Witness]:
        self.branches_explored += 1
        result = evaluate(formula, {name: value})

        if isinstance(result, Value):
            if not result.value:
                return None
            witness = dict.fromkeys(rest, DONT_CARE_DEFAULT)
        else:
            remaining = get_variables(result.formula)
            witness = self._search(
                result.formula, [v for v in rest if v in remaining]
            )
            if witness is None:
                return None
            for v in rest:
                witness.setdefault(v, DONT_CARE_DEFAULT)

        witness[name] = value
        return witness


def find_witness(formula: ast.Expr) -> Optional[Witness]:
    """Find an assignment making the formula true.

    Args:
        formula: Formula to satisfy

    Returns:
        Assignment over exactly the free variables of the formula, or None
        if no satisfying assignment exists

    Example:
        >>> from formula import atom
        >>> find_witness(atom("A") & ~atom("A")) is None
        True
    """
    return NaiveWitnessSearch(formula).run()


def find_counterexample(formula: ast.Expr) -> Optional[Witness]:
    """Find an assignment making the formula false, None for tautologies."""
    return find_witness(ast.Not(formula))


def is_satisfiable(formula: ast.Expr) -> bool:
    """Whether some assignment makes the formula true."""
    return find_witness(formula) is not None


def is_unsatisfiable(formula: ast.Expr) -> bool:
    """Whether no assignment makes the formula true."""
    return not is_satisfiable(formula)


def is_tautology(formula: ast.Expr) -> bool:
    """Whether the negation of the formula is unsatisfiable."""
    return is_unsatisfiable(ast.Not(formula))


def is_contingent(formula: ast.Expr) -> bool:
    """Whether both the formula and its negation are satisfiable."""
    return is_satisfiable(formula) and is_satisfiable(ast.Not(formula))


def classify(formula: ast.Expr) -> Classification:
    """Classify a formula as tautology, contingent or unsatisfiable.

    Args:
        formula: Formula to classify

    Returns:
        The single classification that holds for the formula
    """
    if not is_satisfiable(formula):
        return Classification.UNSATISFIABLE
    if is_satisfiable(ast.Not(formula)):
        return Classification.CONTINGENT
    return Classification.TAUTOLOGY
