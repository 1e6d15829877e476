# logic/evaluator.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Partial evaluation of propositional formulas under variable assignments

"""Partial evaluation of formulas under (possibly partial) assignments.

Evaluating a formula reduces it to either a concrete boolean (``Value``) or a
smaller residual formula (``Residual``) from which every assigned variable has
been eliminated. The residual is equivalent to the original formula restricted
to the unassigned variables, so evaluating it under any extension of the
assignment gives the same result as evaluating the original directly.

Reduction rules:
    Atom:  bound -> Value(b); unbound -> Residual(atom)
    And:   Value(False) dominates, Value(True) vanishes,
           two residuals are conjoined again
    Or:    Value(True) dominates, Value(False) vanishes,
           two residuals are disjoined again
    Not:   negates a value or wraps the residual

Each call visits every node exactly once and never fails on a well-formed
formula.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, FrozenSet, Mapping, Optional, Union

from formula import ast_nodes as ast


@dataclass(frozen=True, slots=True)
class Value:
    """The formula is fully determined by the assignment."""

    value: bool


@dataclass(frozen=True, slots=True)
class Residual:
    """The formula still depends on unassigned variables.

    Attributes:
        formula: Simplified formula over the unassigned variables only
    """

    formula: ast.Expr


EvaluatedResult = Union[Value, Residual]

Assignment = Union[Mapping[str, bool], Callable[[str], Optional[bool]]]


def _lookup_function(assignment: Assignment) -> Callable[[str], Optional[bool]]:
    if isinstance(assignment, Mapping):
        return assignment.get
    if callable(assignment):
        return assignment
    raise TypeError(
        f"Assignment must be a mapping or a callable, got {type(assignment).__name__}"
    )


class PartialEvaluator(ast.Visitor):
    """Reduces a formula under a fixed assignment.

    Attributes:
        _lookup: Maps a variable name to its value, or None when unassigned
    """

    def __init__(self, lookup: Callable[[str], Optional[bool]]):
        self._lookup = lookup

    def evaluate(self, root: ast.Expr) -> EvaluatedResult:
        return root.accept(self)

    def visit_atom(self, n: ast.Atom) -> EvaluatedResult:
        value = self._lookup(n.name)
        if value is None:
            return Residual(n)
        return Value(bool(value))

    def visit_not(self, n: ast.Not) -> EvaluatedResult:
        result = n.operand.accept(self)
        if isinstance(result, Value):
            return Value(not result.value)
        return Residual(ast.Not(result.formula))

    def visit_and(self, n: ast.And) -> EvaluatedResult:
        left = n.left.accept(self)
        right = n.right.accept(self)

        if isinstance(left, Value) and isinstance(right, Value):
            return Value(left.value and right.value)

        # A false conjunct decides the conjunction, a true one drops out
        if isinstance(left, Value):
            return right if left.value else Value(False)
        if isinstance(right, Value):
            return left if right.value else Value(False)

        return Residual(ast.And(left.formula, right.formula))

    def visit_or(self, n: ast.Or) -> EvaluatedResult:
        left = n.left.accept(self)
        right = n.right.accept(self)

        if isinstance(left, Value) and isinstance(right, Value):
            return Value(left.value or right.value)

        # A true disjunct decides the disjunction, a false one drops out
        if isinstance(left, Value):
            return Value(True) if left.value else right
        if isinstance(right, Value):
            return Value(True) if right.value else left

        return Residual(ast.Or(left.formula, right.formula))


class VariableCollector(ast.Visitor):
    """Collects the names of all atoms reachable from a formula."""

    def visit_atom(self, n: ast.Atom) -> FrozenSet[str]:
        return frozenset((n.name,))

    def visit_not(self, n: ast.Not) -> FrozenSet[str]:
        return n.operand.accept(self)

    def visit_and(self, n: ast.And) -> FrozenSet[str]:
        return n.left.accept(self) | n.right.accept(self)

    def visit_or(self, n: ast.Or) -> FrozenSet[str]:
        return n.left.accept(self) | n.right.accept(self)


def evaluate(formula: ast.Expr, assignment: Assignment) -> EvaluatedResult:
    """Evaluate a formula under a possibly partial assignment.

    Args:
        formula: Formula to evaluate
        assignment: Mapping from variable name to boolean, or a function
            returning the value of a variable or None when it is unassigned

    Returns:
        Value when the assignment determines the formula, otherwise a
        Residual holding the simplified formula

    Example:
        >>> from formula import atom
        >>> evaluate(atom("A") | atom("B"), {"A": False})
        Residual(formula=Atom(name='B'))
    """
    return PartialEvaluator(_lookup_function(assignment)).evaluate(formula)


def get_variables(formula: ast.Expr) -> FrozenSet[str]:
    """Return the names of all free variables of a formula.

    Args:
        formula: Formula to inspect

    Returns:
        Set of atom names occurring in the formula
    """
    return formula.accept(VariableCollector())
