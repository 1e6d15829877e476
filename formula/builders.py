# formula/builders.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Named constructors and derived connectives for building formulas

"""Named constructors for propositional formulas.

Implication and equivalence are pure syntactic sugar over the four primitive
node kinds and introduce no new semantics::

    implies(a, b) = Or(Not(a), b)
    equiv(a, b)   = Or(And(a, b), And(Not(a), Not(b)))

Every constructor accepts either a formula node or a variable name.
"""

from __future__ import annotations
from typing import Mapping, Optional, Union

from .ast_nodes import Expr, Atom, And, Or, Not, coerce

Operand = Union[Expr, str]


def atom(name: str) -> Atom:
    """Build a propositional variable."""
    return Atom(name)


def conj(left: Operand, right: Operand) -> And:
    """Build the conjunction of two formulas."""
    return And(coerce(left), coerce(right))


def disj(left: Operand, right: Operand) -> Or:
    """Build the disjunction of two formulas."""
    return Or(coerce(left), coerce(right))


def neg(operand: Operand) -> Not:
    """Build the negation of a formula."""
    return Not(coerce(operand))


def implies(antecedent: Operand, consequent: Operand) -> Or:
    """Build ``antecedent => consequent`` as ``!antecedent || consequent``."""
    return Or(Not(coerce(antecedent)), coerce(consequent))


def equiv(left: Operand, right: Operand) -> Or:
    """Build ``left <=> right`` as ``(left && right) || (!left && !right)``."""
    lhs, rhs = coerce(left), coerce(right)
    return Or(And(lhs, rhs), And(Not(lhs), Not(rhs)))


def literal(name: str, value: bool) -> Expr:
    """Build the literal that is true exactly when ``name`` has ``value``."""
    return Atom(name) if value else Not(Atom(name))


def canonical_conjunct(assignment: Mapping[str, bool]) -> Optional[Expr]:
    """Build the conjunction of literals matching a total assignment.

    The literals are folded to the left in the mapping's iteration order, so
    ``{"A": True, "B": False, "C": True}`` yields ``((A && !B) && C)``. The
    order only affects the tree shape, not the truth value.

    Args:
        assignment: Mapping from variable name to boolean value

    Returns:
        The conjunction, or None if the assignment is empty
    """
    items = iter(assignment.items())
    first = next(items, None)
    if first is None:
        return None

    expr = literal(*first)
    for name, value in items:
        expr = And(expr, literal(name, value))
    return expr
