# formula/__init__.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Formula data model exports

"""Immutable propositional formula trees.

Core Types:
    Expr: Base class of every formula node
    Atom, And, Or, Not: The four node kinds

Constructors:
    atom, conj, disj, neg: Named constructors for the primitive nodes
    implies, equiv: Derived connectives
    canonical_conjunct: Conjunction of literals matching an assignment

Example:
    >>> from formula import atom, implies
    >>> a, b = atom("A"), atom("B")
    >>> str(implies(a & (a >> b), b))
    '(!(A && (!A || B)) || B)'
"""

from .ast_nodes import Visitor, Expr, Atom, And, Or, Not
from .builders import (
    atom,
    conj,
    disj,
    neg,
    implies,
    equiv,
    literal,
    canonical_conjunct,
)

__all__ = [
    "Visitor",
    "Expr",
    "Atom",
    "And",
    "Or",
    "Not",
    "atom",
    "conj",
    "disj",
    "neg",
    "implies",
    "equiv",
    "literal",
    "canonical_conjunct",
]
