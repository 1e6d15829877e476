# formula/ast_nodes.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Expression tree node classes for propositional formula representation

"""Expression tree node classes for propositional formulas.

This module defines the immutable and hashable node classes used to build
propositional formulas. The tree is a closed type with exactly four node
kinds; constants are not part of it and must be encoded by the caller as
tautological or contradictory combinations of atoms.

Node Types:
    Atom: Propositional variable identified by name
    Not, And, Or: Standard Boolean connectives

All nodes support the visitor design pattern for traversal and
transformation. The Python operators ``&``, ``|``, ``~`` and ``>>`` are
overloaded to build nodes (conjunction, disjunction, negation and
implication). They never evaluate anything. A plain string operand is
promoted to an Atom.

Equivalence has no operator: ``==`` is structural equality of trees and
``^`` would read as exclusive or. Build it with ``formula.equiv(a, b)``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Union


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type to
    enable type-safe traversal and transformation operations.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


def coerce(value: Union[Expr, str]) -> Expr:
    """Promote a variable name to an Atom, pass formulas through unchanged.

    Args:
        value: Formula node or variable name

    Returns:
        Formula node

    Raises:
        TypeError: If value is neither a formula nor a string
    """
    if isinstance(value, Expr):
        return value
    if isinstance(value, str):
        return Atom(value)
    raise TypeError(
        f"Cannot build a formula from {type(value).__name__!r}, expected Expr or str"
    )


def _coerce_or_none(value):
    if isinstance(value, (Expr, str)):
        return coerce(value)
    return None


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all formula nodes.

    Provides the foundation for immutable expression trees with visitor
    pattern support and the operator sugar shared by every node type.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError

    def __and__(self, other):
        rhs = _coerce_or_none(other)
        if rhs is None:
            return NotImplemented
        return And(self, rhs)

    def __rand__(self, other):
        lhs = _coerce_or_none(other)
        if lhs is None:
            return NotImplemented
        return And(lhs, self)

    def __or__(self, other):
        rhs = _coerce_or_none(other)
        if rhs is None:
            return NotImplemented
        return Or(self, rhs)

    def __ror__(self, other):
        lhs = _coerce_or_none(other)
        if lhs is None:
            return NotImplemented
        return Or(lhs, self)

    def __invert__(self):
        return Not(self)

    def __rshift__(self, other):
        # a >> b reads as "a implies b"
        rhs = _coerce_or_none(other)
        if rhs is None:
            return NotImplemented
        return Or(Not(self), rhs)

    def __rrshift__(self, other):
        lhs = _coerce_or_none(other)
        if lhs is None:
            return NotImplemented
        return Or(Not(lhs), self)


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Propositional variable.

    Two atoms denote the same variable iff their names are equal.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The formula being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} && {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} || {self.right})"
