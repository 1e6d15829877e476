# parser/grammar.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar accepts the rendering produced by ``str(formula)`` plus the
derived connectives, which are desugared while parsing:

- ``a => b``  becomes ``(!a || b)``
- ``a <=> b`` becomes ``((a && b) || (!a && !b))``

Operator Precedence (lowest to highest):
- EQUIV ('<=>'): right-associative
- IMPLIES ('=>'): right-associative
- OR ('||'): left-associative
- AND ('&&'): left-associative
- NOT ('!'): right-associative
"""

from sly import Parser
from .lexer import PropLexer
from formula.ast_nodes import Expr, Atom, Not, And, Or
from formula.builders import implies, equiv
from .exceptions import ParseError
from utils.logger import get_logger


class _PropParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from PropLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = PropLexer.tokens

    precedence = (
        ("right", "EQUIV"),
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("expr EQUIV expr")
    def expr(self, p) -> Expr:
        """Equivalence, desugared."""
        return equiv(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        """Implication, desugared."""
        return implies(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("ID")
    def expr(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Atom(p.ID)

    def parse(self, text: str) -> Expr:
        """Parse formula text into a formula tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            result = super().parse(PropLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
