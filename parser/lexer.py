# parser/lexer.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

Breaks formula text, in the same syntax that ``str(formula)`` produces, into
tokens for the parser and reports illegal characters with their position.

Supported Tokens:
- Operators: !, &&, ||, =>, <=>, (, )
- Identifiers: propositional variables
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class PropLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "EQUIV",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Longer operators first: <=> must win over =>
    EQUIV = r"<=>"
    IMPLIES = r"=>"
    AND = r"&&"
    OR = r"\|\|"
    NOT = r"!"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
