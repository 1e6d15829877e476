# parser/exceptions.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for formula text processing.

The formula tree itself cannot be malformed, so parsing is the only place
where input is rejected.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input text is empty, contains characters outside the
    formula syntax or does not conform to the grammar.
    """

    pass
