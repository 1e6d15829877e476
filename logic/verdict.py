# logic/verdict.py

"""
Classification of a propositional formula by its truth table: every formula
is exactly one of tautology, contingent or unsatisfiable.
"""

from enum import Enum


class Classification(Enum):
    """Three-way classification of a formula."""
    TAUTOLOGY = "tautology"  # true under every assignment
    CONTINGENT = "contingent"  # true under some, false under others
    UNSATISFIABLE = "unsatisfiable"  # true under no assignment

    def __str__(self) -> str:
        return self.value
