# logic/__init__.py

"""Evaluation and satisfiability interface.

This package provides:
  • evaluate / get_variables: partial evaluation and free variables
  • Value / Residual: the two outcomes of partial evaluation
  • find_witness: naive case-splitting search for a satisfying assignment
  • is_satisfiable / is_unsatisfiable / is_tautology / is_contingent
  • classify / Classification: three-way classification of a formula
"""

from .evaluator import Value, Residual, evaluate, get_variables
from .search import (
    DONT_CARE_DEFAULT,
    NaiveWitnessSearch,
    find_witness,
    find_counterexample,
    is_satisfiable,
    is_unsatisfiable,
    is_tautology,
    is_contingent,
    classify,
)
from .verdict import Classification

__all__ = [
    "Value",
    "Residual",
    "evaluate",
    "get_variables",
    "DONT_CARE_DEFAULT",
    "NaiveWitnessSearch",
    "find_witness",
    "find_counterexample",
    "is_satisfiable",
    "is_unsatisfiable",
    "is_tautology",
    "is_contingent",
    "classify",
    "Classification",
]
