# tests/logic_tests/test_search.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Test suite for the naive witness search and derived predicates

"""Test suite for witness search, satisfiability predicates and classification.

Concrete scenarios are checked directly; soundness and completeness are
cross-checked against a brute-force truth table on random formulas.
"""

import random

import pytest
from formula import Atom, And, Or, Not, implies, equiv, canonical_conjunct, literal
from logic import (
    Classification,
    NaiveWitnessSearch,
    Value,
    classify,
    evaluate,
    find_counterexample,
    find_witness,
    get_variables,
    is_contingent,
    is_satisfiable,
    is_tautology,
    is_unsatisfiable,
)
from utils.logger import get_logger


A, B, C, X, Y = (Atom(n) for n in "ABCXY")


def _assert_valid_witness(formula, witness):
    assert witness is not None
    assert set(witness) == set(get_variables(formula))
    assert evaluate(formula, witness) == Value(True)


class TestScenarios:
    """Classic propositional scenarios."""

    def setup_method(self):
        self.logger = get_logger()

    def test_excluded_middle_is_tautology(self):
        assert is_tautology(Or(X, Not(X)))

    def test_contradiction_is_unsatisfiable(self):
        formula = And(X, Not(X))
        assert is_unsatisfiable(formula)
        assert find_witness(formula) is None

    def test_contradiction_implies_anything(self):
        assert is_tautology(implies(And(X, Not(X)), Y))

    def test_disjunction_is_contingent(self):
        formula = Or(A, B)
        assert is_contingent(formula)
        witness = find_witness(formula)
        _assert_valid_witness(formula, witness)
        assert witness["A"] or witness["B"]

    def test_modus_ponens(self):
        assert is_tautology(implies(And(A, implies(A, B)), B))

    def test_contraposition(self):
        assert is_tautology(equiv(implies(A, B), implies(Not(B), Not(A))))

    def test_biconditional_as_two_implications(self):
        formula = equiv(And(implies(A, B), implies(B, A)), equiv(A, B))
        assert is_tautology(formula)

    def test_operator_sugar_scenario(self):
        assert is_tautology((A & (A >> B)) >> B)
        assert is_unsatisfiable("X" & ~X)

    @pytest.mark.parametrize(
        "formula, expected",
        [
            (Or(X, Not(X)), Classification.TAUTOLOGY),
            (And(X, Not(X)), Classification.UNSATISFIABLE),
            (Or(A, B), Classification.CONTINGENT),
            (A, Classification.CONTINGENT),
            (implies(A, A), Classification.TAUTOLOGY),
        ],
    )
    def test_classify(self, formula, expected):
        assert classify(formula) is expected

    def test_single_atom_witness(self):
        assert find_witness(A) == {"A": True}
        assert find_witness(Not(A)) == {"A": False}


class TestWitnessShape:
    """Witnesses are total over the formula's free variables."""

    def test_dont_care_variables_are_assigned(self):
        # A=True decides the formula before B and C are split on
        formula = Or(A, And(B, C))
        _assert_valid_witness(formula, find_witness(formula))

    def test_variables_dropped_from_residual_are_assigned(self):
        # C vanishes once A is true, but the witness must still cover it
        formula = And(Or(A, C), Or(Not(A), B))
        _assert_valid_witness(formula, find_witness(formula))

    def test_witness_is_fresh_per_call(self):
        formula = Or(A, B)
        first = find_witness(formula)
        first["A"] = not first["A"]
        second = find_witness(formula)
        _assert_valid_witness(formula, second)

    def test_counterexample_falsifies(self):
        formula = Or(A, B)
        counterexample = find_counterexample(formula)
        assert counterexample == {"A": False, "B": False}
        assert find_counterexample(Or(A, Not(A))) is None


class TestPruning:
    """Partial evaluation prunes branches before all variables are split."""

    def test_satisfied_disjunct_short_circuits(self):
        names = [f"V{i}" for i in range(10)]
        formula = Atom("A")
        for name in names:
            formula = Or(formula, Atom(name))
        search = NaiveWitnessSearch(formula)
        witness = search.run()
        _assert_valid_witness(formula, witness)
        assert search.branches_explored == 1

    def test_falsified_conjunct_short_circuits(self):
        formula = And(Not(A), And(B, And(C, X)))
        search = NaiveWitnessSearch(formula)
        _assert_valid_witness(formula, search.run())
        # A=True dies immediately, then B, C, X are each found on the first try
        assert search.branches_explored == 5

    def test_unsatisfiable_search_is_bounded(self):
        formula = And(A, Not(A))
        search = NaiveWitnessSearch(formula)
        assert search.run() is None
        assert search.branches_explored == 2


class TestSearchProperties:
    """Soundness and completeness against brute force."""

    def test_search_soundness(self, random_formulas):
        for formula in random_formulas(count=80, variable_count=5):
            witness = find_witness(formula)
            if witness is not None:
                _assert_valid_witness(formula, witness)

    def test_search_completeness(self, random_formulas, truth_table):
        for formula in random_formulas(count=80, variable_count=4, seed=2024):
            satisfiable = any(value for _, value in truth_table(formula))
            assert (find_witness(formula) is not None) == satisfiable, str(formula)

    def test_exactly_one_classification_holds(self, random_formulas):
        for formula in random_formulas(count=60, variable_count=3, seed=7):
            flags = [is_tautology(formula), is_unsatisfiable(formula), is_contingent(formula)]
            assert flags.count(True) == 1, str(formula)

    def test_classify_agrees_with_truth_table(self, random_formulas, truth_table):
        for formula in random_formulas(count=60, variable_count=3, seed=11):
            values = {value for _, value in truth_table(formula)}
            if values == {True}:
                expected = Classification.TAUTOLOGY
            elif values == {False}:
                expected = Classification.UNSATISFIABLE
            else:
                expected = Classification.CONTINGENT
            assert classify(formula) is expected, str(formula)

    def test_double_negation(self, random_formulas):
        for formula in random_formulas(count=30, variable_count=3, depth=4):
            assert is_tautology(equiv(Not(Not(formula)), formula))

    def test_de_morgan(self, random_formulas):
        formulas = random_formulas(count=20, variable_count=3, depth=3, seed=5)
        for left, right in zip(formulas[::2], formulas[1::2]):
            assert is_tautology(equiv(Not(And(left, right)), Or(Not(left), Not(right))))
            assert is_tautology(equiv(Not(Or(left, right)), And(Not(left), Not(right))))


class TestCanonicalConjunctRoundTrip:
    """Searching a canonical conjunct recovers its assignment."""

    @pytest.mark.parametrize("seed", range(5))
    def test_round_trip(self, seed):
        rng = random.Random(seed)
        assignment = {f"V{i}": rng.choice((True, False)) for i in range(8)}
        witness = find_witness(canonical_conjunct(assignment))
        assert {k: witness[k] for k in assignment} == assignment

    def test_disjunction_of_conjuncts(self):
        # Every conjunct mentions every variable, so the witness is one of them
        rng = random.Random(3)
        names = [f"V{i}" for i in range(8)]
        assignments = [{n: rng.choice((True, False)) for n in names} for _ in range(12)]

        formula = canonical_conjunct(assignments[0])
        for assignment in assignments[1:]:
            formula = Or(formula, canonical_conjunct(assignment))

        witness = find_witness(formula)
        assert witness in assignments
        assert evaluate(formula, witness) == Value(True)

    def test_random_clause_conjunction(self, truth_table):
        rng = random.Random(17)
        names = [f"V{i}" for i in range(10)]
        clauses = []
        for _ in range(40):
            members = rng.sample(names, 3)
            clause = literal(members[0], rng.choice((True, False)))
            for name in members[1:]:
                clause = Or(clause, literal(name, rng.choice((True, False))))
            clauses.append(clause)

        formula = clauses[0]
        for clause in clauses[1:]:
            formula = And(formula, clause)

        witness = find_witness(formula)
        satisfiable = any(value for _, value in truth_table(formula))
        assert (witness is not None) == satisfiable
        if witness is not None:
            _assert_valid_witness(formula, witness)
        else:
            counterexample = find_counterexample(formula)
            assert evaluate(formula, counterexample) == Value(False)
