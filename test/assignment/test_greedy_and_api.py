import numpy as np
import pytest

from grouprounds.assignment import greedy_assignment, make_assignments, verify_sequence
from grouprounds.assignment.api import ALGORITHMS, call_assignments
from grouprounds.elements import ConflictMatrix, Group
from grouprounds.exceptions import InfeasibleMinimumError


@pytest.mark.parametrize(
    "n, k", [(3, 2), (4, 2), (5, 2), (5, 3), (6, 3), (7, 3)]
)
def test_exhaustive_is_at_least_as_long_as_greedy(n, k):
    greedy = greedy_assignment(ConflictMatrix.empty(n), k)
    verify_sequence(greedy, n)
    best = make_assignments(ConflictMatrix.empty(n), k)
    assert len(best[0]) >= len(greedy)


def test_greedy_never_beats_known_maximum():
    # Seven items in pairs: the exhaustive maximum is three rounds
    greedy = greedy_assignment(ConflictMatrix.empty(7), 2)
    verify_sequence(greedy, 7)
    assert 1 <= len(greedy) <= 3


def test_greedy_takes_first_round_each_step():
    sequence = greedy_assignment(ConflictMatrix.empty(4), 2)
    assert sequence == [
        (Group((0, 1)), Group((2, 3))),
        (Group((0, 2)), Group((1, 3))),
        (Group((0, 3)), Group((1, 2))),
    ]


def test_greedy_restores_relation():
    conflicts = ConflictMatrix.from_pairs(6, [(0, 3)])
    before = conflicts.snapshot()
    greedy_assignment(conflicts, 2)
    assert np.array_equal(conflicts.matrix, before)


def test_greedy_singletons_stop_after_one_round():
    assert greedy_assignment(ConflictMatrix.empty(2), 1) == [(Group((0,)), Group((1,)))]


def test_call_assignments_dispatch():
    assert set(ALGORITHMS) == {"exhaustive", "greedy"}

    exhaustive = call_assignments(4, 2)
    assert len(exhaustive) == 48

    greedy = call_assignments(4, 2, algorithm="greedy")
    assert len(greedy) == 1
    assert len(greedy[0]) == 3


def test_call_assignments_with_forbidden_pairs():
    res = call_assignments(4, 2, forbidden_pairs=[(0, 1), (2, 3)])
    assert {len(s) for s in res} == {2}


def test_call_assignments_errors():
    with pytest.raises(KeyError):
        call_assignments(4, 2, algorithm="annealing")
    with pytest.raises(InfeasibleMinimumError):
        call_assignments(2, 3)
