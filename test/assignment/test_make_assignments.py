import numpy as np
import pytest

from grouprounds.assignment import (
    AssignmentConfig,
    AssignmentSolver,
    canonicalize_sequences,
    make_assignments,
    verify_result_set,
)
from grouprounds.elements import ConflictMatrix, Group
from grouprounds.exceptions import (
    AssignmentConfigurationError,
    EmptyPopulationError,
    InfeasibleMinimumError,
    InvalidMinimumError,
    MalformedConflictError,
)


def check_all_assignment(n, k, exp_rounds, exp_sizes):
    conflicts = ConflictMatrix.diagonal(n)
    res = make_assignments(conflicts, k)
    nrounds = len(res[0])
    assert nrounds == exp_rounds, f"Expected {exp_rounds} rounds but found {nrounds}"
    for possibility in res:
        assert len(possibility) == exp_rounds
        for i in range(exp_rounds):
            assert [len(g) for g in possibility[i]] == exp_sizes
    verify_result_set(res, n, conflicts)


@pytest.mark.parametrize(
    "n, k, exp_rounds, exp_sizes",
    [
        (4, 2, 3, [2, 2]),
        (4, 3, 1, [4]),
        (6, 3, 1, [3, 3]),
    ],
)
def test_even_complete_all_assignments(n, k, exp_rounds, exp_sizes):
    check_all_assignment(n, k, exp_rounds, exp_sizes)


@pytest.mark.parametrize(
    "n, k, exp_rounds, exp_sizes",
    [
        (3, 2, 1, [3]),
        (5, 2, 1, [3, 2]),
        (5, 3, 1, [5]),
        (7, 2, 3, [3, 2, 2]),
    ],
)
def test_odd_complete_all_assignments(n, k, exp_rounds, exp_sizes):
    check_all_assignment(n, k, exp_rounds, exp_sizes)


def test_five_items_single_group():
    res = make_assignments(ConflictMatrix.empty(5), 3)
    assert res == [[(Group(range(5)),)]]


def test_four_items_pairs_are_permutations_of_three_matchings():
    """Known duplicates: every ordering of rounds and of groups within a round is reported."""
    res = make_assignments(ConflictMatrix.empty(4), 2)
    # 3! round orders, each of the 3 matchings in 2 group orders
    assert len(res) == 6 * 4 * 2

    matchings = {
        frozenset({(0, 1), (2, 3)}),
        frozenset({(0, 2), (1, 3)}),
        frozenset({(0, 3), (1, 2)}),
    }
    for sequence in res:
        used = {frozenset(g.indices for g in r) for r in sequence}
        assert used == matchings

    assert canonicalize_sequences(res) == [
        [
            (Group((0, 1)), Group((2, 3))),
            (Group((0, 2)), Group((1, 3))),
            (Group((0, 3)), Group((1, 2))),
        ]
    ]


def test_six_items_triples_only_one_round():
    res = make_assignments(ConflictMatrix.empty(6), 3)
    assert {len(s) for s in res} == {1}
    assert len(res) == 20
    assert len(canonicalize_sequences(res)) == 10


@pytest.mark.parametrize("n, k", [(4, 2), (5, 2), (8, 4)])
def test_no_pair_repeats_across_rounds(all_pairs, n, k):
    res = make_assignments(ConflictMatrix.empty(n), k)
    for sequence in res:
        pairs = all_pairs(sequence)
        assert len(pairs) == len(set(pairs))


def test_existing_conflicts_shorten_sequences():
    # With (0,1)(2,3) already used only two rounds remain for four items
    conflicts = ConflictMatrix.from_pairs(4, [(0, 1), (2, 3)])
    res = make_assignments(conflicts, 2)
    assert {len(s) for s in res} == {2}
    verify_result_set(res, 4, conflicts)


def test_fully_blocked_relation_yields_empty_sequence():
    conflicts = ConflictMatrix.from_pairs(2, [(0, 1)])
    assert make_assignments(conflicts, 2) == [[]]


def test_singleton_rounds_are_not_repeated():
    res = make_assignments(ConflictMatrix.empty(1), 1)
    assert res == [[(Group((0,)),)]]

    res = make_assignments(ConflictMatrix.empty(3), 1)
    assert {len(s) for s in res} == {1}
    # One round, reported once for every order of its singleton groups
    assert len(res) == 6
    assert len(canonicalize_sequences(res)) == 1


def test_relation_restored_after_search():
    conflicts = ConflictMatrix.diagonal(5)
    conflicts.add_pairwise([0, 4])
    before = conflicts.snapshot()
    make_assignments(conflicts, 2)
    assert np.array_equal(conflicts.matrix, before)


def test_caller_array_is_restored_in_place():
    array = np.eye(4, dtype=bool)
    before = array.copy()
    res = make_assignments(array, 2)
    assert len(res[0]) == 3
    assert np.array_equal(array, before)


def test_nested_list_input_accepted():
    res = make_assignments([[False] * 4 for _ in range(4)], 3)
    assert res == [[(Group((0, 1, 2, 3)),)]]


def test_config_options():
    config = AssignmentConfig(min_group_size=2, canonicalize=True, verify_results=True)
    res = make_assignments(ConflictMatrix.empty(4), config=config)
    assert len(res) == 1
    # Explicit minimum overrides the config value
    res = make_assignments(ConflictMatrix.empty(4), 3, config)
    assert res == [[(Group((0, 1, 2, 3)),)]]


def test_solver_statistics_and_rerun():
    solver = AssignmentSolver(ConflictMatrix.empty(4), 2)
    assert solver.group_sizes == [2, 2]
    first = solver.solve()
    assert solver.best_length == 3
    assert solver.dead_ends == len(first)
    # 6 first rounds, 4 second rounds each, 2 third rounds each
    assert solver.rounds_explored == 6 + 6 * 4 + 6 * 4 * 2
    assert solver.solve() == first


def test_logging_enabled_run_produces_html():
    from grouprounds.logger import ga_logger

    ga_logger.disabled = False
    make_assignments(ConflictMatrix.empty(4), 2)
    html = ga_logger.get_html_content()
    assert "Group Assignment Search" in html
    assert "<strong>Best length:</strong> 3" in html


@pytest.mark.parametrize(
    "conflicts, min_size, error",
    [
        (np.zeros((0, 0), dtype=bool), 1, EmptyPopulationError),
        ([], 2, EmptyPopulationError),
        ([[False, False], [False]], 1, MalformedConflictError),
        (np.zeros((2, 3), dtype=bool), 1, MalformedConflictError),
        (np.array([[False, True], [False, False]]), 1, MalformedConflictError),
        (np.zeros((3, 3), dtype=bool), 4, InfeasibleMinimumError),
        (np.zeros((3, 3), dtype=bool), 0, InvalidMinimumError),
    ],
    ids=[
        "empty",
        "empty-list",
        "ragged",
        "not-square",
        "asymmetric",
        "infeasible",
        "zero-minimum",
    ],
)
def test_configuration_errors(conflicts, min_size, error):
    with pytest.raises(error):
        make_assignments(conflicts, min_size)
    with pytest.raises(AssignmentConfigurationError):
        make_assignments(conflicts, min_size)


def test_config_fields_are_all_search_options():
    from dataclasses import fields

    assert [f.name for f in fields(AssignmentConfig)] == [
        "min_group_size",
        "canonicalize",
        "timeout_seconds",
        "verify_results",
        "clock",
    ]
