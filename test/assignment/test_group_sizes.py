import pytest

from grouprounds.assignment import group_sizes
from grouprounds.exceptions import (
    AssignmentConfigurationError,
    EmptyPopulationError,
    InfeasibleMinimumError,
    InvalidMinimumError,
)


@pytest.mark.parametrize(
    "n, min_size, expected",
    [
        (7, 2, [3, 2, 2]),
        (5, 3, [5]),
        (4, 2, [2, 2]),
        (4, 3, [4]),
        (6, 3, [3, 3]),
        (8, 3, [4, 4]),
        (10, 3, [4, 3, 3]),
        (11, 3, [4, 4, 3]),
        (3, 3, [3]),
        (1, 1, [1]),
        (4, 1, [1, 1, 1, 1]),
    ],
)
def test_group_sizes_examples(n, min_size, expected):
    assert group_sizes(n, min_size) == expected


@pytest.mark.parametrize("n", range(1, 25))
def test_group_sizes_properties(n):
    for min_size in range(1, n + 1):
        sizes = group_sizes(n, min_size)
        assert sum(sizes) == n
        assert all(size >= min_size for size in sizes)
        assert max(sizes) - min(sizes) <= 1
        assert len(sizes) == n // min_size


def test_minimum_larger_than_population_rejected():
    with pytest.raises(InfeasibleMinimumError):
        group_sizes(3, 4)


def test_invalid_inputs_rejected():
    with pytest.raises(InvalidMinimumError):
        group_sizes(3, 0)
    with pytest.raises(EmptyPopulationError):
        group_sizes(0, 1)
    # All configuration errors share one base class
    with pytest.raises(AssignmentConfigurationError):
        group_sizes(2, 5)
