import logging
from itertools import combinations

import pytest

from grouprounds.elements import ConflictMatrix
from grouprounds.logger import ga_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Keep search tracing quiet unless a test turns it on
    ga_logger.disabled = True


@pytest.fixture(autouse=True)
def quiet_logger():
    ga_logger.disabled = True
    ga_logger.clear()
    yield
    ga_logger.disabled = True
    ga_logger.clear()


@pytest.fixture
def diagonal():
    """Factory for relations with only the diagonal set (no forbidden pairs)."""
    return ConflictMatrix.diagonal


@pytest.fixture
def all_pairs():
    """Every unordered pair grouped anywhere in a sequence, with repeats."""

    def collect(sequence):
        return [
            pair
            for assignment_round in sequence
            for group in assignment_round
            for pair in combinations(group.indices, 2)
        ]

    return collect
