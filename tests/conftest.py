import os
import random

import pytest

from graph_helpers import make_graph
from nx_spantree.edges import UndirectedEdge
from nx_spantree.families import Grid
from nx_spantree.graph import Graph


def pytest_configure(config):
    for marker in ("unit", "graceful_fallback", "performance", "slow"):
        config.addinivalue_line("markers", marker)


@pytest.fixture(scope="session")
def rng_seed() -> int:
    """
    session-level random seed
    - if TEST_SEED env var is set, use that to reproduce flaky runs
    - else, generate a random seed each pytest run
    - print the seed so runs can be reproduced
    """
    env_seed = os.getenv("TEST_SEED")
    if env_seed is not None:
        seed = int(env_seed)
        print("")
        print(f"Using TEST_SEED from environment: {seed}")
    else:
        seed = random.SystemRandom().randint(0, 2**32 - 1)
        print("")
        print(f"Random seed for this test run: {seed}")

    return seed


@pytest.fixture
def triangle() -> Graph:
    return make_graph(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def small_grid() -> Grid:
    return Grid(2, 2)


@pytest.fixture
def path4_edges():
    return [UndirectedEdge(0, 1), UndirectedEdge(1, 2), UndirectedEdge(2, 3)]


@pytest.fixture
def star5_edges():
    return [UndirectedEdge(0, leaf) for leaf in range(1, 5)]
