import random

import networkx as nx
import pytest

from nx_spantree.union_find import UnionFind


@pytest.mark.unit
def test_union_reports_cycles():
    uf = UnionFind(4)
    assert uf.union(0, 1)
    assert uf.union(2, 3)
    assert not uf.union(1, 0)
    assert uf.union(1, 3)
    assert not uf.union(0, 2)
    assert uf.connected(0, 3)
    assert len(uf) == 4


@pytest.mark.unit
def test_find_is_idempotent_on_roots():
    uf = UnionFind(5)
    for v in range(5):
        assert uf.find(v) == v
    uf.union(0, 1)
    root = uf.find(1)
    assert uf.find(root) == root


@pytest.mark.unit
def test_union_by_rank():
    uf = UnionFind(4)
    uf.union(0, 1)  # tie: 1 goes under 0
    assert uf.parent[1] == 0 and uf.rank[0] == 1
    uf.union(2, 0)  # lower rank root 2 goes under 0
    assert uf.parent[2] == 0 and uf.rank[0] == 1
    uf.union(3, 2)
    assert uf.find(3) == 0


@pytest.mark.unit
def test_find_compresses_path():
    uf = UnionFind(5)
    # hand-built chain 4 -> 3 -> 2 -> 1 -> 0
    uf.parent = [0, 0, 1, 2, 3]
    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]


@pytest.mark.unit
def test_matches_connected_components(rng_seed):
    rng = random.Random(rng_seed)
    n = 60
    uf = UnionFind(n)
    G = nx.Graph()
    G.add_nodes_from(range(n))
    for _ in range(45):
        a, b = rng.randrange(n), rng.randrange(n)
        merged = uf.union(a, b)
        assert merged == (not nx.has_path(G, a, b))
        G.add_edge(a, b)

    for component in nx.connected_components(G):
        assert len({uf.find(v) for v in component}) == 1
    roots = {uf.find(v) for v in range(n)}
    assert len(roots) == nx.number_connected_components(G)
