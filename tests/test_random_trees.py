import random

import networkx as nx
import pytest

from graph_helpers import check_spanning_tree, edge_pairs, make_graph
from nx_spantree.edges import DirectedEdge, UndirectedEdge
from nx_spantree.families import Grid, complete_graph, erdos_renyi_graph, lollipop_graph
from nx_spantree.graph import Graph
from nx_spantree.random_trees import (
    TREE_METHODS,
    aldous_broder,
    generate_random_tree,
    minimum_weight_spanning_tree,
    normalize_method,
    random_edge_insertion,
    random_walk_tree,
)


def graph_family(name, seed):
    if name == "grid":
        return Grid(6, 5).graph
    if name == "complete":
        return complete_graph(12)
    if name == "erdos-renyi":
        return erdos_renyi_graph(60, 4, seed=seed)
    return lollipop_graph(30, seed=seed)


FAMILY_NAMES = ["grid", "complete", "erdos-renyi", "lollipop"]


# UNIT TESTS (CORRECTNESS)

@pytest.mark.unit
@pytest.mark.parametrize("family", FAMILY_NAMES)
@pytest.mark.parametrize("method", sorted(TREE_METHODS))
def test_generators_produce_spanning_trees(family, method, rng_seed):
    graph = graph_family(family, rng_seed)
    tree = generate_random_tree(graph, method, seed=rng_seed)
    assert all(isinstance(e, UndirectedEdge) for e in tree)
    check_spanning_tree(graph, tree, msg_prefix=f"{method}/{family}:")
    assert nx.is_tree(nx.Graph([(e.source, e.destination) for e in tree]))


@pytest.mark.unit
@pytest.mark.parametrize("method", ["kruskal", "random-walk", "random-edge-insertion"])
def test_generators_are_reproducible(method, rng_seed):
    graph = Grid(8, 6).graph
    first = generate_random_tree(graph, method, seed=rng_seed)
    second = generate_random_tree(graph, method, seed=rng_seed)
    assert [e.endpoints() for e in first] == [e.endpoints() for e in second]
    # also with a shared Random instance
    rng_a, rng_b = random.Random(rng_seed), random.Random(rng_seed)
    third = generate_random_tree(graph, method, seed=rng_a)
    fourth = generate_random_tree(graph, method, seed=rng_b)
    assert edge_pairs(third) == edge_pairs(fourth)


@pytest.mark.unit
def test_kruskal_accepts_edges_in_weight_order(rng_seed):
    graph = complete_graph(10)
    tree = minimum_weight_spanning_tree(graph, seed=rng_seed)
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)
    assert all(0.0 <= w < 1.0 for w in weights)
    # fresh weighted copies, graph edges untouched
    assert all(e.weight == 0.0 for e in graph.edges())
    check_spanning_tree(graph, tree, msg_prefix="kruskal:")


@pytest.mark.unit
def test_kruskal_is_minimum_for_drawn_weights(rng_seed):
    graph = Grid(5, 4).graph
    tree = minimum_weight_spanning_tree(graph, seed=rng_seed)
    # same draws, same order as the generator
    rng = random.Random(rng_seed)
    H = nx.Graph()
    for e in graph.edges():
        H.add_edge(e.source, e.destination, weight=rng.random())
    expected = nx.minimum_spanning_tree(H, weight="weight")
    assert edge_pairs(tree) == {frozenset(e) for e in expected.edges()}


@pytest.mark.unit
def test_random_walk_orients_edges_from_start(rng_seed):
    graph = Grid(6, 6).graph
    tree = random_walk_tree(graph, seed=rng_seed)
    assert all(isinstance(d, DirectedEdge) for d in tree)
    destinations = [d.destination for d in tree]
    assert 0 not in destinations
    assert len(set(destinations)) == len(destinations) == graph.order() - 1
    # every parent was discovered before its child
    seen = {0}
    for d in tree:
        assert d.source in seen
        seen.add(d.destination)


@pytest.mark.unit
def test_random_walk_random_start(rng_seed):
    graph = complete_graph(8)
    tree = random_walk_tree(graph, random_start=True, seed=rng_seed)
    check_spanning_tree(graph, tree, msg_prefix="random_walk_random_start:")
    starts = {d.source for d in tree} - {d.destination for d in tree}
    assert len(starts) == 1


@pytest.mark.unit
def test_random_walk_missing_start_raises():
    graph = make_graph(4, [(1, 2), (2, 3)])
    with pytest.raises(nx.NodeNotFound):
        random_walk_tree(graph)


@pytest.mark.unit
def test_random_edge_insertion_without_edges_raises():
    graph = Graph(3)
    for v in range(3):
        graph.ensure_vertex(v)
    with pytest.raises(nx.NetworkXError):
        random_edge_insertion(graph, seed=1)


@pytest.mark.unit
def test_aldous_broder_is_the_bfs_tree(small_grid):
    tree = aldous_broder(small_grid.graph)
    assert [(d.source, d.destination) for d in tree] == [(0, 1), (0, 2), (1, 3)]
    assert edge_pairs(generate_random_tree(small_grid.graph, "aldous-broder")) == edge_pairs(tree)


@pytest.mark.unit
@pytest.mark.parametrize("method", sorted(TREE_METHODS))
def test_tiny_graphs(method):
    empty = Graph(0)
    assert generate_random_tree(empty, method, seed=0) == []

    single = Graph(1)
    single.ensure_vertex(0)
    assert generate_random_tree(single, method, seed=0) == []

    pair = make_graph(2, [(0, 1)])
    assert edge_pairs(generate_random_tree(pair, method, seed=0)) == {frozenset((0, 1))}


@pytest.mark.unit
def test_normalize_method():
    assert normalize_method("random_walk") == "random-walk"
    assert normalize_method("Kruskal") == "kruskal"
    assert normalize_method(3) == "random-edge-insertion"
    assert normalize_method("4") == "aldous-broder"
    with pytest.raises(ValueError):
        normalize_method("wilson")


# PERFORMANCE TESTS

@pytest.mark.performance
@pytest.mark.slow
@pytest.mark.parametrize("method", sorted(TREE_METHODS))
def test_generators_large_grid(method, rng_seed):
    import time

    graph = Grid(120, 80).graph
    t0 = time.perf_counter()
    tree = generate_random_tree(graph, method, seed=rng_seed)
    elapsed = time.perf_counter() - t0
    print("")
    print(f"[{method}] grid 120x80: {elapsed:.3f}s")
    check_spanning_tree(graph, tree, msg_prefix=f"{method}_large:")
