"""
Random spanning tree generators

Each generator takes a connected Graph and returns the order - 1 edges of a
spanning tree. Randomized generators accept ``seed`` (None, int or
random.Random) the way NetworkX random graph generators do.
"""

import heapq
import logging
from collections import deque

import networkx as nx
from networkx.utils import py_random_state

from .edges import UndirectedEdge, to_undirected_edges
from .search import breadth_first_tree
from .union_find import UnionFind

logger = logging.getLogger(__name__)

__all__ = [
    "TREE_METHODS",
    "minimum_weight_spanning_tree",
    "random_walk_tree",
    "random_edge_insertion",
    "aldous_broder",
    "generate_random_tree",
]


def _reweighted_edges(graph, seed):
    return [
        UndirectedEdge(edge.source, edge.destination, seed.random())
        for edge in graph.edges()
    ]


@py_random_state("seed")
def minimum_weight_spanning_tree(graph, seed=None):
    """
    Kruskal's algorithm over independent uniform [0, 1) edge weights
    Returns fresh UndirectedEdge objects carrying the drawn weights
    """
    target = graph.order() - 1
    if target <= 0:
        return []

    queue = _reweighted_edges(graph, seed)
    heapq.heapify(queue)
    union_find = UnionFind(graph.upper_bound)
    tree = []
    while queue and len(tree) < target:
        edge = heapq.heappop(queue)
        if union_find.union(edge.source, edge.destination):
            tree.append(edge)
    return tree


def _push_shuffled(graph, vertex, frontier, seed):
    out_edges = graph.out_edges(vertex)
    seed.shuffle(out_edges)
    frontier.extend(out_edges)


@py_random_state("seed")
def random_walk_tree(graph, random_start=False, seed=None):
    """
    Randomized traversal from vertex 0 (or a uniformly drawn vertex)

    Out-edges enter the frontier freshly shuffled and leave it from the front;
    an edge whose destination is unvisited joins the tree. Returns the
    DirectedEdge views oriented from parent to child.
    """
    if graph.order() == 0:
        return []

    start = seed.choice(graph.vertices()) if random_start else 0
    if not graph.is_vertex(start):
        raise nx.NodeNotFound(f"Start vertex {start} not in graph")

    visited = {start}
    frontier = deque()
    _push_shuffled(graph, start, frontier, seed)
    tree = []
    while frontier:
        directed = frontier.popleft()
        target = directed.destination
        if target in visited:
            continue
        visited.add(target)
        tree.append(directed)
        _push_shuffled(graph, target, frontier, seed)
    return tree


@py_random_state("seed")
def random_edge_insertion(graph, seed=None):
    """
    Draw edges uniformly with replacement, keep those that close no cycle
    The graph must be connected, otherwise the loop never ends
    """
    target = graph.order() - 1
    if target <= 0:
        return []

    edges = graph.edges()
    if not edges:
        raise nx.NetworkXError("Cannot build a spanning tree of a graph without edges")

    union_find = UnionFind(graph.upper_bound)
    tree = []
    attempts = 0
    while len(tree) < target:
        edge = seed.choice(edges)
        attempts += 1
        if union_find.union(edge.source, edge.destination):
            tree.append(edge)
    logger.debug("random edge insertion accepted %d edges in %d draws", len(tree), attempts)
    return tree


def aldous_broder(graph):
    """
    Breadth-first spanning tree from vertex 0

    Deterministic despite the name: this is the discovery-order tree the
    method has always produced, not the Aldous-Broder random walk.
    """
    if graph.order() == 0:
        return []
    return breadth_first_tree(graph, 0)


TREE_METHODS = {
    "kruskal": minimum_weight_spanning_tree,
    "random-walk": random_walk_tree,
    "random-edge-insertion": random_edge_insertion,
    "aldous-broder": aldous_broder,
}

# positional indices accepted by the command line
_METHOD_INDICES = {
    "1": "kruskal",
    "2": "random-walk",
    "3": "random-edge-insertion",
    "4": "aldous-broder",
}


def normalize_method(method) -> str:
    name = str(method).lower().replace("_", "-")
    name = _METHOD_INDICES.get(name, name)
    if name not in TREE_METHODS:
        raise ValueError(f"Unknown random tree method: {method}")
    return name


def generate_random_tree(graph, method="kruskal", seed=None):
    """
    Run one generator by name and return the tree as undirected edges
    The random walk starts from a random vertex here
    """
    name = normalize_method(method)
    logger.debug("generating %s tree on %r", name, graph)
    if name == "kruskal":
        tree = minimum_weight_spanning_tree(graph, seed=seed)
    elif name == "random-walk":
        tree = random_walk_tree(graph, random_start=True, seed=seed)
    elif name == "random-edge-insertion":
        tree = random_edge_insertion(graph, seed=seed)
    else:
        tree = aldous_broder(graph)
    return to_undirected_edges(tree)
