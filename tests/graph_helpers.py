import networkx as nx

from nx_spantree.edges import UndirectedEdge
from nx_spantree.graph import Graph
from nx_spantree.union_find import UnionFind


def make_graph(upper_bound, pairs):
    graph = Graph(upper_bound)
    for u, v in pairs:
        graph.add_edge(UndirectedEdge(u, v, 0.0))
    return graph


def edge_pairs(edges):
    return {frozenset((e.source, e.destination)) for e in edges}


def to_nx_tree(edges):
    T = nx.Graph()
    T.add_edges_from((e.source, e.destination) for e in edges)
    return T


def check_spanning_tree(graph, tree, msg_prefix=""):
    """
    tree must have order - 1 edges of graph, close no cycle and touch every vertex
    """
    assert len(tree) == graph.order() - 1, f"{msg_prefix} expected {graph.order() - 1} edges, got {len(tree)}"
    union_find = UnionFind(graph.upper_bound)
    for e in tree:
        assert graph.has_edge(e.source, e.destination), f"{msg_prefix} ({e.source}, {e.destination}) not in graph"
        assert union_find.union(e.source, e.destination), f"{msg_prefix} ({e.source}, {e.destination}) closes a cycle"
    roots = {union_find.find(v) for v in graph.vertices()}
    assert len(roots) == 1, f"{msg_prefix} tree leaves {len(roots)} components"
