import sys

import networkx as nx

from .edges import DirectedEdge, UndirectedEdge
from .graph import Graph
from .random_trees import generate_random_tree, normalize_method
from .rooted_tree import RootedTree
from .search import breadth_first_tree, is_connected


class NxSpanTreeGraph:
    """
    Minimal backend graph wrapper understood by NetworkX dispatch
    Holds an nx_spantree Graph over 0..n-1 and preserves original node labels
    """

    __networkx_backend__ = "spantree"

    def __init__(self, graph: Graph, nodes, directed=False, orig_graph=None):
        self._G = graph
        self._nodes = list(nodes)
        self._directed = directed
        self._orig_graph = orig_graph
        self._index = {n: i for i, n in enumerate(self._nodes)}

    def is_directed(self) -> bool:
        return self._directed

    def is_multigraph(self) -> bool:
        return False

    def _edges_py(self):
        nodes = self._nodes
        return [(nodes[e.source], nodes[e.destination]) for e in self._G.edges()]


def convert_from_nx(G, weight="weight", **kwargs):
    """
    Convert a NetworkX Graph -> NxSpanTreeGraph
    - Nodes are relabeled to 0..n-1
    - Parallel edges collapsed (no multigraph support)
    - Directed graphs keep one DirectedEdge per arc
    """
    nodes = list(G.nodes())
    index = {n: i for i, n in enumerate(nodes)}
    directed = G.is_directed()

    graph = Graph(len(nodes))
    for i in range(len(nodes)):
        graph.ensure_vertex(i)
    for u, v, data in G.edges(data=True):
        w = data.get(weight, 0.0) if weight is not None else 0.0
        edge = UndirectedEdge(index[u], index[v], float(w))
        graph.add_edge(DirectedEdge(edge) if directed else edge)

    return NxSpanTreeGraph(graph, nodes, directed=directed, orig_graph=G)


def convert_to_nx(obj, **kwargs):
    """NxSpanTreeGraph or Graph -> NetworkX Graph/DiGraph (no attributes)"""
    if isinstance(obj, NxSpanTreeGraph):
        if getattr(obj, "_orig_graph", None) is not None:
            return obj._orig_graph
        H = nx.DiGraph() if obj.is_directed() else nx.Graph()
        H.add_nodes_from(obj._nodes)
        H.add_edges_from(obj._edges_py())
        return H
    if isinstance(obj, Graph):
        H = nx.Graph()
        H.add_nodes_from(obj.vertices())
        H.add_weighted_edges_from((e.source, e.destination, e.weight) for e in obj.edges())
        return H
    return obj


def can_run(name, args, kwargs):
    return name in (
        "bfs_edges",
        "random_spanning_tree",
    )


def should_run(name, args, kwargs):
    return True


def bfs_edges(G, source, reverse=False, depth_limit=None, sort_neighbors=None):
    """
    Backend implementation for nx.bfs_edges
    Only basic BFS is supported; other kwargs being used leads to Python fallback
    Returns an iterator of edges in BFS order from source
    """
    if depth_limit is not None or sort_neighbors is not None or reverse:
        G = convert_to_nx(G)
        return nx.bfs_edges(
            G,
            source=source,
            reverse=reverse,
            depth_limit=depth_limit,
            sort_neighbors=sort_neighbors
        )
    try:
        if isinstance(G, NxSpanTreeGraph):
            nodes = G._nodes
            source_idx = G._index.get(source, -1)
            if source_idx == -1:
                raise nx.NodeNotFound(f"Source node {source} not in graph")
            tree = breadth_first_tree(G._G, source_idx)
            return iter([(nodes[e.source], nodes[e.destination]) for e in tree])
        elif isinstance(G, Graph):
            if not G.is_vertex(source):
                raise nx.NodeNotFound(f"Source node {source} not in graph")
            return iter([(e.source, e.destination) for e in breadth_first_tree(G, source)])
        else:
            return bfs_edges(convert_from_nx(G), source=source)
    except Exception:
        G = convert_to_nx(G)
        return nx.bfs_edges(
            G,
            source=source,
            reverse=reverse,
            depth_limit=depth_limit,
            sort_neighbors=sort_neighbors
        )


def random_spanning_tree(G, weight=None, *, multiplicative=True, seed=None, method="kruskal"):
    """
    Backend implementation for nx.random_spanning_tree
    Unweighted connected undirected graphs only; method picks the generator
    ('kruskal', 'random-walk', 'random-edge-insertion', 'aldous-broder').
    Weighted, directed or disconnected input leads to Python fallback
    """
    H = G if isinstance(G, NxSpanTreeGraph) else None
    if weight is not None or (H is not None and H.is_directed()) or (H is None and G.is_directed()):
        G = convert_to_nx(G)
        return nx.random_spanning_tree(G, weight, multiplicative=multiplicative, seed=seed)
    try:
        if H is None:
            H = convert_from_nx(G)
        algo = normalize_method(method)
        if H._G.order() > 0 and not is_connected(H._G):
            raise nx.NetworkXError("random_spanning_tree requires a connected graph")
        edges = generate_random_tree(H._G, algo, seed=seed)
        T = nx.Graph()
        T.add_nodes_from(H._nodes)
        T.add_edges_from((H._nodes[e.source], H._nodes[e.destination]) for e in edges)
        return T
    except Exception:
        G = convert_to_nx(G)
        return nx.random_spanning_tree(G, weight, multiplicative=multiplicative, seed=seed)


def tree_statistics(T, root=None):
    """
    Statistics of a NetworkX tree, computed on the re-centered RootedTree
    root defaults to the first node; returned vertices use T's labels
    """
    if not nx.is_tree(convert_to_nx(T)):
        raise nx.NotATree("tree_statistics requires a tree")
    H = T if isinstance(T, NxSpanTreeGraph) else convert_from_nx(T)
    root = H._nodes[0] if root is None else root
    root_idx = H._index.get(root, -1)
    if root_idx == -1:
        raise nx.NodeNotFound(f"Root node {root} not in graph")
    rooted = RootedTree(H._G.edges(), root_idx)
    stats = rooted.statistics()
    stats["root"] = H._nodes[rooted.root()]
    stats["centroid"] = H._nodes[rooted.centroid()]
    return stats


backend = sys.modules[__name__]


def get_info():
    return {
        "backend_name": "spantree",
        "project": "nx-spantree",
        "package": "nx_spantree",
        "short_summary": "Random spanning tree generators and re-centered tree statistics.",
        "default_config": {},
        "functions": {
            "bfs_edges": {
                "additional_docs": "BFS discovery-order tree; ignores depth_limit and sort_neighbors.",
                "additional_parameters": {
                    "source": "Starting node for BFS traversal.",
                },
            },
            "random_spanning_tree": {
                "additional_docs": "Unweighted random spanning tree from one of four generators; weighted input falls back to NetworkX.",
                "additional_parameters": {
                    "method : str": "'kruskal' (default), 'random-walk', 'random-edge-insertion' or 'aldous-broder'.",
                    "seed : int or random.Random": "Random seed (default None).",
                },
            },
        },
    }
