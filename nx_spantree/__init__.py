from importlib import import_module

__all__ = [
    "DirectedEdge",
    "UndirectedEdge",
    "to_undirected_edges",
    "Graph",
    "UnionFind",
    "RootedTree",
    "RootedTreeNode",
    "breadth_first_tree",
    "minimum_weight_spanning_tree",
    "random_walk_tree",
    "random_edge_insertion",
    "aldous_broder",
    "generate_random_tree",
    "TreeStatistics",
    "convert_from_nx",
    "convert_to_nx",
    "tree_statistics",
]

_LAZY = {
    "DirectedEdge": "nx_spantree.edges",
    "UndirectedEdge": "nx_spantree.edges",
    "to_undirected_edges": "nx_spantree.edges",
    "Graph": "nx_spantree.graph",
    "UnionFind": "nx_spantree.union_find",
    "RootedTree": "nx_spantree.rooted_tree",
    "RootedTreeNode": "nx_spantree.rooted_tree",
    "breadth_first_tree": "nx_spantree.search",
    "minimum_weight_spanning_tree": "nx_spantree.random_trees",
    "random_walk_tree": "nx_spantree.random_trees",
    "random_edge_insertion": "nx_spantree.random_trees",
    "aldous_broder": "nx_spantree.random_trees",
    "generate_random_tree": "nx_spantree.random_trees",
    "TreeStatistics": "nx_spantree.stats",
    "convert_from_nx": "nx_spantree.backend",
    "convert_to_nx": "nx_spantree.backend",
    "tree_statistics": "nx_spantree.backend",
}


def __getattr__(name):
    """
    lazily expose everything from its module; networkx imports this package
    through its backend entry points while networkx itself is still loading
    """
    if name in _LAZY:
        return getattr(import_module(_LAZY[name]), name)
    raise AttributeError(f"module 'nx_spantree' has no attribute {name!r}")
