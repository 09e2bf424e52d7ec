import logging
from collections import deque

import networkx as nx
import numpy as np

from .edges import as_undirected
from .graph import Graph
from .search import breadth_first_tree

logger = logging.getLogger(__name__)


class RootedTreeNode:
    """One vertex of a RootedTree; children are owned, there is no parent link"""

    __slots__ = ("vertex", "children", "height", "size", "depth")

    def __init__(self, vertex: int):
        self.vertex = vertex
        self.children = []
        self.height = 0
        self.size = 1
        self.depth = 0

    def update_height(self):
        self.height = max((child.height for child in self.children), default=-1) + 1

    def update_size(self):
        self.size = 1 + sum(child.size for child in self.children)

    def set_children_depth(self):
        for child in self.children:
            child.depth = self.depth + 1

    def max_height_child(self):
        # first child reaching the maximum wins ties
        return max(self.children, key=lambda child: child.height, default=None)

    def max_size_child(self):
        return max(self.children, key=lambda child: child.size, default=None)

    def second_max_height(self) -> int:
        """Second largest child height, counting repeats; -1 with fewer than two children"""
        if len(self.children) < 2:
            return -1
        first, second = -1, -1
        for child in self.children:
            if child.height > first:
                first, second = child.height, first
            elif child.height > second:
                second = child.height
        return second

    def describe(self) -> str:
        children = " ".join(str(child.vertex) for child in self.children)
        return (
            f"RootedTreeNode {self.vertex}, children: {children} "
            f"(height: {self.height}, size: {self.size}, "
            f"2nd height: {self.second_max_height()}, depth: {self.depth})"
        )

    def __repr__(self):
        return f"RootedTreeNode({self.vertex}, height={self.height}, size={self.size}, depth={self.depth})"


class RootedTree:
    """
    Tree built from an edge list, re-rooted toward its center

    Construction steps:
    1. BFS over the edge list from the given root gives parent -> child arcs
       in discovery order; one node per vertex is attached to its parent.
    2. Heights are computed in reverse BFS order (children before parents).
    3. While the root is taller than its second tallest child plus two, the
       root is swapped with its tallest child.
    4. BFS order is recomputed from the new root, then heights and sizes
       (bottom-up) and depths (top-down).

    All statistics are read from the finished structure.
    """

    def __init__(self, edges, root: int = 0):
        edges = [as_undirected(edge) for edge in edges]
        self._order = len(edges) + 1
        upper_bound = 1 + max([root] + [max(edge.source, edge.destination) for edge in edges])

        graph = Graph(upper_bound)
        if edges and not any(root in edge.endpoints() for edge in edges):
            raise nx.NodeNotFound(f"Root vertex {root} is not an endpoint of any edge")
        graph.ensure_vertex(root)
        if not graph.is_vertex(root):
            raise nx.NodeNotFound(f"Root vertex {root} is not a valid vertex")
        for edge in edges:
            graph.add_edge(edge)

        arcs = breadth_first_tree(graph, root)
        if len(arcs) != self._order - 1 or graph.order() != self._order:
            raise nx.NotATree(
                f"{len(edges)} edges do not form a tree spanning {self._order} vertices from {root}"
            )

        self._nodes = [None] * upper_bound
        self._bfs_order = []
        self._inverse_bfs_order = []
        self._root = None
        self._swaps = 0

        self._create_tree(root, arcs)
        self._reroot()
        self._compute_heights()
        self._compute_sizes()
        self._compute_depths()
        logger.debug(
            "rooted tree of order %d re-rooted from %d to %d in %d swaps",
            self._order, root, self._root.vertex, self._swaps,
        )

    # construction

    def _create_tree(self, root, arcs):
        self._nodes[root] = RootedTreeNode(root)
        self._root = self._nodes[root]
        self._bfs_order.append(self._root)
        for arc in arcs:
            child = RootedTreeNode(arc.destination)
            self._nodes[arc.destination] = child
            self._nodes[arc.source].children.append(child)
            self._bfs_order.append(child)
        self._inverse_bfs_order = self._bfs_order[::-1]

    def _is_unbalanced(self) -> bool:
        return self._root.height > self._root.second_max_height() + 2

    def _swap_root_with(self, child):
        old_root = self._root
        old_root.children.remove(child)
        old_root.update_height()
        child.height = max(old_root.height + 1, child.height)
        child.children.append(old_root)
        self._root = child
        self._swaps += 1

    def _reroot(self):
        self._compute_heights()
        while self._is_unbalanced():
            self._swap_root_with(self._root.max_height_child())
        self._reset_bfs_order()

    def _reset_bfs_order(self):
        order = []
        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            order.append(current)
            queue.extend(current.children)
        self._bfs_order = order
        self._inverse_bfs_order = order[::-1]

    def _compute_heights(self):
        for node in self._inverse_bfs_order:
            node.update_height()

    def _compute_sizes(self):
        for node in self._inverse_bfs_order:
            node.update_size()

    def _compute_depths(self):
        self._root.depth = 0
        for node in self._bfs_order:
            node.set_children_depth()

    # lookups

    def _node(self, vertex) -> RootedTreeNode:
        node = None
        if isinstance(vertex, (int, np.integer)) and 0 <= vertex < len(self._nodes):
            node = self._nodes[vertex]
        if node is None:
            raise nx.NodeNotFound(f"Vertex {vertex} not in tree")
        return node

    def __len__(self):
        return self._order

    def __contains__(self, vertex):
        try:
            self._node(vertex)
        except nx.NodeNotFound:
            return False
        return True

    def order(self) -> int:
        return self._order

    def root(self) -> int:
        return self._root.vertex

    def root_node(self) -> RootedTreeNode:
        return self._root

    def node(self, vertex) -> RootedTreeNode:
        return self._node(vertex)

    def height(self, vertex) -> int:
        return self._node(vertex).height

    def depth(self, vertex) -> int:
        return self._node(vertex).depth

    def subtree_size(self, vertex) -> int:
        return self._node(vertex).size

    def children(self, vertex):
        return [child.vertex for child in self._node(vertex).children]

    def bfs_order(self):
        return [node.vertex for node in self._bfs_order]

    # statistics

    def diameter(self) -> int:
        return self._root.height + self._root.second_max_height() + 1

    def radius(self) -> int:
        return self._root.height

    def average_eccentricity(self) -> float:
        """Mean depth from the centered root, used as an eccentricity estimate"""
        return sum(node.depth for node in self._bfs_order) / self._order

    def wiener_index(self) -> int:
        """
        Sum of distances over unordered vertex pairs
        Each edge above a node of subtree size s lies on s * (n - s) paths
        """
        return sum(
            node.size * (self._order - node.size)
            for node in self._bfs_order
            if node is not self._root
        )

    def _centroid_node(self) -> RootedTreeNode:
        centroid = self._root
        heaviest = centroid.max_size_child()
        while heaviest is not None and heaviest.size * 2 > self._order:
            centroid = heaviest
            heaviest = centroid.max_size_child()
        return centroid

    def centroid(self) -> int:
        return self._centroid_node().vertex

    def distance_from_center_to_centroid(self) -> int:
        return self._centroid_node().depth

    def degree_distribution(self, max_degree: int) -> np.ndarray:
        """
        Count of vertices per degree in [0, min(max_degree, order - 1)]
        Degrees above the cap are not counted
        """
        if max_degree < 0:
            raise ValueError(f"max_degree must be non-negative, got {max_degree}")
        max_index = min(max_degree, self._order - 1)
        degrees = np.fromiter(
            (len(node.children) + (0 if node is self._root else 1) for node in self._bfs_order),
            dtype=np.int64,
            count=self._order,
        )
        return np.bincount(degrees[degrees <= max_index], minlength=max_index + 1)

    def statistics(self) -> dict:
        return {
            "order": self._order,
            "diameter": self.diameter(),
            "radius": self.radius(),
            "wiener_index": self.wiener_index(),
            "center_to_centroid": self.distance_from_center_to_centroid(),
            "average_eccentricity": self.average_eccentricity(),
        }

    def describe(self) -> str:
        return "\n".join(node.describe() for node in self._bfs_order)

    def to_nx(self):
        """Arborescence from the centered root, with height/size/depth node attributes"""
        T = nx.DiGraph()
        for node in self._bfs_order:
            T.add_node(node.vertex, height=node.height, size=node.size, depth=node.depth)
        for node in self._bfs_order:
            T.add_edges_from((node.vertex, child.vertex) for child in node.children)
        return T
