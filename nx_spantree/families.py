"""
Graph families used to exercise the tree generators

All builders go through Graph.add_edge only and return connected graphs
(Erdos-Renyi graphs are redrawn until connected).
"""

import logging

from networkx.utils import py_random_state

from .edges import UndirectedEdge, as_undirected
from .graph import Graph
from .search import is_connected

logger = logging.getLogger(__name__)


def complete_graph(order: int) -> Graph:
    graph = Graph(order)
    for i in range(order):
        for j in range(i + 1, order):
            graph.add_edge(UndirectedEdge(i, j, 0.0))
    return graph


@py_random_state("seed")
def erdos_renyi_graph(order: int, expected_average_degree: float, seed=None) -> Graph:
    """
    G(n, p) with p = max(1.5, expected_average_degree) / (order - 1)
    Redrawn until a BFS from vertex 0 reaches every vertex
    """
    if order < 1:
        raise ValueError(f"order must be positive, got {order}")
    if order == 1:
        graph = Graph(1)
        graph.ensure_vertex(0)
        return graph

    probability = max(1.5, expected_average_degree) / (order - 1)
    attempts = 0
    while True:
        attempts += 1
        graph = Graph(order)
        for i in range(order):
            graph.ensure_vertex(i)
            for j in range(i + 1, order):
                if seed.random() < probability:
                    graph.add_edge(UndirectedEdge(i, j, 0.0))
        if is_connected(graph):
            logger.debug("connected Erdos-Renyi graph after %d draws", attempts)
            return graph


@py_random_state("seed")
def lollipop_graph(order: int, seed=None) -> Graph:
    """
    Path on the first order // 3 + 1 vertices of a random permutation,
    ending in a clique on the remaining ones
    """
    graph = Graph(order)
    permutation = list(range(order))
    seed.shuffle(permutation)
    tail = order // 3
    for i in range(tail):
        graph.add_edge(UndirectedEdge(permutation[i], permutation[i + 1], 0.0))
    for i in range(tail, order):
        graph.ensure_vertex(permutation[i])
        for j in range(i + 1, order):
            graph.add_edge(UndirectedEdge(permutation[i], permutation[j], 0.0))
    return graph


class Grid:
    """
    width x height grid graph; vertex (x, y) is y * width + x
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.graph = Graph(width * height)
        for i in range(width):
            for j in range(height):
                self.graph.ensure_vertex(self.vertex_of_coordinate(i, j))
                if i < width - 1:
                    self.graph.add_edge(UndirectedEdge(
                        self.vertex_of_coordinate(i, j),
                        self.vertex_of_coordinate(i + 1, j),
                        0.0,
                    ))
                if j < height - 1:
                    self.graph.add_edge(UndirectedEdge(
                        self.vertex_of_coordinate(i, j),
                        self.vertex_of_coordinate(i, j + 1),
                        0.0,
                    ))

    def vertex_of_coordinate(self, abscissa: int, ordinate: int) -> int:
        return ordinate * self.width + abscissa

    def abscissa_of_vertex(self, vertex: int) -> int:
        return vertex % self.width

    def ordinate_of_vertex(self, vertex: int) -> int:
        return vertex // self.width

    def is_horizontal(self, edge) -> bool:
        return (
            abs(edge.source - edge.destination) == 1
            and self.ordinate_of_vertex(edge.source) == self.ordinate_of_vertex(edge.destination)
        )

    def is_vertical(self, edge) -> bool:
        return abs(edge.source - edge.destination) == self.width

    def draw_subgrid(self, edges) -> str:
        """
        ASCII drawing of the grid restricted to edges
        'o' is a vertex, '--' and '|' are kept edges
        """
        right, up = set(), set()
        for edge in map(as_undirected, edges):
            low = min(edge.source, edge.destination)
            if self.is_horizontal(edge):
                right.add(low)
            elif self.is_vertical(edge):
                up.add(low)

        lines = []
        for j in range(self.height):
            row = []
            for i in range(self.width - 1):
                row.append("o")
                row.append("--" if self.vertex_of_coordinate(i, j) in right else "  ")
            row.append("o")
            lines.append("".join(row))
            if j < self.height - 1:
                cells = ["|" if self.vertex_of_coordinate(i, j) in up else " " for i in range(self.width)]
                lines.append("  ".join(cells))
        return "\n".join(lines)


def grid_graph(width: int, height: int) -> Graph:
    return Grid(width, height).graph


FAMILIES = {
    "grid": grid_graph,
    "complete": complete_graph,
    "erdos-renyi": erdos_renyi_graph,
    "lollipop": lollipop_graph,
}

_FAMILY_INDICES = {"1": "grid", "2": "complete", "3": "erdos-renyi", "4": "lollipop"}


def normalize_family(family) -> str:
    name = str(family).lower().replace("_", "-")
    name = _FAMILY_INDICES.get(name, name)
    if name not in FAMILIES:
        raise ValueError(f"Unknown graph family: {family}")
    return name
