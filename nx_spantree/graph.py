import logging
from numbers import Integral

import networkx as nx

from .edges import DirectedEdge, UndirectedEdge

logger = logging.getLogger(__name__)


class Graph:
    """
    Graph over the vertex indices [0, upper_bound)

    Every undirected edge is stored once per endpoint in the undirected
    incidence and gets two DirectedEdge views, one per orientation, kept
    in the out-incidence of its source and the in-incidence of its
    destination. A vertex is active iff it owns the three incidence lists.

    Out-of-range or inactive vertices are ignored by ensure_vertex/add_edge
    and reported as None by out_edges; callers check is_vertex first.
    """

    def __init__(self, upper_bound: int):
        self._upper_bound = upper_bound
        self._order = 0
        self._edge_cardinality = 0
        self._incidence = {}
        self._in_incidence = {}
        self._out_incidence = {}

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    def order(self) -> int:
        return self._order

    def edge_cardinality(self) -> int:
        return self._edge_cardinality

    def __len__(self):
        return self._order

    def __contains__(self, vertex):
        return self.is_vertex(vertex)

    def __repr__(self):
        return (
            f"Graph(upper_bound={self._upper_bound}, order={self._order}, "
            f"edges={self._edge_cardinality})"
        )

    def _in_bounds(self, vertex) -> bool:
        return isinstance(vertex, Integral) and 0 <= vertex < self._upper_bound

    def is_vertex(self, vertex) -> bool:
        return self._in_bounds(vertex) and vertex in self._incidence

    def ensure_vertex(self, vertex):
        if self._in_bounds(vertex) and vertex not in self._incidence:
            self._incidence[vertex] = []
            self._in_incidence[vertex] = []
            self._out_incidence[vertex] = []
            self._order += 1

    def vertices(self):
        return sorted(self._incidence)

    def delete_vertex(self, vertex):
        """
        Remove a vertex and every edge touching it
        Each edge is also dropped from the opposite endpoint's complementary list
        """
        if not self.is_vertex(vertex):
            raise nx.NodeNotFound(f"Vertex {vertex} not in graph")

        removed = self._incidence[vertex]
        removed_count = len({id(edge) for edge in removed})

        for edge in removed:
            other = edge.opposite_extremity(vertex)
            if other != vertex:
                self._remove_identical(self._incidence[other], edge)
        # v -> x lives in in(x); x -> v lives in out(x)
        for directed in self._out_incidence[vertex]:
            other = directed.destination
            if other != vertex:
                self._remove_identical(self._in_incidence[other], directed)
        for directed in self._in_incidence[vertex]:
            other = directed.source
            if other != vertex:
                self._remove_identical(self._out_incidence[other], directed)

        del self._incidence[vertex]
        del self._in_incidence[vertex]
        del self._out_incidence[vertex]
        self._edge_cardinality -= removed_count
        self._order -= 1
        logger.debug("deleted vertex %d with %d edges", vertex, removed_count)

    @staticmethod
    def _remove_identical(edges, edge):
        for index, candidate in enumerate(edges):
            if candidate is edge:
                del edges[index]
                return

    def has_edge(self, source, destination) -> bool:
        """True iff an undirected edge joins source and destination"""
        if not self.is_vertex(source):
            return False
        return any(edge.opposite_extremity(source) == destination for edge in self._incidence[source])

    def _has_out_edge(self, source, destination) -> bool:
        return any(directed.destination == destination for directed in self._out_incidence[source])

    def add_edge(self, edge):
        """
        Insert an UndirectedEdge or a DirectedEdge
        Endpoints are activated on demand; an edge joining endpoints that are
        already joined (in the same direction for directed edges) is ignored
        Returns True when the graph changed
        """
        source, destination = edge.source, edge.destination
        self.ensure_vertex(source)
        self.ensure_vertex(destination)
        if not (self.is_vertex(source) and self.is_vertex(destination)):
            return False

        if isinstance(edge, DirectedEdge):
            added = self._add_directed_edge(edge, source, destination)
        elif isinstance(edge, UndirectedEdge):
            added = self._add_undirected_edge(edge, source, destination)
        else:
            raise TypeError(f"Unsupported edge type: {type(edge).__name__}")

        if added:
            self._edge_cardinality += 1
        return added

    def _add_directed_edge(self, directed, source, destination) -> bool:
        if self._has_out_edge(source, destination):
            return False
        self._incidence[source].append(directed.support)
        self._incidence[destination].append(directed.support)
        self._out_incidence[source].append(directed)
        self._in_incidence[destination].append(directed)
        return True

    def _add_undirected_edge(self, edge, source, destination) -> bool:
        if self.has_edge(source, destination):
            return False
        forward = DirectedEdge(edge, False)
        backward = DirectedEdge(edge, True)
        self._incidence[source].append(edge)
        self._incidence[destination].append(edge)
        self._out_incidence[source].append(forward)
        self._in_incidence[destination].append(forward)
        self._out_incidence[destination].append(backward)
        self._in_incidence[source].append(backward)
        return True

    def out_edges(self, vertex):
        """New list over the stored DirectedEdge views; flipping one mutates the graph"""
        if not self.is_vertex(vertex):
            return None
        return list(self._out_incidence[vertex])

    def in_edges(self, vertex):
        """New list over the stored DirectedEdge views; flipping one mutates the graph"""
        if not self.is_vertex(vertex):
            return None
        return list(self._in_incidence[vertex])

    def incident_edges(self, vertex):
        if not self.is_vertex(vertex):
            return None
        return list(self._incidence[vertex])

    def degree(self, vertex) -> int:
        if not self.is_vertex(vertex):
            return 0
        return len(self._incidence[vertex])

    def edges(self):
        """Distinct undirected edges, each listed once"""
        seen = set()
        result = []
        for vertex in self.vertices():
            for edge in self._incidence[vertex]:
                if id(edge) not in seen:
                    seen.add(id(edge))
                    result.append(edge)
        return result
