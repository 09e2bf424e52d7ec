from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class UndirectedEdge:
    """
    Edge between two vertices with a weight
    Orientation carries no meaning; edges are ordered by weight only
    """

    source: int
    destination: int
    weight: float = field(default=0.0)

    def opposite_extremity(self, vertex: int) -> int:
        # a vertex that is not an endpoint maps to itself
        if vertex == self.source:
            return self.destination
        if vertex == self.destination:
            return self.source
        return vertex

    def endpoints(self):
        return self.source, self.destination

    def __lt__(self, other):
        return self.weight < other.weight

    def __le__(self, other):
        return self.weight <= other.weight

    def __gt__(self, other):
        return self.weight > other.weight

    def __ge__(self, other):
        return self.weight >= other.weight


class DirectedEdge:
    """
    Oriented view over an UndirectedEdge
    The support is shared; only the reversed flag belongs to the view
    """

    __slots__ = ("support", "reversed")

    def __init__(self, support: UndirectedEdge, reversed: bool = False):
        self.support = support
        self.reversed = reversed

    @property
    def source(self) -> int:
        return self.support.destination if self.reversed else self.support.source

    @property
    def destination(self) -> int:
        return self.support.source if self.reversed else self.support.destination

    @property
    def weight(self) -> float:
        return self.support.weight

    def opposite_extremity(self, vertex: int) -> int:
        return self.support.opposite_extremity(vertex)

    def flip(self):
        """
        Reverse this view in place and return it
        Views handed out by Graph.out_edges and Graph.in_edges are the ones the
        graph stores, so flipping one of them changes the graph's incidence lists
        """
        self.reversed = not self.reversed
        return self

    def endpoints(self):
        return self.source, self.destination

    def __repr__(self):
        return f"DirectedEdge({self.source} -> {self.destination}, weight={self.weight})"


def as_undirected(edge) -> UndirectedEdge:
    if isinstance(edge, DirectedEdge):
        return edge.support
    if isinstance(edge, UndirectedEdge):
        return edge
    raise TypeError(f"Expected an UndirectedEdge or DirectedEdge, got {type(edge).__name__}")


def to_undirected_edges(edges):
    """Map a tree edge list to the undirected edges supporting it"""
    return [as_undirected(edge) for edge in edges]
