from collections import deque

import networkx as nx


def breadth_first_tree(graph, root):
    """
    Spanning tree of the vertices reachable from root, in BFS discovery order
    Returns the DirectedEdge views (parent -> child) that first reached each vertex
    """
    if not graph.is_vertex(root):
        raise nx.NodeNotFound(f"Root vertex {root} not in graph")

    reached = {root}
    frontier = deque(graph.out_edges(root))
    tree = []
    while frontier:
        directed = frontier.popleft()
        destination = directed.destination
        if destination in reached:
            continue
        reached.add(destination)
        tree.append(directed)
        frontier.extend(graph.out_edges(destination))
    return tree


def is_connected(graph) -> bool:
    vertices = graph.vertices()
    if not vertices:
        return False
    return len(breadth_first_tree(graph, vertices[0])) == graph.order() - 1
