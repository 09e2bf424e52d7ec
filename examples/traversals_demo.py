import time, networkx as nx

from nx_spantree.backend import random_spanning_tree


def main():

    # Create a large random graph
    print("Creating graph...")
    t_graph_start = time.time()
    G = nx.gnp_random_graph(50_000, 0.0002, directed=False)
    t_graph_end = time.time()
    print(f"Graph creation time: {t_graph_end - t_graph_start:.3f}s")
    print(f"Graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")

    # Pick a source node
    source = 0
    print(f"Running traversals from source node: {source}\n")

    print("=" * 50)
    print("BFS (Breadth-First Search)")
    print("=" * 50)

    # BFS with NetworkX (Python)
    t0 = time.time()
    edges_py = list(nx.bfs_edges(G, source))
    t1 = time.time()

    # BFS with the spantree backend
    edges_st = list(nx.bfs_edges(G, source, backend="spantree"))
    t2 = time.time()

    print(f"NetworkX (py): {t1 - t0:.3f}s, {len(edges_py)} edges")
    print(f"nx-spantree backend: {t2 - t1:.3f}s, {len(edges_st)} edges")
    print(f"\nVerification: Both return {len(edges_py)} edges: {len(edges_py) == len(edges_st)}")

    # depth_limit is not handled natively and falls back to NetworkX
    print("\n--- Testing depth_limit fallback ---")
    limited = list(nx.bfs_edges(G, source, depth_limit=2, backend="spantree"))
    print(f"depth_limit=2: {len(limited)} edges, first {limited[:3]}")

    print("\n" + "=" * 50)
    print("Random spanning trees of the giant component")
    print("=" * 50)

    giant = G.subgraph(max(nx.connected_components(G), key=len)).copy()
    print(f"Giant component: {giant.number_of_nodes()} nodes, {giant.number_of_edges()} edges")
    for method in ("kruskal", "random-walk", "random-edge-insertion", "aldous-broder"):
        t0 = time.time()
        T = random_spanning_tree(giant, seed=7, method=method)
        t1 = time.time()
        print(f"{method:22s} {t1 - t0:.3f}s, tree: {nx.is_tree(T)}")


if __name__ == "__main__":
    nx.config.warnings_to_ignore.add("cache")
    main()
