"""Compare re-centered tree statistics against the NetworkX distance routines."""

import time

import networkx as nx

from nx_spantree.backend import random_spanning_tree, tree_statistics


def main():
    print("=== Tree Statistics Demo ===")
    G = nx.grid_2d_graph(60, 40)
    print(f"Grid has {G.number_of_nodes()} nodes and {G.number_of_edges()} edges")

    for method in ("kruskal", "random-walk", "random-edge-insertion"):
        T = random_spanning_tree(G, seed=11, method=method)

        t0 = time.time()
        stats = tree_statistics(T)
        t1 = time.time()
        diameter = nx.diameter(T)
        t2 = time.time()

        print(f"\n--- {method} ---")
        print(f"nx-spantree: {t1 - t0:.3f}s (all statistics)")
        print(f"NetworkX (diameter only): {t2 - t1:.3f}s")
        print(f"Diameter: {stats['diameter']} (NetworkX {diameter})")
        print(f"Radius: {stats['radius']}, center {stats['root']}, centroid {stats['centroid']}")
        print(f"Wiener index: {stats['wiener_index']}")
        print(f"Average eccentricity: {stats['average_eccentricity']:.3f}")


if __name__ == "__main__":
    main()
