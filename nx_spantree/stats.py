import time

import numpy as np

from .config import PARAMS
from .rooted_tree import RootedTree


class TreeStatistics:
    """
    Averages of tree statistics over repeated samples
    Each update analyses one tree rooted (then re-centered) from ``root``
    """

    def __init__(self, root=None, max_degree=None):
        self.root = PARAMS["ROOT"] if root is None else root
        self.max_degree = PARAMS["MAX_DEGREE"] if max_degree is None else max_degree
        self.samples = 0
        self.diameters = []
        self.eccentricities = []
        self.wiener_indices = []
        self.degree_sums = np.zeros(self.max_degree + 1, dtype=np.int64)
        self._started = time.perf_counter()

    def update(self, tree_edges) -> RootedTree:
        rooted = RootedTree(tree_edges, self.root)
        self.samples += 1
        self.diameters.append(rooted.diameter())
        self.eccentricities.append(rooted.average_eccentricity())
        self.wiener_indices.append(rooted.wiener_index())
        degrees = rooted.degree_distribution(self.max_degree)
        self.degree_sums[: len(degrees)] += degrees
        return rooted

    def _mean(self, values) -> float:
        return float(np.mean(values)) if values else 0.0

    def summary(self) -> dict:
        elapsed = time.perf_counter() - self._started
        per_sample = self.samples or 1
        return {
            "samples": self.samples,
            "average_eccentricity": self._mean(self.eccentricities),
            "average_wiener_index": self._mean(self.wiener_indices),
            "average_diameter": self._mean(self.diameters),
            "average_leaves": float(self.degree_sums[1]) / per_sample if self.max_degree >= 1 else 0.0,
            "average_degree_2": float(self.degree_sums[2]) / per_sample if self.max_degree >= 2 else 0.0,
            "average_time_ms": 1000.0 * elapsed / per_sample,
        }

    def report(self):
        s = self.summary()
        return [
            f"On {s['samples']} samples:",
            f"Average eccentricity: {s['average_eccentricity']:.4f}",
            f"Average Wiener index: {s['average_wiener_index']:.1f}",
            f"Average diameter: {s['average_diameter']:.2f}",
            f"Average number of leaves: {s['average_leaves']:.2f}",
            f"Average number of degree 2 vertices: {s['average_degree_2']:.2f}",
            f"Average computation time: {s['average_time_ms']:.3f}ms",
        ]
