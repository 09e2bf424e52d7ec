#!/usr/bin/env python3
"""
Deterministic micro-benchmarks for the spanning tree generators and the rooted tree analysis.

- Builds a fixed graph family instance with a provided seed
- Times each generator over repeated runs with warmups
- Times RootedTree construction (re-centering included) on one tree per generator

Algorithms timed:
- BFS tree
- Kruskal on random weights
- Random walk
- Random edge insertion
- RootedTree statistics

Example:
  python3 examples/benchmark_algorithms.py --family grid --width 200 --height 120 --repeats 5 --warmup 1
"""

import argparse
import random
import statistics
import time
from typing import Dict, Callable

from nx_spantree.families import FAMILIES, normalize_family
from nx_spantree.random_trees import TREE_METHODS, generate_random_tree
from nx_spantree.rooted_tree import RootedTree
from nx_spantree.search import breadth_first_tree


def time_fn(fn: Callable[[], None], repeats: int, warmup: int) -> Dict[str, float]:
    for _ in range(warmup):
        fn()
    samples = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        samples.append(t1 - t0)
    return {
        "runs": repeats,
        "min": min(samples),
        "median": statistics.median(samples),
        "mean": statistics.fmean(samples),
        "stdev": statistics.pstdev(samples) if repeats > 1 else 0.0,
    }


def fmt_ms(sec: float) -> str:
    return f"{sec * 1000.0:.3f} ms"


def make_graph(family: str, args, rng: random.Random):
    if family == "grid":
        return FAMILIES[family](args.width, args.height)
    if family == "complete":
        return FAMILIES[family](args.order)
    if family == "erdos-renyi":
        return FAMILIES[family](args.order, args.degree, seed=rng)
    return FAMILIES[family](args.order, seed=rng)


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="nx-spantree deterministic generator microbenchmarks")
    ap.add_argument("--family", default="grid", help="grid, complete, erdos-renyi or lollipop")
    ap.add_argument("--width", type=int, default=120, help="grid width")
    ap.add_argument("--height", type=int, default=80, help="grid height")
    ap.add_argument("--order", type=int, default=1000, help="number of vertices (non-grid families)")
    ap.add_argument("--degree", type=float, default=10.0, help="expected average degree (erdos-renyi)")
    ap.add_argument("--seed", type=int, default=42, help="random seed for graph and tree generation")
    ap.add_argument("--repeats", type=int, default=5, help="timed runs per algorithm")
    ap.add_argument("--warmup", type=int, default=1, help="warmup runs per algorithm (not timed)")

    args = ap.parse_args(argv)

    try:
        family = normalize_family(args.family)
    except ValueError as exc:
        raise SystemExit(str(exc))

    print("=== Graph Setup ===")
    rng = random.Random(args.seed)
    G = make_graph(family, args, rng)
    print(f"family={family}, vertices={G.order()}, edges={G.edge_cardinality()}, seed={args.seed}")

    print("\n=== Benchmarking generators ===")

    runners: Dict[str, Callable[[], None]] = {
        "bfs": lambda: breadth_first_tree(G, 0),
    }
    for method in sorted(TREE_METHODS):
        runners[method] = lambda method=method: generate_random_tree(G, method, seed=rng)

    for name, fn in runners.items():
        res = time_fn(fn, repeats=args.repeats, warmup=args.warmup)
        print(f"- {name:22s} median {fmt_ms(res['median'])} \t(min {fmt_ms(res['min'])}, runs={res['runs']})")

    print("\n=== Benchmarking RootedTree ===")
    for method in sorted(TREE_METHODS):
        tree = generate_random_tree(G, method, seed=args.seed)
        res = time_fn(lambda: RootedTree(tree, 0).wiener_index(), repeats=args.repeats, warmup=args.warmup)
        print(f"- {method:22s} median {fmt_ms(res['median'])} \t(min {fmt_ms(res['min'])}, runs={res['runs']})")

    print("\nDone. Use identical args across runs to compare optimizations deterministically.")


if __name__ == "__main__":
    main()
