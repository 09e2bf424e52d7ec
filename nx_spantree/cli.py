"""
Random spanning tree statistics from the command line

Example:
  python -m nx_spantree --method random-walk --family grid --width 20 --height 10 --samples 5 --draw
"""

import argparse
import logging
import random

from . import families
from .config import PARAMS, family_kwargs
from .random_trees import TREE_METHODS, generate_random_tree, normalize_method
from .stats import TreeStatistics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Random spanning tree statistics on classic graph families")
    ap.add_argument("--method", default=PARAMS["METHOD"],
                    help=f"tree generator: {', '.join(TREE_METHODS)} or 1-4")
    ap.add_argument("--family", default=PARAMS["FAMILY"],
                    help=f"graph family: {', '.join(families.FAMILIES)} or 1-4")
    ap.add_argument("--samples", type=int, default=PARAMS["SAMPLES"], help="trees generated")
    ap.add_argument("--seed", type=int, default=None, help="random seed (default: fresh)")
    ap.add_argument("--root", type=int, default=PARAMS["ROOT"], help="initial root of the analysed tree")
    ap.add_argument("--max-degree", type=int, default=PARAMS["MAX_DEGREE"], help="last degree bucket")
    ap.add_argument("--width", type=int, default=None, help="grid width")
    ap.add_argument("--height", type=int, default=None, help="grid height")
    ap.add_argument("--order", type=int, default=None, help="order of complete/erdos-renyi/lollipop graphs")
    ap.add_argument("--degree", type=float, default=None, help="expected average degree (erdos-renyi)")
    ap.add_argument("--draw", action="store_true", help="draw the last tree (grid family only)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def _params_from_args(args) -> dict:
    params = dict(PARAMS)
    if args.width is not None:
        params["GRID_WIDTH"] = args.width
    if args.height is not None:
        params["GRID_HEIGHT"] = args.height
    if args.order is not None:
        params["COMPLETE_ORDER"] = args.order
        params["ERDOS_RENYI_ORDER"] = args.order
        params["LOLLIPOP_ORDER"] = args.order
    if args.degree is not None:
        params["ERDOS_RENYI_DEGREE"] = args.degree
    return params


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        method = normalize_method(args.method)
        family = families.normalize_family(args.family)
    except ValueError as exc:
        raise SystemExit(str(exc))
    if args.samples < 1:
        raise SystemExit(f"Invalid --samples {args.samples}; must be at least 1")

    rng = random.Random(args.seed)
    kwargs = family_kwargs(family, _params_from_args(args))

    grid = None
    if family == "grid":
        grid = families.Grid(**kwargs)
        graph = grid.graph
    elif family in ("erdos-renyi", "lollipop"):
        graph = families.FAMILIES[family](seed=rng, **kwargs)
    else:
        graph = families.FAMILIES[family](**kwargs)

    print(f"-------{family} mode, {method} trees------")
    print(f"Graph: {graph.order()} vertices, {graph.edge_cardinality()} edges")

    stats = TreeStatistics(root=args.root, max_degree=args.max_degree)
    tree = []
    for _ in range(args.samples):
        tree = generate_random_tree(graph, method, seed=rng)
        stats.update(tree)
    for line in stats.report():
        print(line)

    if args.draw:
        if grid is None:
            logger.warning("--draw is only supported for the grid family")
        else:
            print(grid.draw_subgrid(tree))
    return 0
