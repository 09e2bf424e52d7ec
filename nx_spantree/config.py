PARAMS = {
    "SAMPLES": 10,             # trees generated per run
    "MAX_DEGREE": 4,           # last degree bucket reported
    "ROOT": 0,                 # initial root handed to RootedTree
    "METHOD": "kruskal",
    "FAMILY": "grid",

    "GRID_WIDTH": 1920 // 11,
    "GRID_HEIGHT": 1080 // 11,
    "COMPLETE_ORDER": 400,
    "ERDOS_RENYI_ORDER": 1_000,
    "ERDOS_RENYI_DEGREE": 100,  # expected average degree
    "LOLLIPOP_ORDER": 1_000,
}


def family_kwargs(family, params=None):
    """Keyword arguments of a graph family builder, taken from params"""
    params = PARAMS if params is None else params
    if family == "grid":
        return {"width": params["GRID_WIDTH"], "height": params["GRID_HEIGHT"]}
    if family == "complete":
        return {"order": params["COMPLETE_ORDER"]}
    if family == "erdos-renyi":
        return {
            "order": params["ERDOS_RENYI_ORDER"],
            "expected_average_degree": params["ERDOS_RENYI_DEGREE"],
        }
    if family == "lollipop":
        return {"order": params["LOLLIPOP_ORDER"]}
    raise ValueError(f"Unknown graph family: {family}")
