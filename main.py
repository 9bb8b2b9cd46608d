from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from graph import Graph
from routing import Route, shortest_path, shortest_path_heap


logger = logging.getLogger(__name__)


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def parse_edge(entry) -> Tuple[int, str, str]:
    """Validate one ``[weight, a, b]`` entry of the instance file."""
    if not isinstance(entry, (list, tuple)) or len(entry) != 3:
        raise ValueError(f"Edge entry {entry!r} must be a [weight, a, b] triple.")

    weight, a, b = entry
    # bool is an int subclass; reject it explicitly.
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge entry {entry!r} has a non-integer weight.")
    if weight < 0:
        raise ValueError(f"Edge entry {entry!r} has a negative weight.")
    if a is None or b is None:
        raise ValueError(f"Edge entry {entry!r} is missing an endpoint.")
    return weight, str(a), str(b)


def build_graph(graph_config: Dict) -> Graph:
    edges: List[Tuple[int, str, str]] = [
        parse_edge(entry) for entry in graph_config.get("edges") or []
    ]
    return Graph(edges)


def resolve_query(
    config: Dict, source: Optional[str], destination: Optional[str]
) -> Tuple[str, str]:
    query = config.get("query") or {}
    source = source if source is not None else query.get("source")
    destination = destination if destination is not None else query.get("destination")
    if source is None or destination is None:
        raise ValueError(
            "Both a source and a destination are required "
            "(set query.source/query.destination or pass --source/--destination)."
        )
    return str(source), str(destination)


def print_route(source: str, destination: str, route: Optional[Route]) -> None:
    print("=== Shortest Route ===")
    if route is None:
        print(f"No route found from {source} to {destination}.")
        return

    print(f"Route: {route}")
    print(f"Path: {' -> '.join(route.ids)}")
    print(f"Total distance: {route.total_distance}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two vertices of a weighted graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("reference_graph.yaml"),
        help="Path to the YAML graph instance.",
    )
    parser.add_argument("--source", help="Override query.source from the config.")
    parser.add_argument(
        "--destination", help="Override query.destination from the config."
    )
    parser.add_argument(
        "--heap",
        action="store_true",
        help="Use the heap-backed search instead of the linear scan.",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw the graph with the route highlighted.",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        help="Optional path to save the route figure (implies --visualize).",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every selection and relaxation step.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) or {}
    graph = build_graph(config.get("graph") or {})
    source, destination = resolve_query(config, args.source, args.destination)
    logger.debug(f"loaded {len(graph)} vertices from {args.config}")
    logger.debug(str(graph))

    search = shortest_path_heap if args.heap else shortest_path
    route = search(source, destination, graph)
    print_route(source, destination, route)

    if route is None:
        return 1

    if args.visualize or args.figure_out:
        from visualize import draw_route_figure

        draw_route_figure(
            graph=graph,
            route=route,
            output=args.figure_out,
            show=not args.no_show,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
