from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph
from routing import Route


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(vertex.id for vertex in graph.vertices)
    for edge in graph.edges:
        g.add_edge(edge.a, edge.b, weight=edge.weight)
    return g


def compute_layout(graph_nx: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_route_figure(
    graph: Graph,
    route: Route,
    output: Path | None = None,
    show: bool = True,
):
    """Draw every edge with its weight and highlight the edges of ``route``."""
    if not route.vertices:
        raise RuntimeError("Cannot draw an empty route.")

    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)
    path = route.ids

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = route_edges(path)
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_route = set(path)
    node_colors = [
        "#ff7f0e" if node in on_route else "#9ecae1" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(
        graph_nx, layout, node_color=node_colors, node_size=600, ax=ax
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=10, ax=ax)

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(
        graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax
    )

    summary_lines = [
        f"Route: {' -> '.join(path)}",
        f"Total distance: {route.total_distance}",
        f"Hops: {len(path) - 1}",
    ]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Shortest Route {path[0]} – {path[-1]}")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
