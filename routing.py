from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from heapq import heappop, heappush
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from graph import Graph, Vertex, VertexId


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    vertices: Sequence[Vertex]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    @property
    def total_distance(self) -> int:
        """Distance recorded on the final vertex; 0 for an empty route."""
        if not self.vertices:
            return 0
        distance = self.vertices[-1].distance
        return distance if distance is not None else 0

    @property
    def ids(self) -> List[VertexId]:
        return [vertex.id for vertex in self.vertices]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __str__(self) -> str:
        return "[ " + "".join(f"{vertex_id} " for vertex_id in self.ids) + "]"


def reconstruct_route(graph: Graph, destination: VertexId) -> Route:
    """Follow predecessor links back from ``destination`` to the source."""
    vertices: List[Vertex] = []
    current_id: Optional[VertexId] = destination

    while current_id is not None:
        vertex = graph.find_vertex(current_id)
        if vertex is None:
            break
        vertices.insert(0, replace(vertex))
        current_id = vertex.predecessor

    return Route(vertices)


def _relax(graph: Graph, current: Vertex) -> List[Vertex]:
    """Apply every improvement reachable through ``current``'s edges.

    Returns the neighbour records whose distance was lowered.
    """
    improved: List[Vertex] = []
    for weight, neighbor_id in graph.neighbors(current.id):
        neighbor = graph.find_vertex(neighbor_id)
        trial = replace(
            neighbor,
            predecessor=current.id,
            distance=current.distance + weight,
        )
        if trial < neighbor:
            logger.debug(
                f"relaxed {neighbor_id}: {neighbor.distance} -> {trial.distance} via {current.id}"
            )
            neighbor.predecessor = trial.predecessor
            neighbor.distance = trial.distance
            improved.append(neighbor)
    return improved


def _prepare(source: VertexId, graph: Graph) -> Optional[Graph]:
    working = graph.copy()
    start = working.find_vertex(source)
    if start is None:
        logger.debug(f"source {source!r} not in graph")
        return None
    start.distance = 0
    return working


def shortest_path(source: VertexId, destination: VertexId, graph: Graph) -> Optional[Route]:
    """Compute the shortest route from ``source`` to ``destination``.

    Each iteration scans the unvisited vertices with a known distance and
    finalises the closest one, so a query costs O(V^2). The destination is
    recognised at the start of the iteration after it was selected, which
    means its own edges are never relaxed. Returns None when the source is
    missing or the destination cannot be reached. ``graph`` is not modified.
    """
    logger.debug(f"shortest_path {source!r} -> {destination!r}")
    working = _prepare(source, graph)
    if working is None:
        return None

    visited: Set[VertexId] = set()
    current: Optional[Vertex] = None

    while True:
        if current is not None and current.id == destination:
            route = reconstruct_route(working, destination)
            logger.debug(f"reached {destination!r}: {route} ({route.total_distance})")
            return route

        if current is not None:
            visited.add(current.id)

        candidates = [
            vertex
            for vertex in working.vertices
            if vertex.id not in visited and vertex.distance is not None
        ]
        if not candidates:
            logger.debug(f"{destination!r} unreachable from {source!r}")
            return None

        # sorted() is stable, so ties go to the vertex inserted first.
        current = sorted(candidates, key=Vertex.priority)[0]
        logger.debug(f"selected {current.id} at distance {current.distance}")
        if current.id != destination:
            _relax(working, current)


def shortest_path_heap(
    source: VertexId, destination: VertexId, graph: Graph
) -> Optional[Route]:
    """Heap-backed variant of :func:`shortest_path` with identical results.

    Heap entries carry the vertex insertion index as a tie-breaker so that
    equal distances are finalised in the same order as the linear scan.
    Stale entries are skipped when popped.
    """
    logger.debug(f"shortest_path_heap {source!r} -> {destination!r}")
    working = _prepare(source, graph)
    if working is None:
        return None

    order: Dict[VertexId, int] = {
        vertex.id: index for index, vertex in enumerate(working.vertices)
    }
    visited: Set[VertexId] = set()
    queue: List[Tuple[int, int, VertexId]] = [(0, order[source], source)]

    while queue:
        distance, _, vertex_id = heappop(queue)
        current = working.find_vertex(vertex_id)
        if vertex_id in visited or distance != current.distance:
            continue

        logger.debug(f"selected {current.id} at distance {current.distance}")
        if vertex_id == destination:
            route = reconstruct_route(working, destination)
            logger.debug(f"reached {destination!r}: {route} ({route.total_distance})")
            return route

        visited.add(vertex_id)
        for neighbor in _relax(working, current):
            if neighbor.id not in visited:
                heappush(queue, (neighbor.distance, order[neighbor.id], neighbor.id))

    logger.debug(f"{destination!r} unreachable from {source!r}")
    return None
