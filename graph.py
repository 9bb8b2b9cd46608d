from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple


VertexId = str


@dataclass
class Vertex:
    """A named node with its best-known distance from the query source."""

    id: VertexId
    predecessor: Optional[VertexId] = None
    distance: Optional[int] = None

    def priority(self) -> Tuple[bool, int]:
        # Unset distances sort after every set distance.
        if self.distance is None:
            return True, 0
        return False, self.distance

    def __lt__(self, other: Vertex) -> bool:
        return self.priority() < other.priority()


@dataclass(frozen=True)
class Edge:
    a: VertexId
    b: VertexId
    weight: int

    def other(self, vertex_id: VertexId) -> VertexId:
        return self.b if vertex_id == self.a else self.a


class Graph:
    """Undirected weighted graph built from ``(weight, a, b)`` triples."""

    def __init__(self, edges: Iterable[Tuple[int, VertexId, VertexId]] = ()) -> None:
        self._vertices: Dict[VertexId, Vertex] = {}
        self._edges: List[Edge] = []
        self._adjacency: Dict[VertexId, List[Tuple[int, VertexId]]] = {}

        for weight, a, b in edges:
            self._add_edge(Edge(a=a, b=b, weight=weight))

    def _add_vertex(self, vertex_id: VertexId) -> None:
        if vertex_id not in self._vertices:
            self._vertices[vertex_id] = Vertex(vertex_id)
            self._adjacency[vertex_id] = []

    def _add_edge(self, edge: Edge) -> None:
        self._add_vertex(edge.a)
        self._add_vertex(edge.b)
        self._edges.append(edge)
        self._adjacency[edge.a].append((edge.weight, edge.other(edge.a)))
        if edge.b != edge.a:
            self._adjacency[edge.b].append((edge.weight, edge.other(edge.b)))

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def find_vertex(self, vertex_id: VertexId) -> Optional[Vertex]:
        """Return the stored (mutable) vertex record, or None if absent."""
        return self._vertices.get(vertex_id)

    def neighbors(self, vertex_id: VertexId) -> List[Tuple[int, VertexId]]:
        return list(self._adjacency.get(vertex_id, []))

    def copy(self) -> Graph:
        """Return a working copy whose vertex records are independent of this graph."""
        clone = Graph()
        clone._vertices = {
            vertex_id: replace(vertex) for vertex_id, vertex in self._vertices.items()
        }
        clone._edges = list(self._edges)
        clone._adjacency = {
            vertex_id: list(pairs) for vertex_id, pairs in self._adjacency.items()
        }
        return clone

    def path_cost(self, path: Sequence[VertexId]) -> int:
        """Return the total weight of walking along the given vertex sequence."""
        if len(path) < 2:
            return 0

        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            edge_cost = next(
                (weight for weight, neighbor in self._adjacency.get(u, []) if neighbor == v),
                None,
            )
            if edge_cost is None:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += edge_cost
        return total_cost

    def __str__(self) -> str:
        lines = ["Edges:"]
        for edge in self._edges:
            lines.append(f"\t{edge.a}, {edge.b} : {edge.weight}")
        return "\n".join(lines)
