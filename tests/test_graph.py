"""Tests for the graph data model."""
import pytest

from graph import Edge, Graph, Vertex


def test_vertices_derived_from_edge_endpoints(reference_graph) -> None:
    ids = [vertex.id for vertex in reference_graph.vertices]

    assert ids == ["A", "B", "C", "E", "D", "F", "G", "H"]
    assert len(reference_graph) == 8
    assert all(v.distance is None and v.predecessor is None for v in reference_graph.vertices)
    assert len(reference_graph.edges) == 10


def test_empty_edge_list_gives_empty_graph() -> None:
    graph = Graph([])

    assert len(graph) == 0
    assert graph.edges == []
    assert graph.neighbors("A") == []


def test_neighbors_are_undirected(reference_graph) -> None:
    # C is the second endpoint of A-C and the first endpoint of C-D, C-F.
    assert reference_graph.neighbors("C") == [(3, "A"), (12, "D"), (4, "F")]
    assert (9, "G") in reference_graph.neighbors("H")
    assert (9, "H") in reference_graph.neighbors("G")


def test_neighbors_follow_edge_insertion_order() -> None:
    graph = Graph([(5, "B", "A"), (1, "A", "C"), (2, "D", "A")])

    assert graph.neighbors("A") == [(5, "B"), (1, "C"), (2, "D")]


def test_find_vertex_returns_mutable_record(reference_graph) -> None:
    vertex = reference_graph.find_vertex("D")
    vertex.distance = 7

    assert reference_graph.find_vertex("D").distance == 7
    assert reference_graph.find_vertex("Z") is None
    assert "D" in reference_graph
    assert "Z" not in reference_graph


def test_copy_is_independent(reference_graph) -> None:
    working = reference_graph.copy()
    working.find_vertex("A").distance = 0
    working.find_vertex("B").predecessor = "A"

    assert reference_graph.find_vertex("A").distance is None
    assert reference_graph.find_vertex("B").predecessor is None
    assert working.edges == reference_graph.edges


def test_render_lists_edges() -> None:
    graph = Graph([(4, "A", "B"), (3, "A", "C")])

    assert str(graph) == "Edges:\n\tA, B : 4\n\tA, C : 3"


def test_path_cost(reference_graph) -> None:
    assert reference_graph.path_cost(["A", "C", "F", "H"]) == 29
    assert reference_graph.path_cost(["H", "F", "C", "A"]) == 29
    assert reference_graph.path_cost(["A"]) == 0
    assert reference_graph.path_cost([]) == 0


def test_path_cost_rejects_missing_edge(reference_graph) -> None:
    with pytest.raises(ValueError, match="A-H"):
        reference_graph.path_cost(["A", "H"])


def test_vertex_ordering_puts_unset_distance_last() -> None:
    unset = Vertex("U")
    near = Vertex("N", distance=2)
    far = Vertex("F", distance=10)

    assert near < far
    assert far < unset
    assert not unset < far
    assert not unset < Vertex("V")
    assert sorted([unset, far, near]) == [near, far, unset]


def test_vertex_equality_includes_id() -> None:
    assert Vertex("A", distance=3) != Vertex("B", distance=3)
    assert Vertex("A", "C", 3) == Vertex("A", "C", 3)


def test_edge_other_endpoint() -> None:
    edge = Edge(a="A", b="B", weight=4)

    assert edge.other("A") == "B"
    assert edge.other("B") == "A"
