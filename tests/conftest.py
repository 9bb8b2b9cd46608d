import matplotlib

matplotlib.use("Agg")

import pytest

from graph import Graph


REFERENCE_EDGES = [
    (4, "A", "B"),
    (3, "A", "C"),
    (8, "B", "E"),
    (12, "C", "D"),
    (4, "C", "F"),
    (20, "D", "G"),
    (15, "D", "H"),
    (17, "E", "G"),
    (22, "F", "H"),
    (9, "G", "H"),
]


@pytest.fixture
def reference_edges():
    return list(REFERENCE_EDGES)


@pytest.fixture
def reference_graph(reference_edges) -> Graph:
    return Graph(reference_edges)


@pytest.fixture
def split_graph() -> Graph:
    """Two components: {A, B, C} and {X, Y}."""
    return Graph([(1, "A", "B"), (2, "B", "C"), (5, "X", "Y")])
