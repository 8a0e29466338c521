import pytest

from fulfillment.services.routing.graph import ConfigurationError, Edge, Graph


def test_add_route_inserts_symmetric_edges():
    graph = Graph()
    graph.add_route("Lahore", "Multan", 340)

    assert graph.neighbors("Lahore") == (Edge("Multan", 340),)
    assert graph.neighbors("Multan") == (Edge("Lahore", 340),)
    assert graph.route_count == 1
    assert graph.vertex_count == 2


def test_add_vertex_is_idempotent():
    graph = Graph()
    graph.add_route("A", "B", 5)
    graph.add_vertex("A")
    graph.add_vertex("A")

    assert graph.neighbors("A") == (Edge("B", 5),)
    assert graph.all_vertices() == {"A", "B"}


def test_neighbors_of_unknown_city_is_empty():
    graph = Graph()
    graph.add_vertex("Gilgit")

    assert graph.neighbors("Nowhere") == ()
    assert graph.neighbors("Gilgit") == ()
    assert not graph.has_vertex("Nowhere")
    assert "Gilgit" in graph


def test_directed_route_is_one_way():
    graph = Graph()
    graph.add_directed_route("A", "B", 7)

    assert graph.direct_distance("A", "B") == 7
    assert graph.direct_distance("B", "A") is None
    assert graph.has_vertex("B")


def test_direct_distance_distinguishes_zero_from_missing():
    graph = Graph()
    graph.add_route("A", "B", 0)
    graph.add_vertex("C")

    assert graph.direct_distance("A", "B") == 0
    assert graph.are_directly_connected("A", "B")
    assert graph.direct_distance("A", "C") is None
    assert not graph.are_directly_connected("A", "C")


def test_direct_distance_prefers_shortest_parallel_road():
    graph = Graph()
    graph.add_route("A", "B", 10)
    graph.add_route("A", "B", 3)

    assert graph.direct_distance("A", "B") == 3
    assert graph.route_count == 2


@pytest.mark.parametrize("distance", [-1, 2.5, "12", True])
def test_invalid_distances_are_rejected(distance):
    graph = Graph()
    with pytest.raises(ConfigurationError):
        graph.add_route("A", "B", distance)
    assert graph.vertex_count == 0


def test_add_routes_from_triples():
    graph = Graph()
    graph.add_routes([("A", "B", 5), ("B", "C", 5), ("A", "C", 20)])

    assert len(graph) == 3
    assert graph.route_count == 3
    assert repr(graph) == "Graph(cities=3, routes=3)"
