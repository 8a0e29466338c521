"""Adjacency-list model of the city road network."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


class ConfigurationError(ValueError):
    """Raised when the network is loaded with data the routing engine cannot use."""


@dataclass(frozen=True, slots=True)
class Edge:
    destination: str
    weight: int


def _validate_weight(origin: str, destination: str, distance: int) -> None:
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise ConfigurationError(
            f"Route {origin} -> {destination} has non-integer distance {distance!r}."
        )
    if distance < 0:
        raise ConfigurationError(
            f"Route {origin} -> {destination} has negative distance {distance}."
        )


class Graph:
    """Cities as vertices, roads as weighted edges.

    The graph is filled once while the network loads and only read afterwards,
    so a loaded instance can be shared between concurrent queries. Names are
    matched exactly; callers normalize them before inserting and querying.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, list[Edge]] = {}
        self._vertices: set[str] = set()

    def add_vertex(self, name: str) -> None:
        self._vertices.add(name)
        self._adjacency.setdefault(name, [])

    def add_route(self, city_a: str, city_b: str, distance: int) -> None:
        """Add a bidirectional road of ``distance`` km between two cities."""
        _validate_weight(city_a, city_b, distance)
        self.add_vertex(city_a)
        self.add_vertex(city_b)
        self._adjacency[city_a].append(Edge(city_b, distance))
        self._adjacency[city_b].append(Edge(city_a, distance))

    def add_directed_route(self, from_city: str, to_city: str, distance: int) -> None:
        """Add a one-way road; ``to_city`` becomes a vertex even without outgoing edges."""
        _validate_weight(from_city, to_city, distance)
        self.add_vertex(from_city)
        self.add_vertex(to_city)
        self._adjacency[from_city].append(Edge(to_city, distance))

    def add_routes(self, routes: Iterable[tuple[str, str, int]]) -> None:
        for city_a, city_b, distance in routes:
            self.add_route(city_a, city_b, distance)

    def neighbors(self, city: str) -> Sequence[Edge]:
        return tuple(self._adjacency.get(city, ()))

    def has_vertex(self, city: str) -> bool:
        return city in self._vertices

    def all_vertices(self) -> frozenset[str]:
        return frozenset(self._vertices)

    def direct_distance(self, city_a: str, city_b: str) -> Optional[int]:
        """Shortest direct edge from ``city_a`` to ``city_b``, ``None`` if there is none."""
        weights = [edge.weight for edge in self._adjacency.get(city_a, ()) if edge.destination == city_b]
        return min(weights) if weights else None

    def are_directly_connected(self, city_a: str, city_b: str) -> bool:
        return self.direct_distance(city_a, city_b) is not None

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def route_count(self) -> int:
        # each bidirectional road is stored as two edges
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    def __contains__(self, city: object) -> bool:
        return city in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(cities={self.vertex_count}, routes={self.route_count})"
