"""Dijkstra shortest path and path reconstruction over the road network.

Heap entries are ``(distance, sequence, city)``. The sequence number grows
with every push, so cities at equal tentative distance are popped in the
order they were pushed. Push order follows adjacency-list order, which in
turn follows the order routes were loaded. Stale entries for cities already
settled are skipped when popped.
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Iterable, Optional

from .graph import Graph
from .models import PathResult


def _initial_distances(graph: Graph, source: str) -> dict[str, float]:
    distances: dict[str, float] = {city: math.inf for city in graph.all_vertices()}
    distances[source] = 0
    return distances


def _run(
    graph: Graph,
    source: str,
    destination: Optional[str] = None,
) -> tuple[dict[str, float], dict[str, str]]:
    distances = _initial_distances(graph, source)
    previous: dict[str, str] = {}
    visited: set[str] = set()
    sequence = itertools.count()
    heap: list[tuple[float, int, str]] = [(0, next(sequence), source)]

    while heap:
        _, _, current = heapq.heappop(heap)
        if current in visited:
            continue
        visited.add(current)

        if current == destination:
            break

        for edge in graph.neighbors(current):
            neighbor = edge.destination
            if neighbor in visited:
                continue
            candidate = distances[current] + edge.weight
            if candidate < distances.get(neighbor, math.inf):
                distances[neighbor] = candidate
                previous[neighbor] = current
                heapq.heappush(heap, (candidate, next(sequence), neighbor))

    return distances, previous


def _reconstruct_path(previous: dict[str, str], source: str, destination: str) -> list[str] | None:
    path = [destination]
    current = destination
    while current in previous:
        current = previous[current]
        path.append(current)
    if path[-1] != source:
        return None
    path.reverse()
    return path


def shortest_path(graph: Graph, source: str, destination: str) -> PathResult:
    """Return the lowest-distance path from ``source`` to ``destination``.

    Unknown cities and disconnected pairs both yield ``PathResult.not_found()``.
    """

    if not graph.has_vertex(source) or not graph.has_vertex(destination):
        return PathResult.not_found()
    if source == destination:
        return PathResult(path=(source,), distance=0)

    distances, previous = _run(graph, source, destination)
    path = _reconstruct_path(previous, source, destination)
    total = distances.get(destination, math.inf)
    if path is None or total == math.inf:
        return PathResult.not_found()
    return PathResult(path=tuple(path), distance=int(total))


def shortest_distances_from(graph: Graph, source: str) -> dict[str, int]:
    """Distances from ``source`` to every reachable city, the source included at 0.

    Unreachable cities are absent from the result; an unknown source gives an
    empty mapping.
    """

    if not graph.has_vertex(source):
        return {}
    distances, _ = _run(graph, source)
    return {city: int(distance) for city, distance in distances.items() if distance != math.inf}


def nearest_city(graph: Graph, source: str, targets: Iterable[str]) -> PathResult:
    """Full path to whichever of ``targets`` is closest; the first listed wins ties."""

    distances = shortest_distances_from(graph, source)
    nearest: Optional[str] = None
    best = math.inf
    for city in targets:
        distance = distances.get(city)
        if distance is not None and distance < best:
            best = distance
            nearest = city
    if nearest is None:
        return PathResult.not_found()
    return shortest_path(graph, source, nearest)
