"""Minimum-hop breadth-first search, ignoring road distances."""

from __future__ import annotations

from collections import deque

from .graph import Graph
from .models import NOT_FOUND_DISTANCE


def min_hops(graph: Graph, source: str, destination: str) -> int:
    """Fewest road segments between two cities, or -1 when either is unknown or unreachable."""

    if not graph.has_vertex(source) or not graph.has_vertex(destination):
        return NOT_FOUND_DISTANCE
    if source == destination:
        return 0

    frontier: deque[str] = deque([source])
    hop_count: dict[str, int] = {source: 0}

    while frontier:
        current = frontier.popleft()
        current_hops = hop_count[current]
        for edge in graph.neighbors(current):
            neighbor = edge.destination
            if neighbor == destination:
                return current_hops + 1
            if neighbor not in hop_count:
                hop_count[neighbor] = current_hops + 1
                frontier.append(neighbor)

    return NOT_FOUND_DISTANCE
