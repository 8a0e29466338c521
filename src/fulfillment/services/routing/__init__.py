"""Road network graph and path algorithms."""

from .bfs import min_hops
from .dijkstra import nearest_city, shortest_distances_from, shortest_path
from .graph import ConfigurationError, Edge, Graph
from .models import NOT_FOUND_DISTANCE, PathResult

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "NOT_FOUND_DISTANCE",
    "PathResult",
    "min_hops",
    "nearest_city",
    "shortest_distances_from",
    "shortest_path",
]
