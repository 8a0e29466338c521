"""Point-to-point route lookups for display."""

from __future__ import annotations

import logging

from ...config import settings
from ...data.network_repository import RoadNetwork, get_road_network
from ..errors import RouteNotFoundError
from .bfs import min_hops
from .dijkstra import shortest_path
from .models import RouteReport, RouteSegment


def _suggested_cities(network: RoadNetwork) -> list[str]:
    return network.city_names()[: settings.max_suggested_cities]


def _resolve_pair(network: RoadNetwork, origin: str, destination: str) -> tuple[str, str]:
    resolved_origin = network.resolve(origin)
    resolved_destination = network.resolve(destination)
    if resolved_origin is None or resolved_destination is None:
        missing = origin if resolved_origin is None else destination
        logging.info(f"Route lookup rejected: '{missing}' is not in the delivery network")
        raise RouteNotFoundError(
            f"City '{missing}' is not in the delivery network.",
            suggestions=_suggested_cities(network),
        )
    return resolved_origin, resolved_destination


def find_route(origin: str, destination: str, network: RoadNetwork | None = None) -> RouteReport:
    """Shortest road route between two cities with per-segment distances."""

    network = network or get_road_network()
    source, target = _resolve_pair(network, origin, destination)

    result = shortest_path(network.graph, source, target)
    if not result.found:
        logging.info(f"No route between {source} and {target}")
        raise RouteNotFoundError(
            f"No route found between {source} and {target}.",
            suggestions=_suggested_cities(network),
        )

    segments = [
        RouteSegment(
            from_city=current,
            to_city=following,
            distance_km=network.graph.direct_distance(current, following) or 0,
        )
        for current, following in zip(result.path, result.path[1:])
    ]
    return RouteReport(
        origin=source,
        destination=target,
        path=list(result.path),
        total_distance_km=result.distance,
        estimated_cost=result.distance * settings.delivery_rate_per_km,
        segments=segments,
    )


def count_hops(origin: str, destination: str, network: RoadNetwork | None = None) -> int:
    """Fewest road segments between two cities."""

    network = network or get_road_network()
    source, target = _resolve_pair(network, origin, destination)
    hops = min_hops(network.graph, source, target)
    if hops < 0:
        raise RouteNotFoundError(
            f"No route found between {source} and {target}.",
            suggestions=_suggested_cities(network),
        )
    return hops
