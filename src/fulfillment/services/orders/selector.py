"""Warehouse selection against a loaded road network."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ...models.domain import Candidate, DeliveryPriority
from ..routing.bfs import min_hops
from ..routing.dijkstra import shortest_distances_from, shortest_path
from ..routing.graph import Graph


@dataclass(frozen=True, slots=True)
class FulfillmentSelection:
    candidate: Candidate
    distance_km: int
    path: tuple[str, ...]
    priority: DeliveryPriority
    hops: Optional[int] = None


class FulfillmentSelector:
    """Picks the best candidate warehouse for a customer city.

    Candidates are evaluated in the order given and never re-sorted; on equal
    distance (or equal hop count) the earlier candidate wins, so the caller's
    ordering acts as the tie-break. ``None`` means no candidate is reachable.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def select(
        self,
        customer_city: str,
        candidates: Sequence[Candidate],
        priority: DeliveryPriority = DeliveryPriority.COST,
    ) -> Optional[FulfillmentSelection]:
        match DeliveryPriority(priority):
            case DeliveryPriority.COST:
                return self.select_by_distance(customer_city, candidates)
            case DeliveryPriority.SPEED:
                return self.select_by_hops(customer_city, candidates)

    def select_by_distance(
        self, customer_city: str, candidates: Sequence[Candidate]
    ) -> Optional[FulfillmentSelection]:
        if not candidates:
            return None
        # one pass from the customer ranks every candidate
        distances = shortest_distances_from(self.graph, customer_city)

        best: Optional[Candidate] = None
        best_distance: Optional[int] = None
        for candidate in candidates:
            distance = distances.get(candidate.city)
            if distance is None:
                continue
            if best_distance is None or distance < best_distance:
                best, best_distance = candidate, distance

        if best is None:
            return None
        result = shortest_path(self.graph, customer_city, best.city)
        return FulfillmentSelection(
            candidate=best,
            distance_km=result.distance,
            path=result.path,
            priority=DeliveryPriority.COST,
            hops=result.hops,
        )

    def select_by_hops(
        self, customer_city: str, candidates: Sequence[Candidate]
    ) -> Optional[FulfillmentSelection]:
        best: Optional[Candidate] = None
        best_hops: Optional[int] = None
        for candidate in candidates:
            hops = min_hops(self.graph, customer_city, candidate.city)
            if hops < 0:
                continue
            if best_hops is None or hops < best_hops:
                best, best_hops = candidate, hops

        if best is None:
            return None
        # the delivery distance is always the weighted road distance, never the hop count
        result = shortest_path(self.graph, customer_city, best.city)
        if not result.found:
            return None
        return FulfillmentSelection(
            candidate=best,
            distance_km=result.distance,
            path=result.path,
            priority=DeliveryPriority.SPEED,
            hops=best_hops,
        )
