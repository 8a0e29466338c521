"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

NOT_FOUND_DISTANCE = -1


@dataclass(frozen=True, slots=True)
class PathResult:
    path: Tuple[str, ...] = ()
    distance: int = NOT_FOUND_DISTANCE

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        return len(self.path) - 1 if self.path else NOT_FOUND_DISTANCE

    @classmethod
    def not_found(cls) -> "PathResult":
        return cls()

    def __str__(self) -> str:
        if not self.found:
            return "No path found"
        return f"{' -> '.join(self.path)} ({self.distance} km)"


@dataclass(slots=True)
class RouteSegment:
    from_city: str
    to_city: str
    distance_km: int


@dataclass(slots=True)
class RouteReport:
    origin: str
    destination: str
    path: list[str]
    total_distance_km: int
    estimated_cost: float
    segments: list[RouteSegment] = field(default_factory=list)

    @property
    def city_count(self) -> int:
        return len(self.path)
