"""Routing request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class RouteSegmentModel(BaseModel):
    from_city: str
    to_city: str
    distance_km: int


class RouteReportModel(BaseModel):
    origin: str
    destination: str
    path: List[str]
    city_count: int
    total_distance_km: int
    estimated_cost: float
    segments: List[RouteSegmentModel]


class HopCountResponse(BaseModel):
    origin: str
    destination: str
    hops: int
