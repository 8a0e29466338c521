"""Network and catalog listing schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class NeighborModel(BaseModel):
    city: str
    distance_km: int


class CityDetailResponse(BaseModel):
    name: str
    province: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    population: int | None = None
    is_metro: bool
    neighbors: List[NeighborModel]


class CityListResponse(BaseModel):
    cities: List[str]
    total: int


class ProductSummaryModel(BaseModel):
    product_id: int
    name: str
    price: float
    category: str | None = None
    total_stock: int
    in_stock: bool
