"""Order request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import DeliveryPriority


class OrderRequest(BaseModel):
    product: str = Field(..., min_length=1, description="Product name (case-insensitive).")
    city: str = Field(..., min_length=1, description="Customer city (case-insensitive).")
    quantity: int = Field(default=1, ge=1)
    priority: DeliveryPriority = Field(
        default=DeliveryPriority.COST,
        description="'cost' picks the shortest road distance, 'speed' the fewest road segments.",
    )


class OrderQuoteResponse(BaseModel):
    product_id: int
    product_name: str
    quantity: int
    unit_price: float
    total_price: float
    customer_city: str
    warehouse_id: int
    warehouse_name: str
    warehouse_city: str
    priority: DeliveryPriority
    delivery_distance_km: int
    delivery_hops: Optional[int] = None
    delivery_path: List[str]
    delivery_cost: float
    final_total: float
