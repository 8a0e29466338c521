"""Product catalog endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from ...data.catalog_repository import load_products, total_stock_by_product
from ...schemas.network import ProductSummaryModel

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductSummaryModel], status_code=status.HTTP_200_OK)
def list_products() -> List[ProductSummaryModel]:
    """All products with stock summed across warehouses, sorted by name."""
    totals = total_stock_by_product()
    return [
        ProductSummaryModel(
            product_id=product.product_id,
            name=product.name,
            price=product.price,
            category=product.category,
            total_stock=totals.get(product.product_id, 0),
            in_stock=totals.get(product.product_id, 0) > 0,
        )
        for product in sorted(load_products(), key=lambda item: item.name.casefold())
    ]
