"""Order quoting: product lookup, stock filtering and warehouse selection."""

from __future__ import annotations

import logging

from ...config import settings
from ...data.catalog_repository import get_product_by_name, get_warehouses_with_product
from ...data.network_repository import get_road_network
from ...models.domain import Candidate
from ...schemas.orders import OrderQuoteResponse, OrderRequest
from ..errors import NoReachableWarehouseError, OutOfStockError, UnknownCityError, UnknownProductError
from .selector import FulfillmentSelector


def quote_order(payload: OrderRequest) -> OrderQuoteResponse:
    """Pick the fulfilling warehouse for an order and price its delivery.

    Stock is checked but not reserved, and the quote is not stored.
    """

    product = get_product_by_name(payload.product)
    if product is None:
        logging.info(f"Order rejected: product '{payload.product}' not found")
        raise UnknownProductError(f"Product '{payload.product}' not found.")

    network = get_road_network()
    customer_city = network.resolve(payload.city)
    if customer_city is None:
        logging.info(f"Order rejected: city '{payload.city}' is not in the delivery network")
        raise UnknownCityError(f"City '{payload.city}' is not in our delivery network.")

    stocked = get_warehouses_with_product(product.product_id, payload.quantity)
    if not stocked:
        logging.info(f"Order rejected: '{product.name}' x{payload.quantity} out of stock everywhere")
        raise OutOfStockError(f"Product '{product.name}' is out of stock in all warehouses.")

    warehouses_by_id = {}
    candidates: list[Candidate] = []
    for warehouse, _quantity in stocked:
        warehouses_by_id[warehouse.warehouse_id] = warehouse
        candidates.append(
            Candidate(
                warehouse_id=warehouse.warehouse_id,
                city=network.resolve(warehouse.city) or warehouse.city,
            )
        )

    selection = FulfillmentSelector(network.graph).select(customer_city, candidates, payload.priority)
    if selection is None:
        logging.warning(
            f"No reachable warehouse for {customer_city} among {len(candidates)} stocked candidates"
        )
        raise NoReachableWarehouseError(f"No reachable warehouse found for delivery to {customer_city}.")

    warehouse = warehouses_by_id[selection.candidate.warehouse_id]
    total_price = product.price * payload.quantity
    delivery_cost = selection.distance_km * settings.delivery_rate_per_km
    logging.info(
        f"Order for '{product.name}' to {customer_city} ({payload.priority.value}) "
        f"fulfilled from {warehouse.name} in {selection.candidate.city}, {selection.distance_km} km"
    )

    return OrderQuoteResponse(
        product_id=product.product_id,
        product_name=product.name,
        quantity=payload.quantity,
        unit_price=product.price,
        total_price=total_price,
        customer_city=customer_city,
        warehouse_id=warehouse.warehouse_id,
        warehouse_name=warehouse.name,
        warehouse_city=selection.candidate.city,
        priority=selection.priority,
        delivery_distance_km=selection.distance_km,
        delivery_hops=selection.hops,
        delivery_path=list(selection.path),
        delivery_cost=delivery_cost,
        final_total=total_price + delivery_cost,
    )
