"""Data access helpers for products, warehouses and warehouse stock."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from typing import Optional

from ..config import settings
from ..models.domain import InventoryRecord, Product, Warehouse
from .network_repository import check_columns, coerce_optional, normalize_city_name


def _require_int(value: Optional[str], column: str, path: Path) -> int:
    parsed = coerce_optional(value, int)
    if parsed is None:
        raise ValueError(f"File '{path}' has a row without '{column}'.")
    return parsed


@functools.lru_cache(maxsize=1)
def load_products(source: Optional[Path] = None) -> tuple[Product, ...]:
    """Load the product catalog from the configured CSV file."""

    csv_path = source or settings.products_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Products file not found: {csv_path}")

    products: list[Product] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        check_columns(reader, csv_path, {"id", "name", "price"})
        for row in reader:
            name = (row.get("name") or "").strip()
            if not name:
                continue
            products.append(
                Product(
                    product_id=_require_int(row.get("id"), "id", csv_path),
                    name=name,
                    price=coerce_optional(row.get("price"), float) or 0.0,
                    category=(row.get("category") or "").strip() or None,
                    description=(row.get("description") or "").strip() or None,
                )
            )
    logging.info(f"Loaded {len(products)} products from {csv_path}")
    return tuple(products)


@functools.lru_cache(maxsize=1)
def load_warehouses(source: Optional[Path] = None) -> tuple[Warehouse, ...]:
    """Load warehouses from the configured CSV file."""

    csv_path = source or settings.warehouses_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Warehouses file not found: {csv_path}")

    warehouses: list[Warehouse] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        check_columns(reader, csv_path, {"id", "name", "city"})
        for row in reader:
            city = normalize_city_name(row.get("city") or "")
            if not city:
                logging.warning(f"Skipping warehouse '{row.get('name')}' without a city")
                continue
            warehouses.append(
                Warehouse(
                    warehouse_id=_require_int(row.get("id"), "id", csv_path),
                    name=(row.get("name") or "").strip(),
                    city=city,
                    address=(row.get("address") or "").strip() or None,
                    capacity=coerce_optional(row.get("capacity"), int),
                )
            )
    logging.info(f"Loaded {len(warehouses)} warehouses from {csv_path}")
    return tuple(warehouses)


@functools.lru_cache(maxsize=1)
def load_inventory(source: Optional[Path] = None) -> tuple[InventoryRecord, ...]:
    """Load per-warehouse stock levels from the configured CSV file."""

    csv_path = source or settings.inventory_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Inventory file not found: {csv_path}")

    records: list[InventoryRecord] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        check_columns(reader, csv_path, {"warehouse_id", "product_id", "quantity"})
        for row in reader:
            records.append(
                InventoryRecord(
                    warehouse_id=_require_int(row.get("warehouse_id"), "warehouse_id", csv_path),
                    product_id=_require_int(row.get("product_id"), "product_id", csv_path),
                    quantity=coerce_optional(row.get("quantity"), int) or 0,
                )
            )
    logging.info(f"Loaded {len(records)} inventory records from {csv_path}")
    return tuple(records)


def get_product_by_name(name: str) -> Optional[Product]:
    needle = name.strip().casefold()
    for product in load_products():
        if product.name.casefold() == needle:
            return product
    return None


def get_warehouses_with_product(product_id: int, required_quantity: int = 1) -> list[tuple[Warehouse, int]]:
    """Warehouses holding at least ``required_quantity`` of a product.

    Ordered by stocked quantity (largest first), then warehouse name. The
    order is meaningful: warehouse selection keeps the first of equally good
    candidates.
    """

    warehouses = {warehouse.warehouse_id: warehouse for warehouse in load_warehouses()}
    stocked: list[tuple[Warehouse, int]] = []
    for record in load_inventory():
        if record.product_id != product_id or record.quantity < required_quantity:
            continue
        warehouse = warehouses.get(record.warehouse_id)
        if warehouse is None:
            logging.warning(f"Inventory references unknown warehouse {record.warehouse_id}")
            continue
        stocked.append((warehouse, record.quantity))
    stocked.sort(key=lambda item: (-item[1], item[0].name))
    return stocked


def total_stock_by_product() -> dict[int, int]:
    totals: dict[int, int] = {}
    for record in load_inventory():
        totals[record.product_id] = totals.get(record.product_id, 0) + record.quantity
    return totals


def clear_catalog_cache() -> None:
    load_products.cache_clear()
    load_warehouses.cache_clear()
    load_inventory.cache_clear()
