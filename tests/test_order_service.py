import pytest

from fulfillment.data.network_repository import RoadNetwork
from fulfillment.models.domain import City, DeliveryPriority, Product, Route, Warehouse
from fulfillment.schemas.orders import OrderRequest
from fulfillment.services.errors import (
    NoReachableWarehouseError,
    OutOfStockError,
    UnknownCityError,
    UnknownProductError,
)
from fulfillment.services.orders import service as order_service

LAPTOP = Product(product_id=1, name="Laptop", price=1000.0, category="Electronics")


def _network() -> RoadNetwork:
    return RoadNetwork.from_records(
        [City(name="A"), City(name="B"), City(name="C"), City(name="D"), City(name="W"), City(name="Island")],
        [
            Route(from_city="A", to_city="B", distance_km=5),
            Route(from_city="B", to_city="C", distance_km=5),
            Route(from_city="A", to_city="C", distance_km=20),
            Route(from_city="C", to_city="D", distance_km=5),
        ],
    )


@pytest.fixture
def patched(monkeypatch: pytest.MonkeyPatch):
    network = _network()
    stock: dict[int, list[tuple[Warehouse, int]]] = {
        1: [
            (Warehouse(warehouse_id=20, name="C Depot", city="c"), 40),
            (Warehouse(warehouse_id=10, name="B Depot", city="B"), 25),
        ]
    }

    def fake_stock(product_id: int, required_quantity: int = 1):
        return [item for item in stock.get(product_id, []) if item[1] >= required_quantity]

    monkeypatch.setattr(
        order_service,
        "get_product_by_name",
        lambda name: LAPTOP if name.strip().lower() == "laptop" else None,
    )
    monkeypatch.setattr(order_service, "get_road_network", lambda: network)
    monkeypatch.setattr(order_service, "get_warehouses_with_product", fake_stock)
    monkeypatch.setattr(order_service.settings, "delivery_rate_per_km", 10.0)
    return stock


def test_cost_priority_picks_nearest_stocked_warehouse(patched):
    quote = order_service.quote_order(OrderRequest(product="laptop", city="a", quantity=2))

    assert quote.warehouse_id == 10
    assert quote.warehouse_city == "B"
    assert quote.customer_city == "A"
    assert quote.delivery_distance_km == 5
    assert quote.delivery_path == ["A", "B"]
    assert quote.total_price == 2000.0
    assert quote.delivery_cost == 50.0
    assert quote.final_total == 2050.0
    assert quote.priority is DeliveryPriority.COST


def test_speed_priority_keeps_stock_order_on_hop_ties(patched):
    quote = order_service.quote_order(OrderRequest(product="Laptop", city="A", priority="speed"))

    # B and C are both one road away from A; C Depot is listed first
    assert quote.warehouse_id == 20
    assert quote.delivery_hops == 1
    assert quote.delivery_distance_km == 10
    assert quote.delivery_path == ["A", "B", "C"]
    assert quote.delivery_cost == 100.0


def test_quantity_filters_candidates(patched):
    quote = order_service.quote_order(OrderRequest(product="Laptop", city="D", quantity=30))

    assert quote.warehouse_id == 20
    assert quote.delivery_distance_km == 5


def test_unknown_product(patched):
    with pytest.raises(UnknownProductError):
        order_service.quote_order(OrderRequest(product="Spaceship", city="A"))


def test_unknown_city(patched):
    with pytest.raises(UnknownCityError):
        order_service.quote_order(OrderRequest(product="Laptop", city="Atlantis"))


def test_out_of_stock(patched):
    with pytest.raises(OutOfStockError):
        order_service.quote_order(OrderRequest(product="Laptop", city="A", quantity=100))


def test_isolated_customer_city_has_no_reachable_warehouse(patched):
    with pytest.raises(NoReachableWarehouseError):
        order_service.quote_order(OrderRequest(product="Laptop", city="Island"))


def test_warehouse_in_an_unlisted_city_is_unreachable(patched):
    patched[1] = [(Warehouse(warehouse_id=30, name="Lost Depot", city="Nowhere"), 100)]

    with pytest.raises(NoReachableWarehouseError):
        order_service.quote_order(OrderRequest(product="Laptop", city="A"))
