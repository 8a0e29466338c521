from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fulfillment.config import settings
from fulfillment.data import catalog_repository, network_repository
from fulfillment.main import create_app


@pytest.fixture(autouse=True)
def clear_caches():
    network_repository.clear_network_cache()
    catalog_repository.clear_catalog_cache()
    yield
    network_repository.clear_network_cache()
    catalog_repository.clear_catalog_cache()


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    files = {
        "cities_file": "id,name,province\n1,A,North\n2,B,North\n3,C,South\n4,D,Islands\n",
        "routes_file": "from_city,to_city,distance_km\nA,B,5\nB,C,5\nA,C,20\n",
        "warehouses_file": "id,name,city\n1,West Depot,B\n2,East Depot,C\n",
        "products_file": "id,name,price,category\n1,Laptop,1000,Electronics\n2,Kettle,50,Kitchen\n",
        "inventory_file": "warehouse_id,product_id,quantity\n2,1,30\n1,1,10\n1,2,0\n",
    }
    for field_name, content in files.items():
        path = tmp_path / f"{field_name}.csv"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setattr(settings, field_name, path)
    monkeypatch.setattr(settings, "delivery_rate_per_km", 10.0)

    return TestClient(create_app())


def test_health_endpoints(api_client: TestClient):
    assert api_client.get("/api/health").json() == {"status": "ok"}

    network = api_client.get("/api/health/network").json()
    assert network["healthy"] is True
    assert network["cities"] == 4
    assert network["routes"] == 3


def test_shortest_route_endpoint(api_client: TestClient):
    response = api_client.get("/api/routes/shortest", params={"origin": "a", "destination": "C"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["path"] == ["A", "B", "C"]
    assert payload["total_distance_km"] == 10
    assert payload["city_count"] == 3
    assert payload["estimated_cost"] == 100.0
    assert [segment["distance_km"] for segment in payload["segments"]] == [5, 5]


def test_route_to_isolated_city_is_not_found(api_client: TestClient):
    response = api_client.get("/api/routes/shortest", params={"origin": "A", "destination": "D"})

    assert response.status_code == 404
    detail = response.json()["detail"]
    assert "No route found" in detail["message"]
    assert detail["available_cities"] == ["A", "B", "C", "D"]


def test_route_to_unknown_city_is_not_found(api_client: TestClient):
    response = api_client.get("/api/routes/shortest", params={"origin": "A", "destination": "Atlantis"})

    assert response.status_code == 404
    assert "Atlantis" in response.json()["detail"]["message"]


def test_hops_endpoint(api_client: TestClient):
    response = api_client.get("/api/routes/hops", params={"origin": "A", "destination": "C"})

    assert response.status_code == 200
    assert response.json()["hops"] == 1
    assert api_client.get("/api/routes/hops", params={"origin": "A", "destination": "D"}).status_code == 404


def test_order_quote_by_cost_and_speed(api_client: TestClient):
    by_cost = api_client.post("/api/orders/quote", json={"product": "laptop", "city": "A"})
    assert by_cost.status_code == 200
    cost_payload = by_cost.json()
    assert cost_payload["warehouse_name"] == "West Depot"
    assert cost_payload["delivery_distance_km"] == 5
    assert cost_payload["final_total"] == 1050.0

    by_speed = api_client.post("/api/orders/quote", json={"product": "Laptop", "city": "A", "priority": "speed"})
    assert by_speed.status_code == 200
    speed_payload = by_speed.json()
    # East Depot holds more stock and ties with West Depot on hop count
    assert speed_payload["warehouse_name"] == "East Depot"
    assert speed_payload["delivery_hops"] == 1
    assert speed_payload["delivery_distance_km"] == 10


def test_order_quote_failures(api_client: TestClient):
    unknown_product = api_client.post("/api/orders/quote", json={"product": "Spaceship", "city": "A"})
    assert unknown_product.status_code == 404

    unknown_city = api_client.post("/api/orders/quote", json={"product": "Laptop", "city": "Atlantis"})
    assert unknown_city.status_code == 404

    out_of_stock = api_client.post("/api/orders/quote", json={"product": "Kettle", "city": "A"})
    assert out_of_stock.status_code == 400

    unreachable = api_client.post("/api/orders/quote", json={"product": "Laptop", "city": "D"})
    assert unreachable.status_code == 400
    assert "No reachable warehouse" in unreachable.json()["detail"]

    invalid = api_client.post("/api/orders/quote", json={"product": "Laptop", "city": "A", "quantity": 0})
    assert invalid.status_code == 422


def test_network_and_product_listings(api_client: TestClient):
    cities = api_client.get("/api/network/cities").json()
    assert cities == {"cities": ["A", "B", "C", "D"], "total": 4}

    detail = api_client.get("/api/network/cities/b")
    assert detail.status_code == 200
    assert detail.json()["neighbors"] == [
        {"city": "A", "distance_km": 5},
        {"city": "C", "distance_km": 5},
    ]
    assert api_client.get("/api/network/cities/Atlantis").status_code == 404

    products = api_client.get("/api/products").json()
    assert [(item["name"], item["total_stock"], item["in_stock"]) for item in products] == [
        ("Kettle", 0, False),
        ("Laptop", 40, True),
    ]
