"""Tests for GET /v1/vehicles/{vehicle_code}/inventory."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_credit.adapters.in_memory_inventory_feed import InMemoryInventoryFeed
from car_credit.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from car_credit.adapters.inventory_card_mapper import FeedInventoryCardMapper
from car_credit.domain.errors import DataSourceUnavailableError
from car_credit.domain.vehicle import Vehicle
from car_credit.entrypoints.http.dependencies import (
    get_inventory_card_mapper,
    get_inventory_feed,
    get_vehicle_catalog,
)
from car_credit.entrypoints.http.exception_handlers import register_exception_handlers
from car_credit.entrypoints.http.routes.inventory import router

VEHICLE = Vehicle(
    full_model_code="1PP2A5HMJ6B0A0E0",
    model_name="Peugeot 2008",
    body_label="SUV",
    grade_label="Active",
    price=Decimal("1099900"),
    year=2024,
    engine_label="1.2 PureTech 100",
    transmission="MT6",
    fuel_type="Petrol",
    photo_link="2008/active.png",
)


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_vehicle_catalog] = lambda: InMemoryVehicleCatalogRepository(
        [VEHICLE]
    )
    test_app.dependency_overrides[get_inventory_card_mapper] = lambda: FeedInventoryCardMapper(
        photo_base_url="https://photos.example.test",
        store_base_url="https://store.example.test",
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_lists_cards(app: FastAPI, client: TestClient) -> None:
    feed = InMemoryInventoryFeed(
        {
            "1PP2A5HMJ6B0A0E0": {
                "items": [
                    {
                        "id": 7,
                        "VariantCode": "1PP2A5HMJ6B0A0E0",
                        "vin": "VF3XXXXXXXX000007",
                        "Status": "Stock",
                        "Price": "1 049 900",
                    }
                ]
            }
        }
    )
    app.dependency_overrides[get_inventory_feed] = lambda: feed

    response = client.get("/v1/vehicles/1PP2A5HMJ6B0A0E0/inventory")

    assert response.status_code == 200
    data = response.json()
    assert data["vehicle_code"] == "1PP2A5HMJ6B0A0E0"
    [card] = data["cards"]
    assert card["card_key"] == "1PP2A5HMJ6B0A0E0-7"
    assert card["status"] == "В наявності"
    assert card["price"] == "1049900"
    assert card["grade"] == "Active"
    assert card["photo_url"] == "https://photos.example.test/app/2008/active.png"
    assert card["store_url"] == "https://store.example.test/car/VF3XXXXXXXX000007"
    assert card["co2"] is None


def test_unknown_vehicle_returns_404(app: FastAPI, client: TestClient) -> None:
    app.dependency_overrides[get_inventory_feed] = lambda: InMemoryInventoryFeed({})

    response = client.get("/v1/vehicles/missing/inventory")

    assert response.status_code == 404


def test_feed_failure_returns_503(app: FastAPI, client: TestClient) -> None:
    feed = Mock()
    feed.fetch.side_effect = DataSourceUnavailableError(
        "Inventory API", "timeout after 5.0s", variant_code="1PP2A5HMJ6B0A0E0"
    )
    app.dependency_overrides[get_inventory_feed] = lambda: feed

    response = client.get("/v1/vehicles/1PP2A5HMJ6B0A0E0/inventory")

    assert response.status_code == 503
    assert response.json()["code"] == "DATA_SOURCE_UNAVAILABLE"
