from decimal import Decimal
from unittest.mock import Mock

import pytest

from car_credit.adapters.in_memory_inventory_feed import InMemoryInventoryFeed
from car_credit.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from car_credit.adapters.inventory_card_mapper import FeedInventoryCardMapper
from car_credit.domain.errors import DataSourceUnavailableError, NotFoundError
from car_credit.domain.vehicle import Vehicle
from car_credit.ports.inventory_card_mapper import InventoryCardMapper
from car_credit.use_cases.list_inventory_cards import (
    ListInventoryCards,
    ListInventoryCardsRequest,
)


def make_vehicle(code: str, grade: str, price: str) -> Vehicle:
    return Vehicle(
        full_model_code=code,
        model_name="Peugeot 2008",
        body_label="SUV",
        grade_label=grade,
        price=Decimal(price),
        year=2024,
        engine_label="1.2 PureTech 130",
        transmission="EAT8",
        fuel_type="Petrol",
        photo_link="2008.png",
    )


ACTIVE = make_vehicle("2008-ACTIVE", "Active", "1099900")
ALLURE = make_vehicle("2008-ALLURE", "Allure", "1299900")

MAPPER = FeedInventoryCardMapper(
    photo_base_url="https://photos.example.test",
    store_base_url="https://store.example.test",
)


@pytest.fixture
def catalog() -> InMemoryVehicleCatalogRepository:
    return InMemoryVehicleCatalogRepository([ACTIVE, ALLURE])


def test_lists_cards_for_vehicle(catalog):
    feed = InMemoryInventoryFeed(
        {
            "2008-ACTIVE": [
                {"id": 1, "VariantCode": "2008-ACTIVE", "vin": "VIN1", "Status": "Stock"},
                {"id": 2, "VariantCode": "2008-ALLURE", "vin": "VIN2"},
            ]
        }
    )
    uc = ListInventoryCards(catalog, feed, MAPPER)

    response = uc.execute(ListInventoryCardsRequest(vehicle_code="2008-ACTIVE"))

    assert response.vehicle == ACTIVE
    assert [card.card_key for card in response.cards] == ["2008-ACTIVE-1", "2008-ALLURE-2"]
    assert response.cards[0].grade_label == "Active"
    assert response.cards[1].grade_label == "Allure"
    assert response.cards[1].price == Decimal("1299900")


def test_empty_inventory(catalog):
    uc = ListInventoryCards(catalog, InMemoryInventoryFeed({}), MAPPER)

    assert uc.execute(ListInventoryCardsRequest(vehicle_code="2008-ALLURE")).cards == []


def test_unknown_vehicle_is_not_found(catalog):
    feed = Mock()
    uc = ListInventoryCards(catalog, feed, MAPPER)

    with pytest.raises(NotFoundError):
        uc.execute(ListInventoryCardsRequest(vehicle_code="missing"))

    feed.fetch.assert_not_called()


def test_catalog_is_queried_once_per_variant_code():
    catalog = Mock(wraps=InMemoryVehicleCatalogRepository([ACTIVE, ALLURE]))
    feed = InMemoryInventoryFeed(
        {"2008-ACTIVE": [{"VariantCode": "2008-ALLURE"} for _ in range(3)]}
    )

    ListInventoryCards(catalog, feed, MAPPER).execute(
        ListInventoryCardsRequest(vehicle_code="2008-ACTIVE")
    )

    # Requested vehicle + one lookup for the variant shared by all three cards
    assert catalog.get_by_code.call_count == 2


def test_feed_failure_propagates(catalog):
    feed = Mock()
    feed.fetch.side_effect = DataSourceUnavailableError("Inventory API", "HTTP 500")

    with pytest.raises(DataSourceUnavailableError):
        ListInventoryCards(catalog, feed, MAPPER).execute(
            ListInventoryCardsRequest(vehicle_code="2008-ACTIVE")
        )


def test_delegates_payload_to_any_card_mapper(catalog):
    payload = [{"VariantCode": "2008-ACTIVE"}]
    mapper = Mock(spec=InventoryCardMapper)
    mapper.to_cards.return_value = []

    response = ListInventoryCards(
        catalog, InMemoryInventoryFeed({"2008-ACTIVE": payload}), mapper
    ).execute(ListInventoryCardsRequest(vehicle_code="2008-ACTIVE"))

    assert response.cards == []
    mapper.to_cards.assert_called_once()
    args, kwargs = mapper.to_cards.call_args
    assert args == (payload,)
    assert kwargs["selected"] == ACTIVE
    assert kwargs["known_models"] == ["Peugeot 2008"]
    assert kwargs["find_vehicle"]("2008-ALLURE") == ALLURE
