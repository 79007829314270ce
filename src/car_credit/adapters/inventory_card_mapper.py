"""Normalization of live-inventory payloads into InventoryCard values.

The inventory feed is loosely typed: the same logical field arrives
under different keys depending on the upstream export. Every field is
resolved through CARD_FIELD_KEYS, first present non-null key wins,
otherwise the value of the matching catalog vehicle is used.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping

from car_credit.domain.vehicle import InventoryCard, Vehicle
from car_credit.ports.inventory_card_mapper import InventoryCardMapper

CARD_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "variant_code": ("FULL_MODEL_CODE", "VariantCode", "variantCode", "variant_code"),
    "model_name": ("MODEL_NAME", "ModelName", "modelName", "model"),
    "grade_label": ("GRADE_LABLE", "GradeLabel", "gradeLabel", "complect"),
    "engine_label": ("EGINE_LABEL", "EngineLabel", "engineLabel", "property1"),
    "transmission": (
        "TRANSMISSION",
        "Transmission",
        "transmission",
        "property2",
        "filter_transmission",
    ),
    "fuel_type": ("FUEL_TYPE", "FuelType", "fuelType", "property3", "palevo"),
    "status": ("STATUS", "Status", "status"),
    "photo_link": ("PHOTO_LINK", "PhotoLink", "photoLink", "photo"),
    "price": ("PRICE", "Price", "price", "priceNew", "PriceLC"),
    "co2": ("CO2", "Co2", "co2"),
    "consumption": ("Consumption", "FuelConsumption", "fuelConsumption", "rashod"),
    "id": ("id", "ID", "code"),
    "vin": ("vin", "VIN", "title"),
    "year": ("year", "YEAR"),
    "title": ("title",),
}

# Envelope keys under which the feed may wrap its list of cars
ITEM_LIST_KEYS = ("items", "data", "variants", "result")

STATUS_IN_STOCK_SOURCE = "Stock"
STATUS_IN_STOCK = "В наявності"
STATUS_IN_TRANSIT = "В дорозі"

_WHITESPACE = re.compile(r"\s")


def pick_value(item: Any, field: str, fallback: Any) -> Any:
    if isinstance(item, Mapping):
        for key in CARD_FIELD_KEYS[field]:
            if item.get(key) is not None:
                return item[key]
    return fallback


def parse_number(value: Any, fallback: Decimal) -> Decimal:
    """Parse "1 234 567,5"-style strings; anything unparseable gives the fallback."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        number = Decimal(str(value))
        return number if number.is_finite() else fallback
    if not isinstance(value, str):
        return fallback

    cleaned = _WHITESPACE.sub("", value).replace(",", ".", 1)
    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        return fallback
    return number if number.is_finite() else fallback


def normalize_card_items(payload: Any) -> list[Any]:
    if not payload:
        return []
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        for key in ITEM_LIST_KEYS:
            if isinstance(payload.get(key), list):
                return payload[key]
        return [payload]
    return []


def resolve_model_name(value: str, known_models: list[str]) -> str:
    if not value:
        return value
    for model in known_models:
        if model.lower() == value.lower():
            return model
    return value


class FeedInventoryCardMapper(InventoryCardMapper):
    """Maps raw inventory items to InventoryCard, filling gaps from the catalog."""

    def __init__(self, photo_base_url: str, store_base_url: str) -> None:
        self._photo_base_url = photo_base_url.rstrip("/")
        self._store_base_url = store_base_url.rstrip("/")

    def build_photo_url(self, value: str) -> str:
        if not value:
            return ""
        if value.startswith(("http://", "https://")):
            return value
        if value.startswith("/app/"):
            return f"{self._photo_base_url}{value}"
        return f"{self._photo_base_url}/app/{value}"

    def to_cards(
        self,
        payload: Any,
        selected: Vehicle | None,
        find_vehicle: Callable[[str], Vehicle | None],
        known_models: list[str],
    ) -> list[InventoryCard]:
        return [
            self.to_card(item, index, selected, find_vehicle, known_models)
            for index, item in enumerate(normalize_card_items(payload))
        ]

    def to_card(
        self,
        item: Any,
        index: int,
        selected: Vehicle | None,
        find_vehicle: Callable[[str], Vehicle | None],
        known_models: list[str],
    ) -> InventoryCard:
        variant_code = str(pick_value(item, "variant_code", ""))
        fallback = (find_vehicle(variant_code) if variant_code else None) or selected

        def text(field: str, default: str) -> str:
            return str(pick_value(item, field, default))

        status = text("status", STATUS_IN_TRANSIT)
        fallback_price = fallback.price if fallback else Decimal("0")

        raw_id = pick_value(item, "id", "")
        id_part = str(raw_id) if raw_id != "" else str(index)
        vin = text("vin", "")

        co2 = pick_value(item, "co2", None)
        consumption = pick_value(item, "consumption", None)

        return InventoryCard(
            card_key=f"{variant_code}-{id_part}" if variant_code else id_part,
            variant_code=variant_code,
            model_name=resolve_model_name(
                text("model_name", fallback.model_name if fallback else ""), known_models
            ),
            grade_label=text("grade_label", fallback.grade_label if fallback else ""),
            engine_label=text("engine_label", fallback.engine_label if fallback else ""),
            transmission=text("transmission", fallback.transmission if fallback else ""),
            fuel_type=text("fuel_type", fallback.fuel_type if fallback else ""),
            status=STATUS_IN_STOCK if status == STATUS_IN_STOCK_SOURCE else status,
            photo_url=self.build_photo_url(
                text("photo_link", fallback.photo_link if fallback else "")
            ),
            store_url=f"{self._store_base_url}/car/{vin}" if vin else "",
            price=parse_number(pick_value(item, "price", fallback_price), fallback_price),
            vin=vin,
            year=text("year", str(fallback.year) if fallback else ""),
            title=text("title", vin),
            co2=str(co2) if co2 is not None else None,
            consumption=str(consumption) if consumption is not None else None,
        )
