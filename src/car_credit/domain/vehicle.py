from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Vehicle:
    """A catalog vehicle configuration (model + body + grade + engine)."""

    full_model_code: str
    model_name: str
    body_label: str
    grade_label: str
    price: Decimal
    year: int
    engine_label: str
    transmission: str
    fuel_type: str
    photo_link: str

    @property
    def label(self) -> str:
        return (
            f"{self.body_label} {self.grade_label} {self.year} "
            f"{self.engine_label} {self.transmission}"
        )


@dataclass(frozen=True, slots=True)
class InventoryCard:
    """A live-inventory car, normalized from the inventory feed."""

    card_key: str
    variant_code: str
    model_name: str
    grade_label: str
    engine_label: str
    transmission: str
    fuel_type: str
    status: str
    photo_url: str
    store_url: str
    price: Decimal
    vin: str
    year: str
    title: str
    co2: str | None = None
    consumption: str | None = None
