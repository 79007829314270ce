from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from car_credit.domain.vehicle import InventoryCard, Vehicle


class InventoryCardMapper(ABC):
    """
    Port for turning a raw inventory feed payload into InventoryCard values.

    Fields the payload does not carry are completed from catalog vehicles,
    looked up through find_vehicle.
    """

    @abstractmethod
    def to_cards(
        self,
        payload: Any,
        selected: Vehicle | None,
        find_vehicle: Callable[[str], Vehicle | None],
        known_models: list[str],
    ) -> list[InventoryCard]:
        """
        Args:
            payload: Decoded inventory response
            selected: Vehicle the inventory was requested for
            find_vehicle: Catalog lookup by model code
            known_models: Catalog model names, for case-insensitive matching

        Returns:
            One card per item, in feed order
        """
        ...
