from __future__ import annotations

from dataclasses import dataclass

from car_credit.ports.inventory_card_mapper import InventoryCardMapper
from car_credit.domain.errors import NotFoundError
from car_credit.domain.vehicle import InventoryCard, Vehicle
from car_credit.ports.inventory_feed import InventoryFeed
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class ListInventoryCardsRequest:
    vehicle_code: str


@dataclass(frozen=True, slots=True)
class ListInventoryCardsResponse:
    vehicle: Vehicle
    cards: list[InventoryCard]


class ListInventoryCards:
    """
    Live inventory cars for a vehicle configuration.

    Cards missing a field are completed from the catalog vehicle with
    the card's own variant code, or from the requested vehicle.
    """

    def __init__(
        self,
        vehicle_catalog_repository: VehicleCatalogRepository,
        inventory_feed: InventoryFeed,
        card_mapper: InventoryCardMapper,
    ) -> None:
        self._vehicles = vehicle_catalog_repository
        self._feed = inventory_feed
        self._mapper = card_mapper

    def execute(self, request: ListInventoryCardsRequest) -> ListInventoryCardsResponse:
        """
        Raises:
            NotFoundError: If the vehicle code is unknown
            DataSourceUnavailableError: If the inventory feed cannot be read
        """
        vehicle = self._vehicles.get_by_code(request.vehicle_code)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_code)

        payload = self._feed.fetch(vehicle.full_model_code)

        # One catalog query per distinct variant code in the payload
        known: dict[str, Vehicle | None] = {vehicle.full_model_code: vehicle}

        def find_vehicle(code: str) -> Vehicle | None:
            if code not in known:
                known[code] = self._vehicles.get_by_code(code)
            return known[code]

        cards = self._mapper.to_cards(
            payload,
            selected=vehicle,
            find_vehicle=find_vehicle,
            known_models=self._vehicles.list_models(),
        )

        return ListInventoryCardsResponse(vehicle=vehicle, cards=cards)
