from __future__ import annotations

from car_credit.domain.vehicle import Vehicle
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


class InMemoryVehicleCatalogRepository(VehicleCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Model names sorted alphabetically
    - Configurations of a model ordered by price, then model code
    """

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = vehicles

    def list_models(self) -> list[str]:
        return sorted({vehicle.model_name for vehicle in self._vehicles})

    def list_by_model(self, model_name: str) -> list[Vehicle]:
        matches = [
            vehicle
            for vehicle in self._vehicles
            if vehicle.model_name.lower() == model_name.lower()
        ]
        return sorted(matches, key=lambda vehicle: (vehicle.price, vehicle.full_model_code))

    def get_by_code(self, full_model_code: str) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.full_model_code == full_model_code:
                return vehicle
        return None
