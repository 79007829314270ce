from __future__ import annotations

from dataclasses import dataclass

from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class ListVehicleModelsResponse:
    models: list[str]


class ListVehicleModels:
    """Model names offered in the calculator's first dropdown."""

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self) -> ListVehicleModelsResponse:
        return ListVehicleModelsResponse(models=self._repository.list_models())
