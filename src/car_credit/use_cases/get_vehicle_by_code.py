"""Get vehicle configuration by model code use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_credit.domain.errors import NotFoundError
from car_credit.domain.vehicle import Vehicle
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByCodeRequest:
    full_model_code: str


@dataclass(frozen=True, slots=True)
class GetVehicleByCodeResponse:
    vehicle: Vehicle


class GetVehicleByCode:
    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: GetVehicleByCodeRequest) -> GetVehicleByCodeResponse:
        """
        Raises:
            NotFoundError: If no configuration has the given code
        """
        vehicle = self._repository.get_by_code(request.full_model_code)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.full_model_code)

        return GetVehicleByCodeResponse(vehicle=vehicle)
