from __future__ import annotations

from dataclasses import dataclass

from car_credit.domain.errors import ValidationError
from car_credit.domain.vehicle import Vehicle
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class ListVehicleConfigurationsRequest:
    model_name: str


@dataclass(frozen=True, slots=True)
class ListVehicleConfigurationsResponse:
    vehicles: list[Vehicle]


class ListVehicleConfigurations:
    """
    Configurations (body, grade, engine) available for a model.

    An unknown model yields an empty list, not an error: the dropdown
    simply has nothing to show.
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(
        self, request: ListVehicleConfigurationsRequest
    ) -> ListVehicleConfigurationsResponse:
        """
        Raises:
            ValidationError: If model_name is blank
        """
        model_name = request.model_name.strip()
        if not model_name:
            raise ValidationError(
                errors=[
                    {
                        "field": "model",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        return ListVehicleConfigurationsResponse(
            vehicles=self._repository.list_by_model(model_name)
        )
