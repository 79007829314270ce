from __future__ import annotations

from car_credit.domain.vehicle import Vehicle
from car_credit.entrypoints.http.dtos.vehicles import (
    VehicleModelsResponseDTO,
    VehicleResponseDTO,
    VehiclesResponseDTO,
)
from car_credit.use_cases.list_vehicle_configurations import (
    ListVehicleConfigurationsResponse,
)
from car_credit.use_cases.list_vehicle_models import ListVehicleModelsResponse


class VehiclesMapper:
    """Maps catalog domain models to REST DTOs."""

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            code=vehicle.full_model_code,
            model=vehicle.model_name,
            label=vehicle.label,
            body=vehicle.body_label,
            grade=vehicle.grade_label,
            year=vehicle.year,
            engine=vehicle.engine_label,
            transmission=vehicle.transmission,
            fuel_type=vehicle.fuel_type,
            price=str(vehicle.price),  # Decimal → str at boundary
            photo_link=vehicle.photo_link,
        )

    @staticmethod
    def to_models_response(result: ListVehicleModelsResponse) -> VehicleModelsResponseDTO:
        return VehicleModelsResponseDTO(models=result.models)

    @staticmethod
    def to_vehicles_response(result: ListVehicleConfigurationsResponse) -> VehiclesResponseDTO:
        return VehiclesResponseDTO(
            vehicles=[VehiclesMapper.to_vehicle_response(vehicle) for vehicle in result.vehicles]
        )
