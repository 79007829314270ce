from fastapi import APIRouter, Depends

from car_credit.entrypoints.http.dependencies import (
    get_list_vehicle_configurations_use_case,
    get_list_vehicle_models_use_case,
    get_vehicle_by_code_use_case,
)
from car_credit.entrypoints.http.dtos.vehicles import (
    VehicleModelsResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
    VehiclesResponseDTO,
)
from car_credit.entrypoints.http.error_responses import ErrorResponse
from car_credit.entrypoints.http.mappers.vehicles_mapper import VehiclesMapper
from car_credit.use_cases.get_vehicle_by_code import GetVehicleByCode, GetVehicleByCodeRequest
from car_credit.use_cases.list_vehicle_configurations import (
    ListVehicleConfigurations,
    ListVehicleConfigurationsRequest,
)
from car_credit.use_cases.list_vehicle_models import ListVehicleModels


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles/models",
    response_model=VehicleModelsResponseDTO,
    summary="List vehicle models",
    description="Distinct model names of the catalog, sorted alphabetically.",
)
def list_vehicle_models(
    use_case: ListVehicleModels = Depends(get_list_vehicle_models_use_case),
) -> VehicleModelsResponseDTO:
    return VehiclesMapper.to_models_response(use_case.execute())


@router.get(
    "/vehicles",
    response_model=VehiclesResponseDTO,
    summary="List configurations of a model",
    description="""
    Configurations (body, grade, engine, transmission) of a model, cheapest first.

    ## Example
    ```
    GET /v1/vehicles?model=2008
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Missing or blank model"}},
)
def list_vehicle_configurations(
    query: VehiclesQueryDTO = Depends(),
    use_case: ListVehicleConfigurations = Depends(get_list_vehicle_configurations_use_case),
) -> VehiclesResponseDTO:
    result = use_case.execute(ListVehicleConfigurationsRequest(model_name=query.model))
    return VehiclesMapper.to_vehicles_response(result)


@router.get(
    "/vehicles/{vehicle_code}",
    response_model=VehicleResponseDTO,
    summary="Get a configuration by model code",
    responses={404: {"model": ErrorResponse, "description": "Unknown model code"}},
)
def get_vehicle(
    vehicle_code: str,
    use_case: GetVehicleByCode = Depends(get_vehicle_by_code_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByCodeRequest(full_model_code=vehicle_code))
    return VehiclesMapper.to_vehicle_response(result.vehicle)
