from fastapi import APIRouter, Depends

from car_credit.entrypoints.http.dependencies import get_list_inventory_cards_use_case
from car_credit.entrypoints.http.dtos.inventory import InventoryResponseDTO
from car_credit.entrypoints.http.error_responses import ErrorResponse
from car_credit.entrypoints.http.mappers.inventory_mapper import InventoryMapper
from car_credit.use_cases.list_inventory_cards import (
    ListInventoryCards,
    ListInventoryCardsRequest,
)


router = APIRouter(tags=["Inventory"])


@router.get(
    "/vehicles/{vehicle_code}/inventory",
    response_model=InventoryResponseDTO,
    summary="Live inventory of a configuration",
    description="""
    Cars in stock or in transit for a configuration, normalized from the
    dealer inventory feed. Missing fields are completed from the catalog.
    A card's price can be sent as `base_price` to `POST /v1/loan-offers`.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown model code"},
        503: {"model": ErrorResponse, "description": "Inventory feed unavailable"},
    },
)
def list_inventory_cards(
    vehicle_code: str,
    use_case: ListInventoryCards = Depends(get_list_inventory_cards_use_case),
) -> InventoryResponseDTO:
    result = use_case.execute(ListInventoryCardsRequest(vehicle_code=vehicle_code))
    return InventoryMapper.to_response(result)
