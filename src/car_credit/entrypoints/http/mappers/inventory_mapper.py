from __future__ import annotations

from car_credit.domain.vehicle import InventoryCard
from car_credit.entrypoints.http.dtos.inventory import InventoryCardDTO, InventoryResponseDTO
from car_credit.use_cases.list_inventory_cards import ListInventoryCardsResponse


class InventoryMapper:
    @staticmethod
    def to_card_response(card: InventoryCard) -> InventoryCardDTO:
        return InventoryCardDTO(
            card_key=card.card_key,
            variant_code=card.variant_code,
            model=card.model_name,
            grade=card.grade_label,
            engine=card.engine_label,
            transmission=card.transmission,
            fuel_type=card.fuel_type,
            status=card.status,
            photo_url=card.photo_url,
            store_url=card.store_url,
            price=str(card.price),
            vin=card.vin,
            year=card.year,
            title=card.title,
            co2=card.co2,
            consumption=card.consumption,
        )

    @staticmethod
    def to_response(result: ListInventoryCardsResponse) -> InventoryResponseDTO:
        return InventoryResponseDTO(
            vehicle_code=result.vehicle.full_model_code,
            cards=[InventoryMapper.to_card_response(card) for card in result.cards],
        )
