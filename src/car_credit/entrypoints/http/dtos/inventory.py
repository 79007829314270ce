from pydantic import BaseModel, Field


class InventoryCardDTO(BaseModel):
    card_key: str = Field(description="Stable key: variant code and feed id")
    variant_code: str
    model: str
    grade: str
    engine: str
    transmission: str
    fuel_type: str
    status: str = Field(examples=["В наявності"])
    photo_url: str
    store_url: str = Field(description="Dealer page of the car; empty without VIN")
    price: str = Field(description="Car price as decimal string")
    vin: str
    year: str
    title: str
    co2: str | None = None
    consumption: str | None = None


class InventoryResponseDTO(BaseModel):
    vehicle_code: str
    cards: list[InventoryCardDTO]
