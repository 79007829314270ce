from pydantic import BaseModel, Field


class VehicleResponseDTO(BaseModel):
    code: str = Field(description="Full model code", examples=["1PP2A5HMJ6B0A0E0"])
    model: str = Field(examples=["2008"])
    label: str = Field(
        description="Body, grade, year, engine and transmission",
        examples=["SUV Active 2024 1.2 PureTech AT8"],
    )
    body: str
    grade: str
    year: int
    engine: str
    transmission: str
    fuel_type: str
    price: str = Field(description="Catalog price as decimal string", examples=["1099900.00"])
    photo_link: str


class VehicleModelsResponseDTO(BaseModel):
    models: list[str]


class VehiclesQueryDTO(BaseModel):
    """Query parameters for listing configurations of a model."""

    model: str = Field(
        description="Model name (case-insensitive exact match)",
        examples=["2008"],
        min_length=1,
    )


class VehiclesResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
