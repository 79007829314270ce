from pydantic import BaseModel, ConfigDict, Field

from car_credit.domain.loan import ClientType, RepaymentSchedule

# Up to 999,999,999,999.99
MAX_AMOUNT_LENGTH = 15


class LoanOffersRequestDTO(BaseModel):
    """Request payload for calculating bank offers."""

    vehicle_code: str = Field(
        description="Full model code of the selected configuration",
        examples=["1PP2A5HMJ6B0A0E0"],
        min_length=1,
    )
    base_price: str | None = Field(
        default=None,
        description="Price of a selected inventory car as decimal string; "
        "replaces the catalog price when given",
        examples=["1150000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
        max_length=MAX_AMOUNT_LENGTH,
    )
    price_adjustment: str = Field(
        default="0",
        description="Amount added to the price (0 to 100000, step 1000) as decimal string",
        examples=["20000"],
        pattern=r"^\d+(\.\d{1,2})?$",
        max_length=MAX_AMOUNT_LENGTH,
    )
    term_months: int = Field(
        description="Loan term in months: 12 to 84 (individual) or 60 (legal), step 12",
        examples=[60],
    )
    down_payment_percent: int = Field(
        description="Down payment percent: 20 (individual) or 30 (legal) to 90, step 5",
        examples=[30],
    )
    client_type: ClientType = Field(
        default=ClientType.INDIVIDUAL,
        description="individual or legal",
    )
    repayment_schedule: RepaymentSchedule = Field(
        default=RepaymentSchedule.CLASSIC,
        description="classic or annuity; legal clients always get classic",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_code": "1PP2A5HMJ6B0A0E0",
                "price_adjustment": "0",
                "term_months": 60,
                "down_payment_percent": 30,
                "client_type": "individual",
                "repayment_schedule": "annuity",
            }
        }
    )


class OfferDTO(BaseModel):
    product: str = Field(description="Bank product key", examples=["privatbank24"])
    bank_name: str = Field(examples=["Privatbank 24"])
    monthly_payment: str = Field(
        description="Monthly payment as decimal string", examples=["18245.67"]
    )
    upfront_cost: str = Field(
        description="Down payment plus bank fee, pension fund levy and fixed fees",
        examples=["411583.33"],
    )
    rate: str = Field(description="Nominal annual rate in percent", examples=["3.9"])
    visible: bool = Field(description="Whether the offer applies to these parameters")
    computable: bool = Field(
        description="False when no rate tier exists for these parameters"
    )


class LoanOffersResponseDTO(BaseModel):
    """Offers with the parameters they were calculated for."""

    vehicle_code: str
    price: str = Field(description="Vehicle price including adjustment", examples=["1000000"])
    down_payment_amount: str = Field(examples=["300000"])
    term_months: int = Field(description="Effective term after client-type constraints")
    down_payment_percent: int = Field(
        description="Effective down payment percent after client-type constraints"
    )
    client_type: ClientType
    repayment_schedule: RepaymentSchedule = Field(
        description="Effective schedule after client-type constraints"
    )
    offers: list[OfferDTO]
