from fastapi import APIRouter, Depends

from car_credit.entrypoints.http.dependencies import get_calculate_loan_offers_use_case
from car_credit.entrypoints.http.dtos.loan_offers import (
    LoanOffersRequestDTO,
    LoanOffersResponseDTO,
)
from car_credit.entrypoints.http.error_responses import ErrorResponse
from car_credit.entrypoints.http.mappers.loan_offers_mapper import LoanOffersMapper
from car_credit.use_cases.calculate_loan_offers import CalculateLoanOffers


router = APIRouter(tags=["Loan offers"])


@router.post(
    "/loan-offers",
    response_model=LoanOffersResponseDTO,
    summary="Calculate bank offers",
    description="""
    Calculate the monthly payment and upfront cost of every partner bank
    product for a vehicle.

    ## Monetary Values
    - All monetary values are strings (e.g., "1000000.00")
    - Offer amounts are rounded to cents; rates are in percent per annum

    ## Parameters
    - Term: 12 to 84 months for individuals, 12 to 60 for legal entities, step 12
    - Down payment: 20% (individual) or 30% (legal) to 90%, step 5
    - Price adjustment: 0 to 100000, step 1000
    - Legal entities are moved to the classic schedule, a term of at most 60
      months and a down payment of at least 30% before validation; the
      response echoes the effective parameters

    ## Offers
    All five products are returned. `visible` tells whether a product applies
    to the parameters; `computable` is false when the bank has no rate for
    them (a zero payment then means "no offer", not a free loan).

    ## Example
    ```
    POST /v1/loan-offers
    {
        "vehicle_code": "1PP2A5HMJ6B0A0E0",
        "term_months": 60,
        "down_payment_percent": 30,
        "client_type": "individual",
        "repayment_schedule": "annuity"
    }
    ```
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown vehicle code"},
        422: {"model": ErrorResponse, "description": "Parameters out of bounds"},
        503: {"model": ErrorResponse, "description": "Bank rates unavailable"},
    },
)
def calculate_loan_offers(
    payload: LoanOffersRequestDTO,
    use_case: CalculateLoanOffers = Depends(get_calculate_loan_offers_use_case),
) -> LoanOffersResponseDTO:
    """Parse → map → execute → map → return."""
    request = LoanOffersMapper.to_domain_request(payload)
    result = use_case.execute(request)
    return LoanOffersMapper.to_response(result)
