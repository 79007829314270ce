from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from car_credit.domain.errors import NotFoundError, ValidationError
from car_credit.domain.loan import LoanParameters, down_payment_amount, validate_price_adjustment
from car_credit.domain.loan_calculator import assemble_offers
from car_credit.domain.offers import OfferSet
from car_credit.domain.vehicle import Vehicle
from car_credit.ports.bank_rate_repository import BankRateRepository
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateLoanOffersRequest:
    vehicle_code: str
    parameters: LoanParameters
    price_adjustment: Decimal = Decimal("0")
    # Price of a selected inventory car; replaces the catalog price when set
    base_price: Decimal | None = None


@dataclass(frozen=True, slots=True)
class CalculateLoanOffersResponse:
    vehicle: Vehicle
    price: Decimal
    down_payment_amount: Decimal
    parameters: LoanParameters  # after client-type constraints
    offers: OfferSet


class CalculateLoanOffers:
    """
    Compute every bank's offer for a vehicle and a set of loan parameters.

    Responsibilities:
    - Apply the client-type transitions (legal entities: classic schedule,
      term <= 60, down payment >= 30%) before validating
    - Validate parameter bounds; the offer engine itself never rejects input
    - Resolve the vehicle price (catalog or inventory card, plus adjustment)
    - Load rate tables and delegate to the offer engine
    """

    def __init__(
        self,
        vehicle_catalog_repository: VehicleCatalogRepository,
        bank_rate_repository: BankRateRepository,
    ) -> None:
        self._vehicles = vehicle_catalog_repository
        self._rates = bank_rate_repository

    def execute(self, request: CalculateLoanOffersRequest) -> CalculateLoanOffersResponse:
        """
        Raises:
            ValidationError: If parameters, adjustment or base price are invalid
            NotFoundError: If the vehicle code is unknown
            DataSourceUnavailableError: If rate tables cannot be loaded
        """
        parameters = request.parameters.constrain_for_client_type()
        parameters.validate()
        validate_price_adjustment(request.price_adjustment)

        if request.base_price is not None and request.base_price < 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "base_price",
                        "message": "Must be >= 0",
                        "code": "OUT_OF_RANGE",
                    }
                ]
            )

        vehicle = self._vehicles.get_by_code(request.vehicle_code)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_code)

        rates = self._rates.get()

        base_price = request.base_price if request.base_price is not None else vehicle.price
        price = base_price + request.price_adjustment
        offers = assemble_offers(price, parameters, rates)

        logger.debug(
            "Loan offers calculated",
            extra={
                "vehicle_code": vehicle.full_model_code,
                "price": str(price),
                "term_months": parameters.term_months,
                "down_payment_percent": parameters.down_payment_percent,
                "client_type": parameters.client_type.value,
                "repayment_schedule": parameters.repayment_schedule.value,
                "visible_offers": [offer.product.value for offer in offers.visible()],
            },
        )

        return CalculateLoanOffersResponse(
            vehicle=vehicle,
            price=price,
            down_payment_amount=down_payment_amount(price, parameters.down_payment_percent),
            parameters=parameters,
            offers=offers,
        )
