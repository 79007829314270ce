from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_credit.domain.errors import ValidationError
from car_credit.domain.loan import LoanParameters
from car_credit.domain.offers import Offer
from car_credit.entrypoints.http.dtos.loan_offers import (
    LoanOffersRequestDTO,
    LoanOffersResponseDTO,
    OfferDTO,
)
from car_credit.use_cases.calculate_loan_offers import (
    CalculateLoanOffersRequest,
    CalculateLoanOffersResponse,
)


class LoanOffersMapper:
    """Maps between REST DTOs and domain models for loan offers."""

    @staticmethod
    def to_domain_request(dto: LoanOffersRequestDTO) -> CalculateLoanOffersRequest:
        """
        Converts request DTO to the use case request.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If monetary strings are not valid decimals
        """
        errors = []

        try:
            price_adjustment = Decimal(dto.price_adjustment)
        except (InvalidOperation, ValueError):
            errors.append(
                {
                    "field": "price_adjustment",
                    "message": f"Must be a valid decimal: {dto.price_adjustment}",
                    "code": "INVALID_DECIMAL",
                }
            )
            price_adjustment = Decimal("0")  # Placeholder to continue validation

        base_price = None
        if dto.base_price is not None:
            try:
                base_price = Decimal(dto.base_price)
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": "base_price",
                        "message": f"Must be a valid decimal: {dto.base_price}",
                        "code": "INVALID_DECIMAL",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        return CalculateLoanOffersRequest(
            vehicle_code=dto.vehicle_code,
            parameters=LoanParameters(
                term_months=dto.term_months,
                down_payment_percent=dto.down_payment_percent,
                client_type=dto.client_type,
                repayment_schedule=dto.repayment_schedule,
            ),
            price_adjustment=price_adjustment,
            base_price=base_price,
        )

    @staticmethod
    def to_offer_response(offer: Offer) -> OfferDTO:
        return OfferDTO(
            product=offer.product.value,
            bank_name=offer.bank_name,
            monthly_payment=str(offer.monthly_payment),
            upfront_cost=str(offer.upfront_cost),
            rate=str(offer.rate),
            visible=offer.visible,
            computable=offer.computable,
        )

    @staticmethod
    def to_response(result: CalculateLoanOffersResponse) -> LoanOffersResponseDTO:
        """
        Converts the use case result to the response DTO.

        Decimal → string at the boundary; all five offers are returned,
        visibility is left to the client.
        """
        parameters = result.parameters
        return LoanOffersResponseDTO(
            vehicle_code=result.vehicle.full_model_code,
            price=str(result.price),
            down_payment_amount=str(result.down_payment_amount),
            term_months=parameters.term_months,
            down_payment_percent=parameters.down_payment_percent,
            client_type=parameters.client_type,
            repayment_schedule=parameters.repayment_schedule,
            offers=[LoanOffersMapper.to_offer_response(offer) for offer in result.offers],
        )
