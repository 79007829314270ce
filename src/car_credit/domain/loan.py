from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum

from car_credit.domain.errors import ValidationError


class ClientType(str, Enum):
    INDIVIDUAL = "individual"
    LEGAL = "legal"


class RepaymentSchedule(str, Enum):
    CLASSIC = "classic"
    ANNUITY = "annuity"


# ==============================================================================
# Parameter bounds
# ==============================================================================

MIN_LOAN_TERM = 12
LOAN_TERM_STEP = 12
MAX_LOAN_TERM = {
    ClientType.INDIVIDUAL: 84,
    ClientType.LEGAL: 60,
}

MAX_DOWN_PAYMENT_PERCENT = 90
DOWN_PAYMENT_PERCENT_STEP = 5
MIN_DOWN_PAYMENT_PERCENT = {
    ClientType.INDIVIDUAL: 20,
    ClientType.LEGAL: 30,
}

MAX_PRICE_ADJUSTMENT = Decimal("100000")
PRICE_ADJUSTMENT_STEP = Decimal("1000")


@dataclass(frozen=True, slots=True)
class LoanParameters:
    term_months: int
    down_payment_percent: int
    client_type: ClientType = ClientType.INDIVIDUAL
    repayment_schedule: RepaymentSchedule = RepaymentSchedule.CLASSIC

    def constrain_for_client_type(self) -> LoanParameters:
        """
        Apply the transitions forced by the client type.

        Legal entities only get the classic schedule, a term of at most
        60 months and a down payment of at least 30%. Individuals are
        returned unchanged.
        """
        if self.client_type is not ClientType.LEGAL:
            return self

        return replace(
            self,
            term_months=min(self.term_months, MAX_LOAN_TERM[ClientType.LEGAL]),
            down_payment_percent=max(
                self.down_payment_percent, MIN_DOWN_PAYMENT_PERCENT[ClientType.LEGAL]
            ),
            repayment_schedule=RepaymentSchedule.CLASSIC,
        )

    def validate(self) -> None:
        """
        Validate parameters against the bounds of the client type.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[dict[str, str]] = []

        max_term = MAX_LOAN_TERM[self.client_type]
        if not MIN_LOAN_TERM <= self.term_months <= max_term:
            errors.append(
                {
                    "field": "term_months",
                    "message": f"Must be between {MIN_LOAN_TERM} and {max_term}",
                    "code": "OUT_OF_RANGE",
                }
            )
        elif self.term_months % LOAN_TERM_STEP != 0:
            errors.append(
                {
                    "field": "term_months",
                    "message": f"Must be a multiple of {LOAN_TERM_STEP}",
                    "code": "INVALID_STEP",
                }
            )

        min_percent = MIN_DOWN_PAYMENT_PERCENT[self.client_type]
        if not min_percent <= self.down_payment_percent <= MAX_DOWN_PAYMENT_PERCENT:
            errors.append(
                {
                    "field": "down_payment_percent",
                    "message": f"Must be between {min_percent} and {MAX_DOWN_PAYMENT_PERCENT}",
                    "code": "OUT_OF_RANGE",
                }
            )
        elif self.down_payment_percent % DOWN_PAYMENT_PERCENT_STEP != 0:
            errors.append(
                {
                    "field": "down_payment_percent",
                    "message": f"Must be a multiple of {DOWN_PAYMENT_PERCENT_STEP}",
                    "code": "INVALID_STEP",
                }
            )

        if errors:
            raise ValidationError(errors=errors)


def validate_price_adjustment(adjustment: Decimal) -> None:
    """
    Raises:
        ValidationError: If the adjustment is outside 0..100,000 or off the 1,000 step
    """
    if not isinstance(adjustment, Decimal):
        raise ValidationError("price_adjustment must be Decimal (no floats past the boundary)")

    if adjustment < 0 or adjustment > MAX_PRICE_ADJUSTMENT:
        raise ValidationError(
            errors=[
                {
                    "field": "price_adjustment",
                    "message": f"Must be between 0 and {MAX_PRICE_ADJUSTMENT}",
                    "code": "OUT_OF_RANGE",
                }
            ]
        )
    if adjustment % PRICE_ADJUSTMENT_STEP != 0:
        raise ValidationError(
            errors=[
                {
                    "field": "price_adjustment",
                    "message": f"Must be a multiple of {PRICE_ADJUSTMENT_STEP}",
                    "code": "INVALID_STEP",
                }
            ]
        )


def round_half_up(amount: Decimal, exponent: Decimal) -> Decimal:
    """
    Quantize halves away from zero, for amounts of any magnitude.

    The context precision is widened to fit every integer digit plus the
    requested fraction digits, so quantize never signals InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() - exponent.as_tuple().exponent + 2)
        return amount.quantize(exponent, rounding=ROUND_HALF_UP)


def down_payment_amount(price: Decimal, down_payment_percent: int) -> Decimal:
    """Down payment rounded to whole currency units, halves away from zero."""
    return round_half_up(price * Decimal(down_payment_percent) / Decimal("100"), Decimal("1"))
