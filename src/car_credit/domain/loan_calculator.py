"""Loan offer engine.

Pure functions mapping (vehicle price, loan parameters, bank rate tables)
to the offer of every partner bank product. Nothing here raises for
arithmetic reasons: missing rate tiers, empty tables and degenerate
terms all resolve to zero amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from car_credit.domain.loan import (
    ClientType,
    LoanParameters,
    RepaymentSchedule,
    down_payment_amount,
    round_half_up,
)
from car_credit.domain.offers import BankProduct, Offer, OfferSet
from car_credit.domain.rates import FEE_SCHEDULES, Bank, BankRates, RateMatrix

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")
CENTS = Decimal("0.01")

# Tiers past the last column/row reuse it (84 months, 70%+ down payment).
MAX_TERM_TIER = 6
MAX_DOWN_PAYMENT_TIER = 6

# Classic schedule interest accrues on a 360/365 day-count basis.
BANK_YEAR_DAYS = Decimal("360")
CALENDAR_YEAR_DAYS = Decimal("365")

# Pension fund levy tiers; the levy base is the price net of 20% VAT.
LEVY_TIER_LOW = Decimal("499620")
LEVY_TIER_HIGH = Decimal("878120")
VAT_DIVISOR = Decimal("1.2")

PROMO_RATE_24 = Decimal("3.9")
PROMO_RATE_36 = Decimal("0.01")
PROMO_TERM_MONTHS = 60
AGRICOLE_MAX_TERM_MONTHS = 60


# ==============================================================================
# Rate lookup
# ==============================================================================


def term_tier(term_months: int) -> int:
    return min(term_months // 12 - 1, MAX_TERM_TIER)


def down_payment_tier(down_payment_percent: int) -> int:
    return max(0, min(down_payment_percent // 10 - 1, MAX_DOWN_PAYMENT_TIER))


def lookup_rate(matrix: RateMatrix, down_payment_percent: int, term_months: int) -> Decimal:
    """
    Rate (percent p.a.) at the tiers derived from the parameters.

    Returns 0 when the matrix has no row or cell at those tiers; a zero
    rate tells the caller there is no offer for these parameters.
    """
    row_index = down_payment_tier(down_payment_percent)
    column_index = term_tier(term_months)

    if column_index < 0 or row_index >= len(matrix):
        return ZERO

    row = matrix[row_index]
    if column_index >= len(row):
        return ZERO

    return row[column_index]


# ==============================================================================
# Payments
# ==============================================================================


def calculate_payment(
    rate: Decimal,
    principal: Decimal,
    term_months: int,
    schedule: RepaymentSchedule,
) -> Decimal:
    """
    Monthly payment for the given schedule, at full precision.

    Classic spreads the total interest evenly over the term:
        principal * (1 + rate/100 * term/12 * 360/365) / term

    Annuity is the equal-installment amortization:
        m * principal / (1 - (1 + m)^-term), with m = rate/100/12

    A zero rate with a positive principal yields 0 (no rate tier), as does
    a non-positive term.
    """
    if rate == 0 and principal > 0:
        return ZERO
    if term_months <= 0:
        return ZERO

    term = Decimal(term_months)

    if schedule is RepaymentSchedule.CLASSIC:
        interest_factor = (
            rate / HUNDRED * term / MONTHS_PER_YEAR * BANK_YEAR_DAYS / CALENDAR_YEAR_DAYS
        )
        return principal * (ONE + interest_factor) / term

    monthly_rate = rate / HUNDRED / MONTHS_PER_YEAR
    denominator = ONE - (ONE + monthly_rate) ** -term_months
    if denominator == 0:
        return ZERO

    return monthly_rate * principal / denominator


# ==============================================================================
# Upfront cost
# ==============================================================================


def levy_rate(price: Decimal) -> Decimal:
    """Pension fund levy in percent; 878,120 itself already pays 5%."""
    if price <= LEVY_TIER_LOW:
        return Decimal("3")
    if price < LEVY_TIER_HIGH:
        return Decimal("4")
    return Decimal("5")


def calculate_upfront_cost(bank: Bank, price: Decimal, down_payment: Decimal) -> Decimal:
    fees = FEE_SCHEDULES[bank]
    levy = price / VAT_DIVISOR * levy_rate(price) / HUNDRED
    return down_payment + price * fees.service_fee_rate + levy + fees.fixed_fee


# ==============================================================================
# Products and eligibility
# ==============================================================================


def _always(parameters: LoanParameters, monthly_payment: Decimal) -> bool:
    return True


def _agricole_term(parameters: LoanParameters, monthly_payment: Decimal) -> bool:
    return parameters.term_months <= AGRICOLE_MAX_TERM_MONTHS


def _individual_with_payment(parameters: LoanParameters, monthly_payment: Decimal) -> bool:
    return parameters.client_type is ClientType.INDIVIDUAL and monthly_payment > 0


def _promotional_window(parameters: LoanParameters, monthly_payment: Decimal) -> bool:
    return (
        parameters.term_months == PROMO_TERM_MONTHS
        and parameters.client_type is ClientType.INDIVIDUAL
        and parameters.repayment_schedule is RepaymentSchedule.ANNUITY
    )


@dataclass(frozen=True, slots=True)
class ProductSpec:
    product: BankProduct
    bank: Bank
    bank_name: str
    is_visible: Callable[[LoanParameters, Decimal], bool]
    # Promotional products bypass the rate table and always amortize.
    fixed_rate: Decimal | None = None
    # Rate table used regardless of the client type, when set
    rate_client_type: ClientType | None = None


PRODUCTS: tuple[ProductSpec, ...] = (
    ProductSpec(BankProduct.OSCHADBANK, Bank.OSHADBANK, "Oschadbank", _always),
    ProductSpec(BankProduct.AGRICOLE, Bank.AGRICOLE, "Agricole", _agricole_term),
    ProductSpec(
        BankProduct.PRIVATBANK,
        Bank.PRIVATBANK,
        "Privatbank",
        _individual_with_payment,
        rate_client_type=ClientType.INDIVIDUAL,
    ),
    ProductSpec(
        BankProduct.PRIVATBANK_24,
        Bank.PRIVATBANK,
        "Privatbank 24",
        _promotional_window,
        fixed_rate=PROMO_RATE_24,
    ),
    ProductSpec(
        BankProduct.PRIVATBANK_36,
        Bank.PRIVATBANK,
        "Privatbank 36",
        _promotional_window,
        fixed_rate=PROMO_RATE_36,
    ),
)


def _to_cents(amount: Decimal) -> Decimal:
    return round_half_up(amount, CENTS)


def assemble_offers(price: Decimal, parameters: LoanParameters, rates: BankRates) -> OfferSet:
    """
    Compute the complete offer set for a vehicle price.

    The result depends only on the arguments; calling again with equal
    arguments gives an equal offer set.
    """
    down_payment = down_payment_amount(price, parameters.down_payment_percent)
    principal = price - down_payment

    offers = []
    for spec in PRODUCTS:
        if spec.fixed_rate is not None:
            rate = spec.fixed_rate
            schedule = RepaymentSchedule.ANNUITY
        else:
            client_type = spec.rate_client_type or parameters.client_type
            matrix = rates.table(spec.bank).matrix_for(client_type)
            rate = lookup_rate(matrix, parameters.down_payment_percent, parameters.term_months)
            schedule = parameters.repayment_schedule

        monthly_payment = calculate_payment(rate, principal, parameters.term_months, schedule)

        offers.append(
            Offer(
                product=spec.product,
                bank_name=spec.bank_name,
                monthly_payment=_to_cents(monthly_payment),
                upfront_cost=_to_cents(calculate_upfront_cost(spec.bank, price, down_payment)),
                rate=rate,
                visible=spec.is_visible(parameters, monthly_payment),
                computable=not (rate == 0 and principal > 0),
            )
        )

    return OfferSet(offers=tuple(offers))
