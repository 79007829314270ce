from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from car_credit.domain.loan import ClientType


class Bank(str, Enum):
    PRIVATBANK = "privatbank"
    OSHADBANK = "oshadbank"
    AGRICOLE = "agricole"


# Rows are down-payment tiers, columns are term tiers; values are percent p.a.
RateMatrix = tuple[tuple[Decimal, ...], ...]

EMPTY_MATRIX: RateMatrix = ()


@dataclass(frozen=True, slots=True)
class BankRateTable:
    individual: RateMatrix = EMPTY_MATRIX
    legal: RateMatrix = EMPTY_MATRIX

    def matrix_for(self, client_type: ClientType) -> RateMatrix:
        if client_type is ClientType.LEGAL:
            return self.legal
        return self.individual


@dataclass(frozen=True, slots=True)
class BankRates:
    """
    Rate tables of every partner bank.

    Loaded once from the rate source and passed into each calculation.
    A bank missing from the source is represented by an empty table, so
    every lookup against it resolves to a zero rate.
    """

    privatbank: BankRateTable = field(default_factory=BankRateTable)
    oshadbank: BankRateTable = field(default_factory=BankRateTable)
    agricole: BankRateTable = field(default_factory=BankRateTable)

    def table(self, bank: Bank) -> BankRateTable:
        return getattr(self, bank.value)


@dataclass(frozen=True, slots=True)
class FeeSchedule:
    service_fee_rate: Decimal
    fixed_fee: Decimal = Decimal("0")


# Simplified approximation of the banks' real tiered fees.
FEE_SCHEDULES: dict[Bank, FeeSchedule] = {
    Bank.PRIVATBANK: FeeSchedule(service_fee_rate=Decimal("0.0695")),
    Bank.OSHADBANK: FeeSchedule(service_fee_rate=Decimal("0.065"), fixed_fee=Decimal("1090")),
    Bank.AGRICOLE: FeeSchedule(service_fee_rate=Decimal("0.065")),
}
