from __future__ import annotations

from car_credit.domain.rates import BankRates
from car_credit.ports.bank_rate_repository import BankRateRepository


class InMemoryBankRateRepository(BankRateRepository):
    """Serves fixed rate tables; used by tests and local runs."""

    def __init__(self, rates: BankRates) -> None:
        self._rates = rates

    def get(self) -> BankRates:
        return self._rates
