from __future__ import annotations

from abc import ABC, abstractmethod

from car_credit.domain.rates import BankRates


class BankRateRepository(ABC):
    """
    Port for the partner banks' rate tables.

    Implementations parse the supplier payload into numbers (non-numeric or
    empty cells become 0) and may memoize the result for the lifetime of
    the process.

    Raises:
        DataSourceUnavailableError: If the tables cannot be read
    """

    @abstractmethod
    def get(self) -> BankRates: ...
