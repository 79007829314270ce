"""Bank rate tables fetched from the supplier's credit API."""

from __future__ import annotations

import logging

import httpx

from car_credit.adapters.bank_rate_payload import parse_bank_rates
from car_credit.domain.errors import DataSourceUnavailableError
from car_credit.domain.rates import BankRates
from car_credit.ports.bank_rate_repository import BankRateRepository

logger = logging.getLogger(__name__)

SOURCE_NAME = "Bank rate API"


class HttpBankRateRepository(BankRateRepository):
    """
    Fetches the rate payload once and keeps the parsed tables.

    A failed fetch is not memoized; the next call tries again.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client
        self._rates: BankRates | None = None

    def get(self) -> BankRates:
        if self._rates is None:
            self._rates = self._fetch()
        return self._rates

    def _fetch(self) -> BankRates:
        try:
            if self._client is not None:
                response = self._client.get(self._url)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(self._url)
            response.raise_for_status()
            rates = parse_bank_rates(response.json())

        except httpx.TimeoutException as exc:
            raise self._unavailable(f"timeout after {self._timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise self._unavailable(f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise self._unavailable(str(exc)) from exc
        except ValueError as exc:
            raise self._unavailable(f"invalid payload: {exc}") from exc

        logger.info("Bank rate tables fetched", extra={"url": self._url})
        return rates

    def _unavailable(self, reason: str) -> DataSourceUnavailableError:
        logger.warning(
            "Bank rate tables could not be fetched",
            extra={"url": self._url, "reason": reason},
        )
        return DataSourceUnavailableError(SOURCE_NAME, reason, url=self._url)
