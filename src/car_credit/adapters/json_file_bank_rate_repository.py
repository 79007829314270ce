"""Bank rate tables read from a JSON export of the supplier payload."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from car_credit.adapters.bank_rate_payload import parse_bank_rates
from car_credit.domain.errors import DataSourceUnavailableError
from car_credit.domain.rates import BankRates
from car_credit.ports.bank_rate_repository import BankRateRepository

logger = logging.getLogger(__name__)


class JsonFileBankRateRepository(BankRateRepository):
    """
    Reads the rate payload from a file on first use and keeps the parsed
    tables for the lifetime of the instance.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._rates: BankRates | None = None

    def get(self) -> BankRates:
        if self._rates is None:
            self._rates = self._load()
        return self._rates

    def _load(self) -> BankRates:
        try:
            with self._path.open(encoding="utf-8") as fh:
                payload = json.load(fh)
            rates = parse_bank_rates(payload)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.warning(
                "Bank rate file could not be loaded",
                extra={"path": str(self._path), "error": str(exc)},
            )
            raise DataSourceUnavailableError("Bank rate file", str(exc)) from exc

        logger.info("Bank rate tables loaded", extra={"path": str(self._path)})
        return rates
