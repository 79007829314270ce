"""Live inventory fetched from the dealer cars API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from car_credit.domain.errors import DataSourceUnavailableError
from car_credit.ports.inventory_feed import InventoryFeed

logger = logging.getLogger(__name__)

SOURCE_NAME = "Inventory API"


class HttpInventoryFeed(InventoryFeed):
    """Client for the inventory endpoint, queried by ``VariantCode``."""

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client

    def fetch(self, variant_code: str) -> Any:
        params = {"VariantCode": variant_code}
        try:
            if self._client is not None:
                response = self._client.get(self._url, params=params)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(self._url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as exc:
            raise self._unavailable(variant_code, f"timeout after {self._timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise self._unavailable(
                variant_code, f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise self._unavailable(variant_code, str(exc)) from exc
        except ValueError as exc:
            raise self._unavailable(variant_code, f"invalid payload: {exc}") from exc

    def _unavailable(self, variant_code: str, reason: str) -> DataSourceUnavailableError:
        logger.warning(
            "Inventory could not be fetched",
            extra={"variant_code": variant_code, "reason": reason},
        )
        return DataSourceUnavailableError(SOURCE_NAME, reason, variant_code=variant_code)
