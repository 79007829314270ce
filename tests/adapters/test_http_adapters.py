"""
Tests for the httpx-backed adapters (bank rate API and inventory feed).

Requests are served by httpx.MockTransport, so no network is involved.
"""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest

from car_credit.adapters.http_bank_rate_repository import HttpBankRateRepository
from car_credit.adapters.http_inventory_feed import HttpInventoryFeed
from car_credit.domain.errors import DataSourceUnavailableError

RATES_URL = "https://credit.example.test/rates"
INVENTORY_URL = "https://cars.example.test/api/calculator"


def client_for(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def raise_timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


def raise_connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


# ==============================================================================
# Bank rate API
# ==============================================================================


def test_fetches_and_parses_rates() -> None:
    payload = {"agricole": {"individual": [[13.99, 14.99], [1, 1]]}}
    client = client_for(lambda request: httpx.Response(200, json=payload))

    rates = HttpBankRateRepository(RATES_URL, client=client).get()

    assert rates.agricole.individual == ((Decimal("13.99"), Decimal("14.99")),)


def test_rates_are_fetched_once() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    repo = HttpBankRateRepository(RATES_URL, client=client_for(handler))
    repo.get()
    repo.get()

    assert len(calls) == 1


def test_failed_fetch_is_retried_on_next_call() -> None:
    responses = iter([httpx.Response(503), httpx.Response(200, json={})])
    repo = HttpBankRateRepository(RATES_URL, client=client_for(lambda request: next(responses)))

    with pytest.raises(DataSourceUnavailableError):
        repo.get()

    assert repo.get().privatbank.individual == ()


def test_rates_http_error_status() -> None:
    repo = HttpBankRateRepository(
        RATES_URL, client=client_for(lambda request: httpx.Response(502))
    )

    with pytest.raises(DataSourceUnavailableError) as exc_info:
        repo.get()

    assert exc_info.value.message == "Bank rate API is unavailable: HTTP 502"
    assert exc_info.value.context["url"] == RATES_URL


def test_rates_timeout() -> None:
    repo = HttpBankRateRepository(RATES_URL, timeout=2.5, client=client_for(raise_timeout))

    with pytest.raises(DataSourceUnavailableError, match="timeout after 2.5s"):
        repo.get()


def test_rates_connection_error() -> None:
    repo = HttpBankRateRepository(RATES_URL, client=client_for(raise_connect_error))

    with pytest.raises(DataSourceUnavailableError, match="connection refused"):
        repo.get()


def test_rates_invalid_json() -> None:
    repo = HttpBankRateRepository(
        RATES_URL, client=client_for(lambda request: httpx.Response(200, content=b"<html>"))
    )

    with pytest.raises(DataSourceUnavailableError, match="invalid payload"):
        repo.get()


def test_rates_non_object_payload() -> None:
    repo = HttpBankRateRepository(
        RATES_URL, client=client_for(lambda request: httpx.Response(200, json=[1, 2]))
    )

    with pytest.raises(DataSourceUnavailableError, match="must be an object"):
        repo.get()


# ==============================================================================
# Inventory feed
# ==============================================================================


def test_inventory_is_queried_by_variant_code() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"vin": "VF3XXXXXXXX000001"}])

    feed = HttpInventoryFeed(INVENTORY_URL, client=client_for(handler))

    assert feed.fetch("1PP2A5HMJ6B0A0E0") == [{"vin": "VF3XXXXXXXX000001"}]
    assert seen[0].url.params["VariantCode"] == "1PP2A5HMJ6B0A0E0"
    assert str(seen[0].url).startswith(INVENTORY_URL)


def test_inventory_is_not_cached() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=[])

    feed = HttpInventoryFeed(INVENTORY_URL, client=client_for(handler))
    feed.fetch("A")
    feed.fetch("A")

    assert len(calls) == 2


def test_inventory_http_error_carries_variant_code() -> None:
    feed = HttpInventoryFeed(INVENTORY_URL, client=client_for(lambda request: httpx.Response(500)))

    with pytest.raises(DataSourceUnavailableError) as exc_info:
        feed.fetch("1PP2A5HMJ6B0A0E0")

    assert exc_info.value.to_dict() == {
        "message": "Inventory API is unavailable: HTTP 500",
        "code": "DATA_SOURCE_UNAVAILABLE",
        "source": "Inventory API",
        "variant_code": "1PP2A5HMJ6B0A0E0",
    }


def test_inventory_timeout() -> None:
    feed = HttpInventoryFeed(INVENTORY_URL, timeout=1.0, client=client_for(raise_timeout))

    with pytest.raises(DataSourceUnavailableError, match="timeout after 1.0s"):
        feed.fetch("A")


def test_inventory_invalid_json() -> None:
    feed = HttpInventoryFeed(
        INVENTORY_URL, client=client_for(lambda request: httpx.Response(200, content=b"oops"))
    )

    with pytest.raises(DataSourceUnavailableError, match="invalid payload"):
        feed.fetch("A")
