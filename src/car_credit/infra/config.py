"""Environment configuration for the external data sources."""

from __future__ import annotations

import os
from pathlib import Path

# Project root is three levels above src/car_credit/infra
DEFAULT_BANK_RATES_PATH = Path(__file__).resolve().parents[3] / "data" / "bank_rates.json"
DEFAULT_INVENTORY_API_URL = "https://carsapi.peugeot.ua/api/calculator"
DEFAULT_PHOTO_BASE_URL = "https://carsapi.peugeot.ua"
DEFAULT_STORE_BASE_URL = "https://cars.peugeot.ua"
DEFAULT_HTTP_TIMEOUT_SECONDS = 5.0


def bank_rates_url() -> str | None:
    """Supplier credit API; when set it takes precedence over the file."""
    return os.getenv("BANK_RATES_URL") or None


def bank_rates_path() -> Path:
    raw = os.getenv("BANK_RATES_PATH")
    return Path(raw) if raw else DEFAULT_BANK_RATES_PATH


def inventory_api_url() -> str:
    return os.getenv("INVENTORY_API_URL", DEFAULT_INVENTORY_API_URL)


def photo_base_url() -> str:
    return os.getenv("PHOTO_BASE_URL", DEFAULT_PHOTO_BASE_URL)


def store_base_url() -> str:
    return os.getenv("STORE_BASE_URL", DEFAULT_STORE_BASE_URL)


def http_timeout_seconds() -> float:
    raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_SECONDS

    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc
