from __future__ import annotations

from typing import Any

from car_credit.ports.inventory_feed import InventoryFeed


class InMemoryInventoryFeed(InventoryFeed):
    """Serves canned payloads keyed by variant code; unknown codes yield an empty list."""

    def __init__(self, payloads: dict[str, Any]) -> None:
        self._payloads = payloads

    def fetch(self, variant_code: str) -> Any:
        return self._payloads.get(variant_code, [])
