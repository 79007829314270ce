from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class InventoryFeed(ABC):
    """
    Port for the live inventory of a vehicle configuration.

    The payload is returned as decoded JSON without any normalization;
    its shape is not under our control (see the InventoryCardMapper port).
    """

    @abstractmethod
    def fetch(self, variant_code: str) -> Any:
        """
        Raises:
            DataSourceUnavailableError: If the feed cannot be read
        """
        ...
