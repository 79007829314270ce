from __future__ import annotations

from abc import ABC, abstractmethod

from car_credit.domain.vehicle import Vehicle


class VehicleCatalogRepository(ABC):
    """
    Port for vehicle catalog data access.

    The catalog is the list of configurations a loan can be calculated for.
    Model names are returned sorted; configurations of a model are returned
    ordered by price, cheapest first.
    """

    @abstractmethod
    def list_models(self) -> list[str]:
        """Distinct model names present in the catalog."""
        ...

    @abstractmethod
    def list_by_model(self, model_name: str) -> list[Vehicle]:
        """
        Configurations of a model (case-insensitive exact match).

        Returns:
            Matching vehicles, empty if the model is unknown
        """
        ...

    @abstractmethod
    def get_by_code(self, full_model_code: str) -> Vehicle | None:
        """
        Args:
            full_model_code: Configuration key

        Returns:
            Vehicle if found, None otherwise
        """
        ...
