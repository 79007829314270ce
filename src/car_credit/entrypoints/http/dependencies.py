"""
Dependency injection for FastAPI routes.

Database sessions are per-request, never cached. The rate source, the
inventory feed and the card mapper hold no per-request state and are
process-wide singletons (lru_cache); the rate source memoizes the parsed
tables after its first successful load.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_credit.adapters.http_bank_rate_repository import HttpBankRateRepository
from car_credit.adapters.http_inventory_feed import HttpInventoryFeed
from car_credit.adapters.inventory_card_mapper import FeedInventoryCardMapper
from car_credit.adapters.json_file_bank_rate_repository import JsonFileBankRateRepository
from car_credit.adapters.postgres_vehicle_catalog_repository import (
    PostgresVehicleCatalogRepository,
)
from car_credit.infra import config
from car_credit.infra.db.session import get_session
from car_credit.ports.bank_rate_repository import BankRateRepository
from car_credit.ports.inventory_card_mapper import InventoryCardMapper
from car_credit.ports.inventory_feed import InventoryFeed
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository
from car_credit.use_cases.calculate_loan_offers import CalculateLoanOffers
from car_credit.use_cases.get_vehicle_by_code import GetVehicleByCode
from car_credit.use_cases.list_inventory_cards import ListInventoryCards
from car_credit.use_cases.list_vehicle_configurations import ListVehicleConfigurations
from car_credit.use_cases.list_vehicle_models import ListVehicleModels


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and closes the session when the request ends.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_vehicle_catalog(db: Session = Depends(get_db)) -> VehicleCatalogRepository:
    return PostgresVehicleCatalogRepository(session=db)


@lru_cache
def get_bank_rate_repository() -> BankRateRepository:
    """
    Rate source chosen by configuration: the supplier API when
    BANK_RATES_URL is set, the JSON file at BANK_RATES_PATH otherwise.
    """
    url = config.bank_rates_url()
    if url:
        return HttpBankRateRepository(url=url, timeout=config.http_timeout_seconds())
    return JsonFileBankRateRepository(path=config.bank_rates_path())


@lru_cache
def get_inventory_feed() -> InventoryFeed:
    return HttpInventoryFeed(
        url=config.inventory_api_url(),
        timeout=config.http_timeout_seconds(),
    )


@lru_cache
def get_inventory_card_mapper() -> InventoryCardMapper:
    return FeedInventoryCardMapper(
        photo_base_url=config.photo_base_url(),
        store_base_url=config.store_base_url(),
    )


def get_list_vehicle_models_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> ListVehicleModels:
    return ListVehicleModels(vehicle_catalog_repository=catalog)


def get_list_vehicle_configurations_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> ListVehicleConfigurations:
    return ListVehicleConfigurations(vehicle_catalog_repository=catalog)


def get_vehicle_by_code_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> GetVehicleByCode:
    return GetVehicleByCode(vehicle_catalog_repository=catalog)


def get_calculate_loan_offers_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
    rates: BankRateRepository = Depends(get_bank_rate_repository),
) -> CalculateLoanOffers:
    """
    Factory for the offer calculation, called per request.

    Args:
        catalog: Per-request catalog repository (fresh session)
        rates: Process-wide rate source

    Returns:
        CalculateLoanOffers: Configured use case instance
    """
    return CalculateLoanOffers(vehicle_catalog_repository=catalog, bank_rate_repository=rates)


def get_list_inventory_cards_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
    feed: InventoryFeed = Depends(get_inventory_feed),
    mapper: InventoryCardMapper = Depends(get_inventory_card_mapper),
) -> ListInventoryCards:
    return ListInventoryCards(
        vehicle_catalog_repository=catalog,
        inventory_feed=feed,
        card_mapper=mapper,
    )
