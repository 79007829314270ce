"""PostgreSQL implementation of VehicleCatalogRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from car_credit.domain.vehicle import Vehicle
from car_credit.infra.db.models.vehicle import VehicleRow
from car_credit.ports.vehicle_catalog_repository import VehicleCatalogRepository


class PostgresVehicleCatalogRepository(VehicleCatalogRepository):
    """
    PostgreSQL implementation of VehicleCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Model name matching is case-insensitive (LOWER on both sides)
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_models(self) -> list[str]:
        query = select(VehicleRow.model_name).distinct().order_by(VehicleRow.model_name)
        return list(self._session.execute(query).scalars().all())

    def list_by_model(self, model_name: str) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .where(func.lower(VehicleRow.model_name) == func.lower(model_name))
            .order_by(VehicleRow.price, VehicleRow.full_model_code)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_code(self, full_model_code: str) -> Vehicle | None:
        query = select(VehicleRow).where(VehicleRow.full_model_code == full_model_code)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity
        """
        return Vehicle(
            full_model_code=row.full_model_code,
            model_name=row.model_name,
            body_label=row.body_label,
            grade_label=row.grade_label,
            price=row.price,  # Already Decimal from NUMERIC column
            year=row.year,
            engine_label=row.engine_label,
            transmission=row.transmission,
            fuel_type=row.fuel_type,
            photo_link=row.photo_link,
        )
