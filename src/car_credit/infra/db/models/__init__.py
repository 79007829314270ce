from car_credit.infra.db.models.base import Base
from car_credit.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
