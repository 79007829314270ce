from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from car_credit.infra.db.models.base import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"

    full_model_code: Mapped[str] = mapped_column(String(64), primary_key=True)
    model_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    body_label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    grade_label: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # 9,999,999,999.99

    engine_label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    transmission: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    fuel_type: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    photo_link: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
