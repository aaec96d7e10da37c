"""
SQLAlchemy-модель для сущности Ride.
Имена колонок совпадают с внешним контрактом хранилища (таблица Rides).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from ride_service.core.db import Base


class Ride(Base):
    """
    Запись о поездке: точки подачи и назначения, пассажир, водитель, машина.
    row_id назначает хранилище, ride_id генерирует сервис.
    """
    __tablename__ = "Rides"
    # AUTOINCREMENT: row id никогда не переиспользуется
    __table_args__ = {"sqlite_autoincrement": True}

    row_id: Mapped[int] = mapped_column(
        "id", Integer, primary_key=True, autoincrement=True
    )
    ride_id: Mapped[str] = mapped_column(
        "rideID", String(32), unique=True, nullable=False, index=True
    )

    # Координаты целочисленные: валидатор пропускает только целые значения
    start_latitude: Mapped[int] = mapped_column("startLat", Integer, nullable=False)
    start_longitude: Mapped[int] = mapped_column("startLong", Integer, nullable=False)
    end_latitude: Mapped[int] = mapped_column("endLat", Integer, nullable=False)
    end_longitude: Mapped[int] = mapped_column("endLong", Integer, nullable=False)

    rider_name: Mapped[str] = mapped_column("riderName", Text, nullable=False)
    driver_name: Mapped[str] = mapped_column("driverName", Text, nullable=False)
    driver_vehicle: Mapped[str] = mapped_column("driverVehicle", Text, nullable=False)

    created: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Ride row_id={self.row_id} ride_id={self.ride_id}>"
