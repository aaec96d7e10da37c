"""
Репозиторий поездок.
Все запросы к таблице Rides собраны здесь, значения передаются только
как связанные параметры.
"""

import logging
from dataclasses import asdict, dataclass
from typing import List

from sqlalchemy import select

from ride_service.core.db import Database
from ride_service.models.ride import Ride

logger = logging.getLogger(__name__)


@dataclass
class RideValues:
    """Поля новой поездки, уже прошедшие санитизацию."""
    start_latitude: int
    start_longitude: int
    end_latitude: int
    end_longitude: int
    rider_name: str
    driver_name: str
    driver_vehicle: str
    ride_id: str


class RideRepository:
    """Асинхронные операции чтения и вставки для таблицы Rides."""

    def __init__(self, database: Database):
        self.database = database

    async def get_all_rides(self) -> List[Ride]:
        """Все поездки в порядке хранения (по row id)."""
        logger.info("Getting all rides from database")
        stmt = select(Ride).order_by(Ride.row_id)
        async with self.database.session_factory() as session:
            result = await session.scalars(stmt)
            return list(result.all())

    async def get_ride_by_id(self, ride_id: str) -> List[Ride]:
        """
        Поездки с указанным бизнес-идентификатором.
        Ожидается ноль или одна строка, но возвращается все, что вернуло хранилище.
        """
        logger.info(f"Getting a ride by id: {ride_id} from database")
        stmt = select(Ride).where(Ride.ride_id == ride_id)
        async with self.database.session_factory() as session:
            result = await session.scalars(stmt)
            return list(result.all())

    async def get_ride_by_row_id(self, row_id: int) -> List[Ride]:
        """Поездки с указанным внутренним идентификатором строки."""
        logger.info(f"Getting a ride by rowid: {row_id} from database")
        stmt = select(Ride).where(Ride.row_id == row_id)
        async with self.database.session_factory() as session:
            result = await session.scalars(stmt)
            return list(result.all())

    async def create_ride(self, values: RideValues) -> int:
        """
        Вставляет новую поездку.

        Returns:
            row id, который хранилище назначило новой строке.
        """
        logger.info("Creating a new ride in database")
        ride = Ride(**asdict(values))
        async with self.database.session_factory() as session:
            session.add(ride)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        row_id = ride.row_id
        logger.info(f"Ride {values.ride_id} stored with rowid {row_id}")
        return row_id
