"""
Pydantic схемы для работы с поездками (rides).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ListRidesQuery(BaseModel):
    """
    Параметры запроса списка поездок после санитизации.
    None означает "использовать значение по умолчанию".
    """
    page: Optional[int] = Field(None, description="Номер страницы, начиная с 1")
    size: Optional[int] = Field(None, description="Количество поездок на странице")


class RideCreateSchema(BaseModel):
    """
    Схема запроса для создания новой поездки.
    Строится только после того, как тело запроса прошло валидацию.
    """
    start_lat: int = Field(..., ge=-90, le=90, description="Широта точки подачи")
    start_long: int = Field(..., ge=-180, le=180, description="Долгота точки подачи")
    end_lat: int = Field(..., ge=-90, le=90, description="Широта точки назначения")
    end_long: int = Field(..., ge=-180, le=180, description="Долгота точки назначения")
    rider_name: str = Field(..., description="Имя пассажира")
    driver_name: str = Field(..., description="Имя водителя")
    driver_vehicle: str = Field(..., description="Транспортное средство водителя")


class RideResponseSchema(BaseModel):
    """
    Схема ответа с информацией о поездке.
    Наружу поля отдаются в camelCase (rowId, rideId, startLatitude, ...).
    """
    row_id: int = Field(..., description="Внутренний идентификатор строки")
    ride_id: str = Field(..., description="Уникальный идентификатор поездки")
    start_latitude: int
    start_longitude: int
    end_latitude: int
    end_longitude: int
    rider_name: str
    driver_name: str
    driver_vehicle: str
    created: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PaginatedRidesSchema(BaseModel):
    """
    Страница списка поездок.
    """
    total_items: int
    total_pages: int
    page: int
    size: int
    data: List[RideResponseSchema]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ErrorResponseSchema(BaseModel):
    error_code: str
    message: str
