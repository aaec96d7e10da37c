"""Модуль с общими зависимостями для API."""

from fastapi import Depends, Request

from ride_service.core.config import Settings
from ride_service.core.db import Database
from ride_service.repositories.ride_repository import RideRepository
from ride_service.services.ride_service import RideService


def get_database(request: Request) -> Database:
    """Хранилище, созданное при сборке приложения."""
    return request.app.state.database


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ride_repository(database: Database = Depends(get_database)) -> RideRepository:
    return RideRepository(database)


def get_ride_service(
    repository: RideRepository = Depends(get_ride_repository),
    settings: Settings = Depends(get_settings),
) -> RideService:
    return RideService(
        repository,
        default_page=settings.default_page,
        default_page_size=settings.default_page_size,
    )
