"""Общие фикстуры: изолированная in-memory база на каждый тест."""

import pytest
from fastapi.testclient import TestClient

from ride_service.core.config import Settings
from ride_service.core.db import Database, build_schemas
from ride_service.main import create_app
from ride_service.repositories.ride_repository import RideRepository

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"

RIDE_PAYLOAD = {
    "start_long": 100,
    "start_lat": 70,
    "end_long": 110,
    "end_lat": 75,
    "rider_name": "Max",
    "driver_name": "John",
    "driver_vehicle": "Car",
}


@pytest.fixture
def ride_payload():
    return dict(RIDE_PAYLOAD)


@pytest.fixture
def test_settings():
    return Settings(database_url=IN_MEMORY_URL, _env_file=None)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    # Контекстный менеджер запускает lifespan: таблицы создаются при старте
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_rides(client):
    def _create(count, payload=None):
        created = []
        for _ in range(count):
            response = client.post("/rides", json=payload or RIDE_PAYLOAD)
            assert response.status_code == 201, response.text
            created.append(response.json())
        return created

    return _create


@pytest.fixture
async def database():
    db = Database(IN_MEMORY_URL)
    await build_schemas(db)
    yield db
    await db.dispose()


@pytest.fixture
def repository(database):
    return RideRepository(database)
