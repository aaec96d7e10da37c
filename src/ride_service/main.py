"""Главный файл приложения FastAPI."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request

from ride_service.api import health, rides
from ride_service.core.config import Settings, settings as default_settings
from ride_service.core.db import Database, build_schemas
from ride_service.core.errors import register_exception_handlers
from ride_service.core.logging_config import request_id_var, setup_logging

logger = logging.getLogger("ride_service.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер для управления жизненным циклом приложения.
    При старте создает таблицы, при остановке закрывает движок БД.
    """
    logger.info("Application startup...")
    database: Database = app.state.database
    await build_schemas(database)

    yield

    logger.info("Application shutdown...")
    await database.dispose()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Собирает приложение. Хранилище создается здесь и передается дальше
    через app.state, так что каждый вызов дает изолированный экземпляр.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level)

    app = FastAPI(
        title=app_settings.app_title,
        description="Сервис для записи и получения поездок",
        version=app_settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings.database_url, echo=app_settings.database_echo)

    # Middleware для установки request_id
    @app.middleware("http")
    async def add_request_id_middleware(request: Request, call_next):
        request_id = str(uuid.uuid4())
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response

    register_exception_handlers(app)

    # Подключаем роутеры API
    app.include_router(health.router)
    app.include_router(rides.router)

    return app


app = create_app()
