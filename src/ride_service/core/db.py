"""
Подключение к реляционному хранилищу и построение схемы.
Объект Database явно передается в репозитории вместо глобального соединения.
"""

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Базовый класс для всех SQLAlchemy-моделей."""


def _is_in_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """
    Обертка над async-движком SQLAlchemy и фабрикой сессий.
    Один экземпляр живет все время работы приложения.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo}
        if _is_in_memory_sqlite(url):
            # In-memory SQLite живет, пока открыто соединение, поэтому держим одно
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed.")


async def build_schemas(database: Database) -> Database:
    """
    Создает все таблицы, объявленные в моделях.
    Существующие таблицы не трогает.
    """
    # Регистрируем модели в метаданных
    from ride_service import models  # noqa: F401

    logger.info("Создание схемы базы данных")
    for table_name in Base.metadata.tables:
        logger.info(f"Создание таблицы {table_name}")

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return database
