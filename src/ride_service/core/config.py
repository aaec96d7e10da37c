"""
Конфигурация приложения.
Значения читаются из переменных окружения с префиксом RIDES_ и из файла .env.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки сервиса поездок."""

    model_config = SettingsConfigDict(
        env_prefix="RIDES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = "Ride Service"
    app_version: str = "0.1.0"

    # База данных
    database_url: str = "sqlite+aiosqlite:///./rides.db"
    database_echo: bool = False

    # Логирование
    log_level: str = "INFO"

    # Пагинация
    default_page: int = 1
    default_page_size: int = 10

    # HTTP-сервер
    host: str = "0.0.0.0"
    port: int = 8010


settings = Settings()
