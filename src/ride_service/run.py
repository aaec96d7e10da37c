"""
Точка входа для запуска HTTP-сервиса поездок.
"""
import uvicorn

from ride_service.core.config import settings


def main():
    """Запускает uvicorn с настройками из окружения."""
    uvicorn.run(
        "ride_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
