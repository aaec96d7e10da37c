"""
Ошибки приложения и их преобразование в HTTP-ответы.
Тело ответа об ошибке: {"error_code": ..., "message": ...}.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "RESOURCE_NOT_FOUND"


class AppError(Exception):
    """Базовая ошибка, которая отдается клиенту в виде JSON-конверта."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: ErrorCode = ErrorCode.SERVER_ERROR
    default_message: str = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error_code": self.error_code.value, "message": self.message}


class ValidationError(AppError):
    """Входные данные запроса не прошли проверку."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid request"


class NotFoundError(AppError):
    """Запрос к хранилищу не вернул ни одной строки."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = ErrorCode.NOT_FOUND
    default_message = "Could not find any rides"


class ServerError(AppError):
    """Ошибка хранилища. Подробности клиенту не раскрываются."""


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.error_code.value}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.error_code.value}: {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Ошибки разбора параметров самим FastAPI тоже отдаем как 400 в общем конверте."""
    logger.warning(f"{request.method} {request.url.path} -> некорректный запрос: {exc.errors()}")
    error = ValidationError("Invalid request parameters")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Необработанная ошибка в {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=ServerError.status_code, content=ServerError().to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
