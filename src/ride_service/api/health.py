"""Проверка доступности сервиса."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Healthcheck"])


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Проверка доступности сервиса."""
    return "Healthy"
