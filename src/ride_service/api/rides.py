"""API эндпоинты для поездок."""

import json
import logging

from fastapi import APIRouter, Depends, Request, status

from ride_service.api.dependencies import get_ride_service
from ride_service.core.errors import ValidationError
from ride_service.schemas.ride import (
    ErrorResponseSchema,
    PaginatedRidesSchema,
    RideResponseSchema,
)
from ride_service.services.ride_service import RideService

router = APIRouter(prefix="/rides", tags=["Rides"])
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseSchema},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponseSchema},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponseSchema},
}


@router.get("", response_model=PaginatedRidesSchema, responses=_ERROR_RESPONSES)
async def get_rides(
    request: Request,
    service: RideService = Depends(get_ride_service),
):
    """
    Список поездок с пагинацией.
    Параметры page и size необязательны (по умолчанию 1 и 10).
    """
    logger.info("[GET] /rides is hit")
    return await service.list_rides(request.query_params)


@router.get("/{ride_id}", response_model=RideResponseSchema, responses=_ERROR_RESPONSES)
async def get_ride_by_id(
    ride_id: str,
    service: RideService = Depends(get_ride_service),
):
    """Поездка по ее идентификатору rideId."""
    logger.info("[GET] /rides/{id} is hit")
    return await service.get_ride(ride_id)


@router.post(
    "",
    response_model=RideResponseSchema,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_ride(
    request: Request,
    service: RideService = Depends(get_ride_service),
):
    """
    Создание новой поездки.
    Тело разбирается вручную, чтобы ошибки формата отдавались в едином конверте.
    """
    logger.info("[POST] /rides is hit")
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Некорректное JSON-тело запроса: {e}")
        raise ValidationError("Request body must be a valid JSON object") from e
    return await service.create_ride(body)
