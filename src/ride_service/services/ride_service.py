"""
Сервис поездок: валидация -> санитизация -> хранилище -> форматирование.
Ошибки отдаются наружу в виде исключений из ride_service.core.errors.
"""

import logging
import secrets
import string
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError

from ride_service.core.errors import NotFoundError, ServerError, ValidationError
from ride_service.repositories.ride_repository import RideRepository, RideValues
from ride_service.schemas.ride import (
    ListRidesQuery,
    PaginatedRidesSchema,
    RideCreateSchema,
    RideResponseSchema,
)
from ride_service.services.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, paginate
from ride_service.services.sanitizer import strip_special_characters
from ride_service.services.validation import (
    ValidationResult,
    parse_positive_int,
    validate_create_ride_request,
    validate_get_ride_request,
    validate_list_rides_request,
)

logger = logging.getLogger(__name__)

RIDE_ID_ALPHABET = string.ascii_letters + string.digits
RIDE_ID_LENGTH = 10


def generate_ride_id() -> str:
    """Короткий случайный идентификатор поездки из букв и цифр."""
    return "".join(secrets.choice(RIDE_ID_ALPHABET) for _ in range(RIDE_ID_LENGTH))


def _raise_if_failed(validation: ValidationResult) -> None:
    if validation.failed:
        raise ValidationError(validation.message)


class RideService:
    """
    Бизнес-логика эндпоинтов /rides.
    Экземпляр создается на запрос и получает репозиторий через конструктор.
    """

    def __init__(
        self,
        repository: RideRepository,
        default_page: int = DEFAULT_PAGE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.repository = repository
        self.default_page = default_page
        self.default_page_size = default_page_size

    async def list_rides(self, query: Mapping[str, Any]) -> PaginatedRidesSchema:
        _raise_if_failed(validate_list_rides_request(query))

        # Отсутствующие или нечисловые параметры заменяются значениями по умолчанию
        params = ListRidesQuery(
            page=parse_positive_int(query.get("page")),
            size=parse_positive_int(query.get("size")),
        )

        try:
            rows = await self.repository.get_all_rides()
        except SQLAlchemyError as e:
            logger.error(f"Не удалось получить список поездок: {e}", exc_info=True)
            raise ServerError() from e

        if not rows:
            raise NotFoundError()

        page = paginate(
            rows,
            params.page,
            params.size,
            default_page=self.default_page,
            default_size=self.default_page_size,
        )
        return PaginatedRidesSchema(
            total_items=page.total_items,
            total_pages=page.total_pages,
            page=page.page,
            size=page.size,
            data=[RideResponseSchema.model_validate(row) for row in page.data],
        )

    async def get_ride(self, raw_ride_id: str) -> RideResponseSchema:
        _raise_if_failed(validate_get_ride_request(raw_ride_id))
        ride_id = strip_special_characters(raw_ride_id)

        try:
            rows = await self.repository.get_ride_by_id(ride_id)
        except SQLAlchemyError as e:
            logger.error(f"Не удалось получить поездку {ride_id}: {e}", exc_info=True)
            raise ServerError() from e

        if not rows:
            logger.warning(f"Поездка {ride_id} не найдена")
            raise NotFoundError()
        return RideResponseSchema.model_validate(rows[0])

    async def create_ride(self, body: Any) -> RideResponseSchema:
        _raise_if_failed(validate_create_ride_request(body))

        # Санитизация. Пустая после очистки строка повторно не проверяется.
        request = RideCreateSchema(
            start_lat=int(body["start_lat"]),
            start_long=int(body["start_long"]),
            end_lat=int(body["end_lat"]),
            end_long=int(body["end_long"]),
            rider_name=strip_special_characters(body["rider_name"]),
            driver_name=strip_special_characters(body["driver_name"]),
            driver_vehicle=strip_special_characters(body["driver_vehicle"]),
        )
        values = RideValues(
            start_latitude=request.start_lat,
            start_longitude=request.start_long,
            end_latitude=request.end_lat,
            end_longitude=request.end_long,
            rider_name=request.rider_name,
            driver_name=request.driver_name,
            driver_vehicle=request.driver_vehicle,
            ride_id=generate_ride_id(),
        )

        try:
            row_id = await self.repository.create_ride(values)
            rows = await self.repository.get_ride_by_row_id(row_id)
        except SQLAlchemyError as e:
            logger.error(f"Не удалось создать поездку: {e}", exc_info=True)
            raise ServerError() from e

        if not rows:
            # Только что вставленная строка должна находиться
            logger.error(f"Поездка с rowid {row_id} не найдена после вставки")
            raise ServerError()
        logger.info(f"Создана поездка {values.ride_id}")
        return RideResponseSchema.model_validate(rows[0])
