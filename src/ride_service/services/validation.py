"""
Проверка входящих запросов к /rides.

Функции ничего не знают о HTTP: они получают уже извлеченные параметры
(query, тело, path) и возвращают ValidationResult. Решение о формате
ответа принимает вызывающий код.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

LIST_RIDES_MESSAGE = "page and size must be integer > 0"
GET_RIDE_MESSAGE = "rideID must be a non empty alphanumeric"
LATITUDE_MESSAGE = "Start latitude and end latitude must be between -90 - 90 degrees"
LONGITUDE_MESSAGE = "Start longitude and end longitude must be between -180 - 180 degrees"
TEXT_FIELDS_MESSAGE = "riderName, driverName, driverVehicle must be String with length > 0"

LATITUDE_RANGE = (-90, 90)
LONGITUDE_RANGE = (-180, 180)


@dataclass(frozen=True)
class ValidationResult:
    failed: bool
    message: str = ""


PASSED = ValidationResult(failed=False)


def parse_positive_int(raw: Any) -> Optional[int]:
    """
    Разбирает строковый параметр запроса как целое число > 0.
    Допускает целые значения в записи с плавающей точкой ("2.0").

    Returns:
        Число или None, если значение не является целым положительным.
    """
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not number.is_integer() or number <= 0:
        return None
    return int(number)


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _is_integral(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _coordinates_valid(first: Any, second: Any, bounds: tuple) -> bool:
    low, high = bounds
    for value in (first, second):
        if value is None or not _is_integral(value):
            return False
        if not low <= value <= high:
            return False
    return True


def _text_valid(value: Any) -> bool:
    return isinstance(value, str) and len(value) >= 1


def validate_list_rides_request(query: Mapping[str, Any]) -> ValidationResult:
    """
    GET /rides: page и size проверяются, только если переданы оба.
    Если хотя бы одного нет, применяются значения по умолчанию.
    """
    page = query.get("page")
    size = query.get("size")
    if not (_is_present(page) and _is_present(size)):
        return PASSED
    if parse_positive_int(page) is None or parse_positive_int(size) is None:
        return ValidationResult(failed=True, message=LIST_RIDES_MESSAGE)
    return PASSED


def validate_get_ride_request(ride_id: Optional[str]) -> ValidationResult:
    """GET /rides/{id}: идентификатор не может быть пустым."""
    if ride_id is None or len(str(ride_id)) == 0:
        return ValidationResult(failed=True, message=GET_RIDE_MESSAGE)
    return PASSED


def validate_create_ride_request(body: Any) -> ValidationResult:
    """
    POST /rides: проверки идут строго по порядку
    широта -> долгота -> текстовые поля, первая неудачная определяет сообщение.
    """
    if not isinstance(body, Mapping):
        body = {}

    if not _coordinates_valid(body.get("start_lat"), body.get("end_lat"), LATITUDE_RANGE):
        return ValidationResult(failed=True, message=LATITUDE_MESSAGE)

    if not _coordinates_valid(body.get("start_long"), body.get("end_long"), LONGITUDE_RANGE):
        return ValidationResult(failed=True, message=LONGITUDE_MESSAGE)

    text_fields = (body.get("rider_name"), body.get("driver_name"), body.get("driver_vehicle"))
    if not all(_text_valid(value) for value in text_fields):
        return ValidationResult(failed=True, message=TEXT_FIELDS_MESSAGE)

    return PASSED
