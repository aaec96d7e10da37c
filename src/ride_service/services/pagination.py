"""Постраничная выдача уже загруженного списка строк."""

import logging
import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass
class Page(Generic[T]):
    total_items: int
    total_pages: int
    page: int
    size: int
    data: List[T]


def paginate(
    rows: Sequence[T],
    page: Optional[int] = None,
    size: Optional[int] = None,
    default_page: int = DEFAULT_PAGE,
    default_size: int = DEFAULT_PAGE_SIZE,
) -> Page[T]:
    """
    Возвращает одну страницу из rows, порядок строк не меняется.

    Номер страницы больше последней приводится к последней странице.
    Поле size в результате равно min(запрошенный размер, число строк).

    Args:
        rows: Все строки в порядке, в котором их вернуло хранилище.
        page: Номер страницы (с 1). None - значение по умолчанию.
        size: Размер страницы (> 0). None - значение по умолчанию.
    """
    page = default_page if page is None else page
    size = default_size if size is None else size

    total_items = len(rows)
    total_pages = math.ceil(total_items / size)

    # Номер страницы не может выходить за последнюю страницу
    if page > total_pages:
        page = total_pages

    start_index = (page - 1) * size
    end_index = min(start_index + size, total_items)
    logger.debug(
        f"page: {page} size: {size} startIndex: {start_index} endIndex: {end_index} "
        f"totalPages: {total_pages} totalItems: {total_items}"
    )

    return Page(
        total_items=total_items,
        total_pages=total_pages,
        page=page,
        size=min(size, total_items),
        data=list(rows[start_index:end_index]),
    )
