"""
Ordering — Multi-Column Sort Orderings

Ordering — последовательность пар (column, SortDirection), от старшего ключа
к младшему. Модуль предоставляет:
- Сериализацию в query-параметры: {"ordering": "name-ASC;age-DESC"}
- Разбор query-параметра обратно в Ordering
- Построение Comparator по Ordering (then-цепочка, reverse для DESC)
"""

import logging
from typing import Callable, Final, Mapping, Sequence, Tuple, TypeVar

from src.core.ordering.comparator import EQ, Comparator, make_comparator
from src.core.ordering.comparators import Comparable, comparing
from src.core.ordering.sort_direction import (
    ORDERINGS_BY_SORT_DIRECTION,
    SortDirection,
)

logger = logging.getLogger(__name__)

ColumnT = TypeVar("ColumnT")
T = TypeVar("T")

Ordering = Sequence[Tuple[ColumnT, SortDirection]]

# =============================================================================
# ФОРМАТ QUERY-ПАРАМЕТРА
# =============================================================================

# Имя query-параметра
ORDERING_PARAM: Final[str] = "ordering"

# Разделитель ключей сортировки
ORDERING_SEPARATOR: Final[str] = ";"

# Разделитель колонки и направления внутри ключа
COLUMN_DIRECTION_SEPARATOR: Final[str] = "-"

_SORT_DIRECTIONS_BY_TOKEN: Final[dict[str, SortDirection]] = {
    token: direction for direction, token in ORDERINGS_BY_SORT_DIRECTION.items()
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrderingParseError(ValueError):
    """Невалидное значение query-параметра ordering."""

    pass


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def get_params_for_ordering(
    ordering: Ordering[ColumnT],
    serialize_column: Callable[[ColumnT], str],
) -> dict[str, str]:
    """
    Query-параметры для GET-запроса с сортировкой по ordering.

    Args:
        ordering: Ключи сортировки
        serialize_column: Сериализация колонки в строку

    Returns:
        {} для пустого ordering, иначе {"ordering": "col-ASC;col2-DESC"}

    Examples:
        >>> get_params_for_ordering([("name", SortDirection.ASCENDING)], str)
        {'ordering': 'name-ASC'}
        >>> get_params_for_ordering([], str)
        {}
    """
    if len(ordering) == 0:
        return {}

    value = ORDERING_SEPARATOR.join(
        f"{serialize_column(column)}{COLUMN_DIRECTION_SEPARATOR}"
        f"{ORDERINGS_BY_SORT_DIRECTION[SortDirection(direction)]}"
        for column, direction in ordering
    )

    return {ORDERING_PARAM: value}


def parse_ordering_param(
    value: str,
    parse_column: Callable[[str], ColumnT],
) -> list[tuple[ColumnT, SortDirection]]:
    """
    Разбор значения query-параметра ordering.

    Колонка может содержать "-": направление отделяется по последнему "-".

    Args:
        value: Значение параметра, например "name-ASC;age-DESC"
        parse_column: Разбор колонки из строки (может выбросить ValueError)

    Returns:
        Ordering в виде списка пар

    Raises:
        OrderingParseError: Если сегмент или направление невалидны
    """
    if value == "":
        return []

    result: list[tuple[ColumnT, SortDirection]] = []

    for segment in value.split(ORDERING_SEPARATOR):
        column_raw, separator, token = segment.rpartition(COLUMN_DIRECTION_SEPARATOR)

        if not separator or not column_raw:
            logger.debug("Rejected ordering segment %r in %r", segment, value)
            raise OrderingParseError(f"Malformed ordering segment: {segment!r}")

        direction = _SORT_DIRECTIONS_BY_TOKEN.get(token)
        if direction is None:
            logger.debug("Rejected ordering direction %r in %r", token, value)
            raise OrderingParseError(
                f"Unknown sort direction {token!r} in segment {segment!r}"
            )

        try:
            column = parse_column(column_raw)
        except ValueError as e:
            raise OrderingParseError(f"Invalid column {column_raw!r}: {e}") from e

        result.append((column, direction))

    return result


# =============================================================================
# COMPARATOR ПО ORDERING
# =============================================================================


def comparator_for_ordering(
    ordering: Ordering[ColumnT],
    getters: Mapping[ColumnT, Callable[[T], Comparable]],
) -> Comparator[T]:
    """
    Comparator, сравнивающий по ключам ordering по очереди.

    Каждый DESCENDING ключ разворачивается отдельно, до присоединения
    к цепочке, поэтому направление младших ключей не зависит от старших.

    Args:
        ordering: Ключи сортировки (старший первым)
        getters: Getter значения для каждой колонки

    Returns:
        Comparator (всегда EQ для пустого ordering)

    Raises:
        ValueError: Если для колонки нет getter
    """
    result: Comparator[T] = make_comparator(lambda t1, t2: EQ)

    for column, direction in ordering:
        if column not in getters:
            raise ValueError(f"No getter for column {column!r}")

        key_comparator = comparing(getters[column])
        if direction == SortDirection.DESCENDING:
            key_comparator = key_comparator.reverse()

        result = result.then(key_comparator)

    return result
