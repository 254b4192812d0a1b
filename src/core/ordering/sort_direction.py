"""
SortDirection — направление сортировки колонки
"""

from enum import Enum
from typing import Final


class SortDirection(str, Enum):
    """Направление сортировки"""

    ASCENDING = "Ascending"
    DESCENDING = "Descending"


SORT_DIRECTIONS: Final[tuple[SortDirection, ...]] = (
    SortDirection.ASCENDING,
    SortDirection.DESCENDING,
)

# Токены направления в query-параметре ordering
ORDERINGS_BY_SORT_DIRECTION: Final[dict[SortDirection, str]] = {
    SortDirection.ASCENDING: "ASC",
    SortDirection.DESCENDING: "DESC",
}
