"""
SortControls — интерфейс управления сортировкой коллекции

SortControls передаётся UI, отображающему коллекцию, и позволяет UI
сортировать коллекцию. SortableCollection — in-memory реализация.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Generic, Protocol, TypeVar

from src.core.domain.sort_state import SortState
from src.core.ordering import (
    Comparable,
    Comparator,
    SortDirection,
    nulls_last,
    sorted_by,
)

T = TypeVar("T")


class SortControls(Protocol):
    """Управление сортировкой коллекции."""

    @property
    def sort(self) -> SortState | None:
        """Текущая сортировка, или None если используется сортировка по умолчанию."""
        ...

    def can_sort_by(self, column: str) -> bool:
        """True если коллекцию можно сортировать по column."""
        ...

    def sort_by(self, column: str, direction: SortDirection) -> None:
        """Side effect: владелец коллекции сортирует её по заданным параметрам."""
        ...


class SortableCollection(Generic[T]):
    """
    In-memory коллекция, реализующая SortControls.

    Сортировка по колонке использует nulls_last по getter колонки:
    None-значения идут последними при ASCENDING. DESCENDING разворачивает
    весь порядок, включая None.

    default_comparator используется как tie-break для сортировки по колонке.

    Исходные элементы не изменяются: items всегда возвращает новый список.
    """

    def __init__(
        self,
        items: Iterable[T],
        columns: Mapping[str, Callable[[T], Comparable | None]],
        default_comparator: Comparator[T] | None = None,
    ):
        """
        Args:
            items: Элементы коллекции (копируются)
            columns: Getter значения для каждой сортируемой колонки
            default_comparator: Сортировка по умолчанию (optional; иначе
                порядок вставки)
        """
        self._items: tuple[T, ...] = tuple(items)
        self._columns = dict(columns)
        self._default_comparator = default_comparator
        self._sort: SortState | None = None

    @property
    def sort(self) -> SortState | None:
        return self._sort

    def can_sort_by(self, column: str) -> bool:
        return column in self._columns

    def sort_by(self, column: str, direction: SortDirection) -> None:
        """
        Raises:
            ValueError: Если коллекцию нельзя сортировать по column
        """
        if not self.can_sort_by(column):
            raise ValueError(f"Collection is not sortable by column {column!r}")

        self._sort = SortState(column=column, direction=direction)

    def reset_sort(self) -> None:
        """Возврат к сортировке по умолчанию."""
        self._sort = None

    def comparator(self) -> Comparator[T] | None:
        """Comparator текущей сортировки (None — порядок вставки)."""
        if self._sort is None:
            return self._default_comparator

        column_comparator = nulls_last(self._columns[self._sort.column])
        if self._sort.direction == SortDirection.DESCENDING:
            column_comparator = column_comparator.reverse()

        if self._default_comparator is not None:
            column_comparator = column_comparator.then(self._default_comparator)

        return column_comparator

    @property
    def items(self) -> list[T]:
        comparator = self.comparator()
        if comparator is None:
            return list(self._items)
        return sorted_by(self._items, comparator)

    def __len__(self) -> int:
        return len(self._items)
