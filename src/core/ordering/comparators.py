"""
Comparators — Natural Order Primitives & Aggregates

Построители Comparator'ов поверх естественного порядка:
- NATURAL_ORDER для str / int / float / datetime и sentinel-значений
- comparing, comparing_with_priority, compare_by, in_order
- nulls_first / nulls_last для getter'ов, возвращающих None
- minimum_by / maximum_by / sorted_by

Sentinel-значения ALWAYS_LESS / ALWAYS_GREATER принудительно ставят элемент
в начало / конец сортировки независимо от реальных значений. Проверка
sentinel'ов всегда выполняется до нативного сравнения.

Значения вне comparable domain (например, str против int) дают TypeError
от операторов сравнения Python; исключение пропагирует к вызывающему.
Исключения getter'ов также пропагируют без изменений.
"""

import functools
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Callable, Final, TypeVar, Union

from src.core.ordering.comparator import EQ, GT, LT, Comparator, make_comparator

A = TypeVar("A")
T = TypeVar("T")
V = TypeVar("V")


# =============================================================================
# SENTINELS
# =============================================================================


class Sentinel(Enum):
    """Маркеры абсолютной позиции в сортировке"""

    ALWAYS_LESS = "ALWAYS_FIRST"
    ALWAYS_GREATER = "ALWAYS_LAST"

    def __repr__(self) -> str:
        return self.name


# Всегда первым в сортировке, независимо от направления сортировки
ALWAYS_LESS = Sentinel.ALWAYS_LESS

# Всегда последним в сортировке, независимо от направления сортировки
ALWAYS_GREATER = Sentinel.ALWAYS_GREATER

# Все сравнимые типы
Comparable = Union[str, int, float, datetime, date, Sentinel]

# Маркер пустой последовательности для minimum_by / maximum_by
_EMPTY: Final[object] = object()


# =============================================================================
# NATURAL ORDER
# =============================================================================


def _natural_order(x: Comparable, y: Comparable) -> int:
    if x is ALWAYS_LESS:
        return LT
    if x is ALWAYS_GREATER:
        return GT

    if y is ALWAYS_LESS:
        return GT
    if y is ALWAYS_GREATER:
        return LT

    if x > y:
        return GT
    if x < y:
        return LT
    return EQ


# Естественный порядок, например [1, 2, 3, 4, 5]
NATURAL_ORDER: Comparator[Comparable] = make_comparator(_natural_order)


def comparing(getter: Callable[[A], Comparable]) -> Comparator[A]:
    """
    Comparator по значениям getter в естественном порядке.

    Examples:
        >>> people = [("bob", 31), ("alice", 25)]
        >>> sorted_by(people, comparing(lambda p: p[1]))
        [('alice', 25), ('bob', 31)]
    """
    return make_comparator(lambda a1, a2: NATURAL_ORDER(getter(a1), getter(a2)))


def comparing_with_priority(
    getter: Callable[[A], Comparable],
    predicate: Callable[[A], bool],
    priority: Sentinel = ALWAYS_GREATER,
) -> Comparator[A]:
    """
    Comparator по getter в естественном порядке, но значения, для которых
    predicate истинен, ставятся первыми (ALWAYS_LESS) или последними
    (ALWAYS_GREATER).

    Приоритет применяется через finally_, то есть только к элементам,
    равным по getter. При reverse() приоритет не разворачивается.

    Args:
        getter: Значение для сравнения
        predicate: Нужно ли приоритизировать элемент
        priority: ALWAYS_LESS или ALWAYS_GREATER (default: ALWAYS_GREATER)

    Returns:
        Comparator

    Raises:
        ValueError: Если priority не является Sentinel
    """
    if not isinstance(priority, Sentinel):
        raise ValueError(
            f"priority must be ALWAYS_LESS or ALWAYS_GREATER, got {priority!r}"
        )

    opposite = ALWAYS_LESS if priority is ALWAYS_GREATER else ALWAYS_GREATER

    return comparing(getter).finally_(
        comparing(lambda a: priority if predicate(a) else opposite)
    )


def nulls_first(getter: Callable[[A], Comparable | None]) -> Comparator[A]:
    """
    Comparator по getter в естественном порядке; None меньше любых значений.

    Обрабатывается именно None: отсутствующие данные должны быть явно
    приведены к None в getter.
    """

    def compare(a1: A, a2: A) -> int:
        b1, b2 = getter(a1), getter(a2)

        if b1 is None and b2 is None:
            return EQ
        if b1 is None:
            return LT
        if b2 is None:
            return GT

        return NATURAL_ORDER(b1, b2)

    return make_comparator(compare)


def nulls_last(getter: Callable[[A], Comparable | None]) -> Comparator[A]:
    """
    Comparator по getter в естественном порядке; None больше любых значений.
    """

    def compare(a1: A, a2: A) -> int:
        b1, b2 = getter(a1), getter(a2)

        if b1 is None and b2 is None:
            return EQ
        if b1 is None:
            return GT
        if b2 is None:
            return LT

        return NATURAL_ORDER(b1, b2)

    return make_comparator(compare)


def _index_of(ordering: Sequence[T], item: T) -> int:
    for index, candidate in enumerate(ordering):
        if candidate == item:
            return index
    return -1


def in_order(ordering: Iterable[T]) -> Comparator[T]:
    """
    Comparator, упорядочивающий элементы по позиции первого вхождения в ordering.

    ВАЖНО: элемент, отсутствующий в ordering, получает индекс -1 и поэтому
    сортируется раньше всех присутствующих элементов.

    Args:
        ordering: Элементы в желаемом порядке (копируется при создании)

    Examples:
        >>> sorted_by(["a", "b", "c"], in_order(["b", "a", "c"]))
        ['b', 'a', 'c']
    """
    snapshot = tuple(ordering)
    return comparing(lambda item: _index_of(snapshot, item))


def compare_by(getter: Callable[[T], V], comparator: Comparator[V]) -> Comparator[T]:
    """
    Comparator по значениям getter с использованием comparator.

    Args:
        getter: Значение для сравнения
        comparator: Comparator для значений getter

    Returns:
        Comparator для исходных элементов
    """
    return make_comparator(lambda t1, t2: comparator(getter(t1), getter(t2)))


# =============================================================================
# AGGREGATES
# =============================================================================


def minimum_by(values: Iterable[A], comparator: Comparator[A]) -> A | None:
    """
    Минимальный элемент по comparator.

    При равенстве выигрывает самый ранний элемент. Пустой вход → None.

    Examples:
        >>> minimum_by([], NATURAL_ORDER) is None
        True
        >>> minimum_by([3, 1, 2], NATURAL_ORDER)
        1
    """
    return _extremum_by(values, lambda next_value, acc: comparator(next_value, acc) < 0)


def maximum_by(values: Iterable[A], comparator: Comparator[A]) -> A | None:
    """
    Максимальный элемент по comparator.

    При равенстве выигрывает самый ранний элемент. Пустой вход → None.
    """
    return _extremum_by(values, lambda next_value, acc: comparator(next_value, acc) > 0)


def _extremum_by(
    values: Iterable[A], replaces: Callable[[A, A], bool]
) -> A | None:
    iterator = iter(values)
    first = next(iterator, _EMPTY)
    if first is _EMPTY:
        return None

    return functools.reduce(
        lambda acc, next_value: next_value if replaces(next_value, acc) else acc,
        iterator,
        first,
    )


def sorted_by(values: Iterable[A], comparator: Comparator[A]) -> list[A]:
    """
    Стабильная сортировка в новый список.

    Args:
        values: Исходные элементы (не изменяются)
        comparator: Comparator

    Returns:
        Новый отсортированный список
    """
    return sorted(values, key=comparator.sort_key())
