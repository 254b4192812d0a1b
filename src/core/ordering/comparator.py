"""
Comparator — Composable Comparison Functions

Модуль определяет Comparator: вызываемый объект сравнения двух значений,
обогащённый комбинаторами композиции:
- then: tie-break следующим comparator'ом
- reverse: обратный порядок основной функции сравнения
- finally_: терминальный fallback comparator

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Comparator immutable — комбинаторы всегда возвращают новый экземпляр
2. then вычисляет следующий comparator только при EQ
3. reverse никогда не возвращает -0 и не разворачивает терминальный fallback
4. finally_ заменяет (не накапливает) терминальный fallback
"""

import functools
from typing import Any, Callable, Final, Generic, TypeVar

T = TypeVar("T")

CompareFn = Callable[[T, T], float]

# =============================================================================
# РЕЗУЛЬТАТЫ СРАВНЕНИЯ
# =============================================================================

# Первое значение больше второго
GT: Final[int] = 1

# Первое значение меньше второго
LT: Final[int] = -1

# Значения равны
EQ: Final[int] = 0


# =============================================================================
# COMPARATOR
# =============================================================================


class Comparator(Generic[T]):
    """
    Сравнивает два значения типа T.

    Экземпляр вызываемый: comparator(t1, t2) возвращает знаковое число
    (отрицательное — t1 раньше t2, 0 — равны, положительное — t1 позже t2),
    поэтому его можно передавать везде, где ожидается функция сравнения,
    например в functools.cmp_to_key.

    Immutable: создаётся только через make_comparator или комбинаторы.
    """

    __slots__ = ("_compare_fn", "_final_comparator")

    def __init__(
        self,
        compare_fn: CompareFn,
        final_comparator: "Comparator[T] | None" = None,
    ) -> None:
        self._compare_fn = compare_fn
        self._final_comparator = final_comparator

    def __call__(self, t1: T, t2: T) -> float:
        comparison_result = self._compare_fn(t1, t2)

        if comparison_result != 0:
            return comparison_result

        if self._final_comparator is None:
            return EQ

        return self._final_comparator(t1, t2)

    def then(self, comparator: "Comparator[T]") -> "Comparator[T]":
        """
        Композиция с другим comparator'ом (tie-break).

        comparator вызывается только если основная функция вернула 0.
        Терминальный fallback сохраняется без изменений.
        """
        compare_fn = self._compare_fn

        def composed(t1: T, t2: T) -> float:
            primary_result = compare_fn(t1, t2)
            if primary_result != 0:
                return primary_result

            return comparator(t1, t2)

        return Comparator(composed, self._final_comparator)

    def reverse(self) -> "Comparator[T]":
        """
        Новый Comparator, сравнивающий в обратном порядке.

        Разворачивается только основная функция: терминальный fallback
        (finally_) сохраняет своё направление.
        """
        compare_fn = self._compare_fn

        def reversed_fn(t1: T, t2: T) -> float:
            result = compare_fn(t1, t2)
            # Не возвращаем -0
            if result != 0:
                return -result
            return EQ

        return Comparator(reversed_fn, self._final_comparator)

    def finally_(self, comparator: "Comparator[T]") -> "Comparator[T]":
        """
        Новый Comparator с той же основной функцией и терминальным
        fallback = comparator (предыдущий fallback заменяется).
        """
        return Comparator(self._compare_fn, comparator)

    def sort_key(self) -> Callable[[T], Any]:
        """
        Key-функция для sorted()/list.sort().

        Examples:
            >>> sorted([3, 1, 2], key=NATURAL_ORDER.sort_key())  # doctest: +SKIP
            [1, 2, 3]
        """
        return functools.cmp_to_key(self)

    def __repr__(self) -> str:
        has_final = self._final_comparator is not None
        return f"Comparator(compare_fn={self._compare_fn!r}, has_final={has_final})"


# =============================================================================
# FACTORY
# =============================================================================


def make_comparator(
    compare_fn: CompareFn,
    final_comparator: Comparator[T] | None = None,
) -> Comparator[T]:
    """
    Обогащает функцию сравнения до Comparator.

    Args:
        compare_fn: Функция (t1, t2) -> знаковое число. Может быть и Comparator —
            тогда результат является новым объектом, исходный не изменяется.
        final_comparator: Терминальный fallback, используется когда
            compare_fn вернула 0 (optional)

    Returns:
        Новый Comparator

    Examples:
        >>> by_length = make_comparator(lambda a, b: len(a) - len(b))
        >>> by_length("ab", "abc")
        -1
        >>> by_length.reverse()("ab", "abc")
        1
    """
    return Comparator(compare_fn, final_comparator)
