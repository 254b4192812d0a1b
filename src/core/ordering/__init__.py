"""
Ordering modules

Composable Comparator'ы и многоколоночные сортировки.
"""

# Comparator
from src.core.ordering.comparator import (
    EQ,
    GT,
    LT,
    Comparator,
    make_comparator,
)

# Natural order primitives & aggregates
from src.core.ordering.comparators import (
    ALWAYS_GREATER,
    ALWAYS_LESS,
    NATURAL_ORDER,
    Comparable,
    Sentinel,
    compare_by,
    comparing,
    comparing_with_priority,
    in_order,
    maximum_by,
    minimum_by,
    nulls_first,
    nulls_last,
    sorted_by,
)

# Sort direction
from src.core.ordering.sort_direction import (
    ORDERINGS_BY_SORT_DIRECTION,
    SORT_DIRECTIONS,
    SortDirection,
)

# Multi-column orderings
from src.core.ordering.ordering import (
    COLUMN_DIRECTION_SEPARATOR,
    ORDERING_PARAM,
    ORDERING_SEPARATOR,
    Ordering,
    OrderingParseError,
    comparator_for_ordering,
    get_params_for_ordering,
    parse_ordering_param,
)

__all__ = [
    # Comparator — Constants
    "EQ",
    "GT",
    "LT",
    # Comparator — Types
    "Comparator",
    # Comparator — Functions
    "make_comparator",
    # Comparators — Sentinels
    "ALWAYS_GREATER",
    "ALWAYS_LESS",
    "Sentinel",
    # Comparators — Types
    "Comparable",
    # Comparators — Primitives
    "NATURAL_ORDER",
    "compare_by",
    "comparing",
    "comparing_with_priority",
    "in_order",
    "nulls_first",
    "nulls_last",
    # Comparators — Aggregates
    "maximum_by",
    "minimum_by",
    "sorted_by",
    # Sort direction
    "ORDERINGS_BY_SORT_DIRECTION",
    "SORT_DIRECTIONS",
    "SortDirection",
    # Ordering — Constants
    "COLUMN_DIRECTION_SEPARATOR",
    "ORDERING_PARAM",
    "ORDERING_SEPARATOR",
    # Ordering — Types & Exceptions
    "Ordering",
    "OrderingParseError",
    # Ordering — Functions
    "comparator_for_ordering",
    "get_params_for_ordering",
    "parse_ordering_param",
]
