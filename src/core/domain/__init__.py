"""
Domain models and value objects.

Contains sort state models, ordering requests and the SortControls interface.
"""

from src.core.domain.sort_controls import SortableCollection, SortControls
from src.core.domain.sort_state import OrderingRequest, SortKeySpec, SortState

__all__ = [
    # Sort state models
    "SortState",
    "SortKeySpec",
    "OrderingRequest",
    # Sort controls
    "SortControls",
    "SortableCollection",
]
