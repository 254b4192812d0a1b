"""
Contract Validation Module

Модуль для валидации JSON контрактов.
"""

from .validators import (
    ContractValidator,
    OrderingRequestValidator,
    SchemaLoader,
    validate_ordering_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderingRequestValidator",
    # Functions
    "validate_ordering_request",
]
