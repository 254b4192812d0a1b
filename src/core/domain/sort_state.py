"""
SortState / OrderingRequest — Модели состояния сортировки

Immutable Pydantic модели:
- SortState: текущая сортировка коллекции (колонка + направление)
- SortKeySpec: один ключ запроса сортировки
- OrderingRequest: запрос многоколоночной сортировки
  (совместим с JSON Schema contracts/schema/ordering_request.json)
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_ordering_request
from src.core.ordering import SortDirection


# =============================================================================
# SORT STATE
# =============================================================================


class SortState(BaseModel):
    """
    Текущая сортировка коллекции.

    Immutable модель (frozen=True): смена сортировки создаёт новый экземпляр.
    """

    column: str = Field(..., min_length=1, description="Колонка, по которой идёт сортировка")
    direction: SortDirection = Field(..., description="Направление сортировки")

    model_config = {"frozen": True}


# =============================================================================
# ORDERING REQUEST
# =============================================================================


class SortKeySpec(BaseModel):
    """Один ключ сортировки в запросе"""

    column: str = Field(..., min_length=1, description="Имя колонки")
    direction: SortDirection = Field(
        SortDirection.ASCENDING, description="Направление (default: Ascending)"
    )

    model_config = {"frozen": True}


class OrderingRequest(BaseModel):
    """
    Запрос многоколоночной сортировки.

    Ключи перечислены от старшего к младшему. Колонка может встречаться
    только один раз.
    """

    ordering: list[SortKeySpec] = Field(
        default_factory=list, description="Ключи сортировки (старший первым)"
    )

    model_config = {"frozen": True}

    @field_validator("ordering")
    @classmethod
    def validate_unique_columns(cls, v: list[SortKeySpec]) -> list[SortKeySpec]:
        """Проверка уникальности колонок."""
        seen: set[str] = set()
        for key in v:
            if key.column in seen:
                raise ValueError(f"column {key.column!r} appears more than once")
            seen.add(key.column)
        return v

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "OrderingRequest":
        """
        Создание модели из JSON payload.

        Payload сначала проверяется против JSON Schema контракта.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если нарушены ограничения модели
        """
        validate_ordering_request(data)
        return cls.model_validate(data)

    def to_ordering(self) -> list[tuple[str, SortDirection]]:
        """
        Ordering в виде списка пар (column, direction).

        Returns:
            Пары для comparator_for_ordering / get_params_for_ordering
        """
        return [(key.column, key.direction) for key in self.ordering]
