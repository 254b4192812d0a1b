"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и enum
- SchemaLoader: кэш и ошибки загрузки
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    ContractValidator,
    OrderingRequestValidator,
    SchemaLoader,
    validate_ordering_request,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_ordering_request():
    """Валидный ordering_request для тестирования."""
    return {
        "ordering": [
            {"column": "team", "direction": "Ascending"},
            {"column": "points", "direction": "Descending"},
        ]
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid_json_schema(self):
        """ordering_request.json — валидная Draft 2020-12 схема"""
        schema = SchemaLoader().load_schema("ordering_request")

        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "ordering_request"

    def test_schema_cached(self):
        """Повторная загрузка возвращает закэшированную схему"""
        loader = SchemaLoader()

        assert loader.load_schema("ordering_request") is loader.load_schema("ordering_request")

    def test_missing_schema_raises(self):
        """Несуществующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory_raises(self, tmp_path: Path):
        """Несуществующий каталог схем → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path):
        """Невалидная JSON Schema → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_directory(self, tmp_path: Path):
        """ContractValidator с собственным загрузчиком"""
        (tmp_path / "tiny.json").write_text(
            json.dumps({"type": "object", "required": ["x"]}), encoding="utf-8"
        )

        validator = ContractValidator("tiny", loader=SchemaLoader(tmp_path))

        assert validator.is_valid({"x": 1})
        assert not validator.is_valid({})


# =============================================================================
# ORDERING REQUEST CONTRACT TESTS
# =============================================================================


class TestOrderingRequestContract:
    """Тесты ordering_request контракта"""

    def test_valid_data(self, valid_ordering_request):
        """Валидные данные проходят проверку"""
        validate_ordering_request(valid_ordering_request)
        assert OrderingRequestValidator().is_valid(valid_ordering_request)

    def test_empty_ordering_valid(self):
        """Пустой список ключей допустим"""
        validate_ordering_request({"ordering": []})

    def test_missing_ordering(self):
        """Отсутствует обязательное поле ordering"""
        with pytest.raises(ValidationError, match="'ordering' is a required property"):
            validate_ordering_request({})

    def test_missing_direction(self):
        """Ключ без направления"""
        with pytest.raises(ValidationError, match="'direction' is a required property"):
            validate_ordering_request({"ordering": [{"column": "team"}]})

    @pytest.mark.parametrize("direction", ["ASC", "ascending", "", 1])
    def test_invalid_direction(self, direction):
        """Направление вне enum"""
        with pytest.raises(ValidationError):
            validate_ordering_request(
                {"ordering": [{"column": "team", "direction": direction}]}
            )

    def test_empty_column(self):
        """Пустое имя колонки"""
        with pytest.raises(ValidationError):
            validate_ordering_request(
                {"ordering": [{"column": "", "direction": "Ascending"}]}
            )

    def test_additional_properties_rejected(self, valid_ordering_request):
        """Лишние поля запрещены"""
        invalid = {**valid_ordering_request, "page": 2}

        assert not OrderingRequestValidator().is_valid(invalid)

    def test_iter_errors_reports_all(self):
        """iter_errors возвращает все нарушения"""
        data = {
            "ordering": [
                {"column": "", "direction": "Ascending"},
                {"column": "team", "direction": "Up"},
            ]
        }

        errors = list(OrderingRequestValidator().iter_errors(data))

        assert len(errors) == 2
