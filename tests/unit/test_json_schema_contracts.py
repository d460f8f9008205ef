"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/enum/not)
- Интеграция с Pydantic моделью Fraction и frac_op
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    FractionOperationValidator,
    FractionValidator,
    GameResultValidator,
    SchemaLoader,
    evaluate_operation_payload,
    fraction_from_wire,
    validate_fraction,
    validate_fraction_operation,
    validate_game_result,
)
from src.core.domain import Fraction, FractionOperator
from src.core.math import FailureReason


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_fraction():
    """Валидная дробь"""
    return {"n": 3, "d": -4}


@pytest.fixture
def valid_operation():
    """Валидный запрос операции"""
    return {"a": {"n": 1, "d": 2}, "b": {"n": 1, "d": 3}, "op": "+"}


@pytest.fixture
def valid_game_result():
    """Валидный итог игры"""
    return {"gameId": "bunsu-buster", "score": 100, "correct": 8, "total": 10}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["fraction", "fraction_operation", "game_result"])
    def test_schemas_are_valid(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)

    def test_cache(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("fraction") is loader.load_schema("fraction")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")


# =============================================================================
# FRACTION CONTRACT
# =============================================================================


class TestFractionContract:
    """Тесты fraction контракта"""

    def test_valid(self, valid_fraction) -> None:
        validate_fraction(valid_fraction)
        assert FractionValidator().is_valid(valid_fraction)

    def test_zero_denominator(self) -> None:
        with pytest.raises(ValidationError):
            validate_fraction({"n": 1, "d": 0})

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            validate_fraction({"n": 1})

    def test_wrong_type(self) -> None:
        assert not FractionValidator().is_valid({"n": "1", "d": 2})
        assert not FractionValidator().is_valid({"n": 1.5, "d": 2})
        assert not FractionValidator().is_valid({"n": True, "d": 2})

    def test_extra_field(self) -> None:
        assert not FractionValidator().is_valid({"n": 1, "d": 2, "w": 0})

    def test_from_wire(self, valid_fraction) -> None:
        assert fraction_from_wire(valid_fraction) == Fraction.of(3, -4)

    def test_from_wire_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            fraction_from_wire({"n": 1, "d": 0})

    def test_model_serialization_conforms(self) -> None:
        validate_fraction(Fraction.of(-5, 6).to_wire())


# =============================================================================
# FRACTION OPERATION CONTRACT
# =============================================================================


class TestFractionOperationContract:
    """Тесты fraction_operation контракта"""

    def test_valid(self, valid_operation) -> None:
        validate_fraction_operation(valid_operation)

    @pytest.mark.parametrize("op", [member.value for member in FractionOperator])
    def test_all_operator_symbols(self, valid_operation, op: str) -> None:
        valid_operation["op"] = op
        assert FractionOperationValidator().is_valid(valid_operation)

    @pytest.mark.parametrize("op", ["-", "*", "/", ""])
    def test_unknown_operator(self, valid_operation, op: str) -> None:
        valid_operation["op"] = op
        with pytest.raises(ValidationError):
            validate_fraction_operation(valid_operation)

    def test_nested_zero_denominator(self, valid_operation) -> None:
        valid_operation["b"] = {"n": 1, "d": 0}
        with pytest.raises(ValidationError) as exc_info:
            validate_fraction_operation(valid_operation)
        assert list(exc_info.value.absolute_path) == ["b", "d"]

    def test_evaluate(self, valid_operation) -> None:
        result = evaluate_operation_payload(valid_operation)
        assert result.value == Fraction.of(5, 6)

    def test_evaluate_division_by_zero(self) -> None:
        payload = {"a": {"n": 1, "d": 2}, "b": {"n": 0, "d": 1}, "op": "÷"}
        result = evaluate_operation_payload(payload)
        assert result.ok is False
        assert result.failure == FailureReason.DIVISION_BY_ZERO

    def test_evaluate_rejects_invalid_payload(self, valid_operation) -> None:
        valid_operation["op"] = "?"
        with pytest.raises(ValidationError):
            evaluate_operation_payload(valid_operation)


# =============================================================================
# GAME RESULT CONTRACT
# =============================================================================


class TestGameResultContract:
    """Тесты game_result контракта"""

    def test_valid(self, valid_game_result) -> None:
        validate_game_result(valid_game_result)

    def test_empty_game_id(self, valid_game_result) -> None:
        valid_game_result["gameId"] = ""
        with pytest.raises(ValidationError):
            validate_game_result(valid_game_result)

    @pytest.mark.parametrize("field", ["score", "correct", "total"])
    def test_negative_counts(self, valid_game_result, field: str) -> None:
        valid_game_result[field] = -1
        assert not GameResultValidator().is_valid(valid_game_result)

    @pytest.mark.parametrize("field", ["gameId", "score", "correct", "total"])
    def test_missing_required(self, valid_game_result, field: str) -> None:
        del valid_game_result[field]
        with pytest.raises(ValidationError):
            validate_game_result(valid_game_result)
