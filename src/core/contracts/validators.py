"""
JSON Schema Contract Validators

Модуль для валидации JSON, которым игры обмениваются с движком дробей.

Схемы (contracts/schema/ в корне проекта):
- fraction.json (дробь {n, d})
- fraction_operation.json (запрос операции {a, b, op})
- game_result.json (итог игры {gameId, score, correct, total})
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов.

    Каждая схема проходит meta-validation (Draft 2020-12) при первой загрузке.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения (например, 'fraction').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор одного контракта; подклассы задают schema_name."""

    schema_name: str = ""

    def __init__(self):
        self._validator = Draft202012Validator(_SCHEMA_LOADER.load_schema(self.schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)


class FractionValidator(ContractValidator):
    schema_name = "fraction"


class FractionOperationValidator(ContractValidator):
    schema_name = "fraction_operation"


class GameResultValidator(ContractValidator):
    """Проверяется только форма payload; хранение счёта вне движка."""

    schema_name = "game_result"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не соответствует fraction.json"""
    FractionValidator().validate(data)


def validate_fraction_operation(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не соответствует fraction_operation.json"""
    FractionOperationValidator().validate(data)


def validate_game_result(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не соответствует game_result.json"""
    GameResultValidator().validate(data)
