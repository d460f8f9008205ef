"""
Contract Validation Module

Модуль для валидации JSON контрактов движка дробей.
"""

from .payloads import evaluate_operation_payload, fraction_from_wire
from .validators import (
    ContractValidator,
    FractionOperationValidator,
    FractionValidator,
    GameResultValidator,
    SchemaLoader,
    validate_fraction,
    validate_fraction_operation,
    validate_game_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    "FractionOperationValidator",
    "GameResultValidator",
    # Functions
    "validate_fraction",
    "validate_fraction_operation",
    "validate_game_result",
    "fraction_from_wire",
    "evaluate_operation_payload",
]
