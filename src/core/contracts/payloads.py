"""
Wire payloads → доменные объекты

Мост между JSON от игр и чистыми функциями движка: сначала контракт
(jsonschema), затем Fraction (Pydantic), затем frac_op.
"""

from typing import Any, Dict

from src.core.contracts.validators import validate_fraction, validate_fraction_operation
from src.core.domain.fraction import Fraction
from src.core.math.fraction_ops import FractionOpResult, frac_op


def fraction_from_wire(data: Dict[str, Any]) -> Fraction:
    """
    Дробь из wire-формата {"n", "d"}.

    Raises:
        ValidationError (jsonschema): Если payload не соответствует fraction.json
    """
    validate_fraction(data)
    return Fraction.model_validate(data)


def evaluate_operation_payload(payload: Dict[str, Any]) -> FractionOpResult:
    """
    Выполнение операции из payload {"a": {n, d}, "b": {n, d}, "op": symbol}.

    Контракт отклоняет нераспознанный op и нулевой знаменатель ещё до
    вызова frac_op; арифметические failure (÷ 0) возвращаются в результате.

    Raises:
        ValidationError (jsonschema): Если payload не соответствует fraction_operation.json
    """
    validate_fraction_operation(payload)
    a = Fraction.model_validate(payload["a"])
    b = Fraction.model_validate(payload["b"])
    return frac_op(a, b, payload["op"])
