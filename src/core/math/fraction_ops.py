"""
Fraction Ops — арифметика над дробями и предикат валидности

Модуль выполняет четыре операции (+, −, ×, ÷) над raw дробями и
возвращает явный результат success/failure вместо исключения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. frac_op никогда не бросает исключение из-за арифметики
   (деление на ноль, неизвестный оператор → FractionOpResult с failure)
2. У успешного результата знаменатель > 0
3. Результат НЕ сокращается: канонизация — ответственность вызывающего (simplify)
4. frac_valid отклоняет failure, ноль и отрицательные значения одинаково
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.core.domain.fraction import Fraction
from src.core.domain.operators import FractionOperator, parse_operator
from src.core.math.number_theory import lcm

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class FailureReason(str, Enum):
    """Причина неуспешной операции"""

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"
    ZERO_DENOMINATOR = "zero_denominator"


@dataclass(frozen=True)
class FractionOpResult:
    """Результат frac_op: либо value, либо failure."""

    value: Fraction | None
    failure: FailureReason | None
    operator: FractionOperator | None

    @property
    def ok(self) -> bool:
        return self.value is not None

    @classmethod
    def success(cls, value: Fraction, operator: FractionOperator) -> "FractionOpResult":
        return cls(value=value, failure=None, operator=operator)

    @classmethod
    def failed(
        cls, reason: FailureReason, operator: FractionOperator | None = None
    ) -> "FractionOpResult":
        return cls(value=None, failure=reason, operator=operator)


# =============================================================================
# ARITHMETIC
# =============================================================================


def frac_op(
    a: Fraction,
    b: Fraction,
    operator: FractionOperator | str,
) -> FractionOpResult:
    """
    Арифметическая операция над двумя дробями.

    + / −: общий знаменатель cd = lcm(a.d, b.d),
           n = a.n * (cd / a.d) ± b.n * (cd / b.d), d = cd
    ×:     n = a.n * b.n, d = a.d * b.d
    ÷:     b.n == 0 → failure; иначе n = a.n * b.d, d = a.d * b.n

    Пост-обработка: d == 0 → failure; d < 0 → смена знака n и d.

    Args:
        a: Левый операнд (raw, не обязательно канонический)
        b: Правый операнд
        operator: FractionOperator или wire-символ ('+', '−', '×', '÷')

    Returns:
        FractionOpResult (value при успехе, failure иначе)

    Examples:
        >>> str(frac_op(Fraction.of(1, 2), Fraction.of(1, 3), "+").value)
        '5/6'
        >>> frac_op(Fraction.of(1, 2), Fraction.of(0, 1), "÷").failure
        <FailureReason.DIVISION_BY_ZERO: 'division_by_zero'>
    """
    op = parse_operator(operator)
    if op is None:
        logger.debug("frac_op: unrecognized operator %r", operator)
        return FractionOpResult.failed(FailureReason.INVALID_OPERATOR)

    if op in (FractionOperator.ADD, FractionOperator.SUBTRACT):
        cd = lcm(a.denominator, b.denominator)
        left = a.numerator * (cd // a.denominator)
        right = b.numerator * (cd // b.denominator)
        rn = left + right if op == FractionOperator.ADD else left - right
        rd = cd
    elif op == FractionOperator.MULTIPLY:
        rn = a.numerator * b.numerator
        rd = a.denominator * b.denominator
    else:
        if b.numerator == 0:
            logger.debug("frac_op: division by zero %s %s %s", a, op.value, b)
            return FractionOpResult.failed(FailureReason.DIVISION_BY_ZERO, op)
        rn = a.numerator * b.denominator
        rd = a.denominator * b.numerator

    if rd == 0:
        logger.debug("frac_op: zero denominator %s %s %s", a, op.value, b)
        return FractionOpResult.failed(FailureReason.ZERO_DENOMINATOR, op)

    if rd < 0:
        rn, rd = -rn, -rd

    return FractionOpResult.success(Fraction.of(rn, rd), op)


# =============================================================================
# VALIDITY
# =============================================================================


def frac_valid(result: FractionOpResult | Fraction | None) -> bool:
    """
    Годится ли результат для игровых правил.

    True только если результат присутствует, d > 0 и n > 0.
    Принимает FractionOpResult, Fraction или None.
    """
    if isinstance(result, FractionOpResult):
        result = result.value
    if result is None:
        return False
    return result.denominator > 0 and result.numerator > 0
