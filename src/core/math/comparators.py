"""
Comparators & Metrics — сравнения дробей и метрика близости к 1

Точное равенство — только через fractions_equal (целочисленно, после simplify).
frac_val (float) используется для сравнения величин и prox1, но НИКОГДА
для проверки равенства.
"""

import math
from typing import Final

from src.core.domain.fraction import Fraction
from src.core.math.normalization import simplify

# =============================================================================
# PROXIMITY ПАРАМЕТРЫ
# =============================================================================

# Целевое значение метрики близости
PROXIMITY_TARGET: Final[float] = 1.0

# Нижняя граница метрики (clamp)
PROXIMITY_FLOOR: Final[float] = 0.0


# =============================================================================
# ЗНАЧЕНИЕ И РАВЕНСТВО
# =============================================================================


def frac_val(f: Fraction) -> float:
    """
    Десятичное (float) приближение дроби.

    Значение вне диапазона float → ±inf (знак по знакам n и d).
    """
    try:
        return f.numerator / f.denominator
    except OverflowError:
        sign = 1.0 if (f.numerator > 0) == (f.denominator > 0) else -1.0
        return math.copysign(math.inf, sign)


def fractions_equal(a: Fraction, b: Fraction) -> bool:
    """
    Равенство дробей по значению.

    Обе дроби приводятся через simplify и сравниваются попарно как int.

    Examples:
        >>> fractions_equal(Fraction.of(2, 4), Fraction.of(-1, -2))
        True
    """
    sa = simplify(a.numerator, a.denominator)
    sb = simplify(b.numerator, b.denominator)
    return sa.numerator == sb.numerator and sa.denominator == sb.denominator


# =============================================================================
# ПРОВЕРКИ ЕДИНИЦЫ
# =============================================================================


def is_one(f: Fraction) -> bool:
    """
    Структурная проверка n == d и d > 0 (без сокращения).

    2/2 → True, -2/-2 → False.
    """
    return f.numerator == f.denominator and f.denominator > 0


def is_s1(f: Fraction) -> bool:
    """Дробь в точности 1/1"""
    return f.numerator == 1 and f.denominator == 1


# =============================================================================
# МЕТРИКА БЛИЗОСТИ
# =============================================================================


def prox1(f: Fraction) -> float:
    """
    Близость значения дроби к 1.

    prox1 = max(0, 1 - |1 - value|), результат в [0, 1].
    Используется для частичного зачёта (near-miss), не для pass/fail.

    Examples:
        >>> prox1(Fraction.of(1, 1))
        1.0
        >>> prox1(Fraction.of(1, 2))
        0.5
        >>> prox1(Fraction.of(3, 1))
        0.0
    """
    return max(PROXIMITY_FLOOR, 1.0 - abs(PROXIMITY_TARGET - frac_val(f)))
