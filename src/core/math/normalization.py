"""
Normalization — приведение дроби к каноническому виду

Канонический вид: знаменатель > 0 и gcd(|n|, |d|) == 1.
Гарантируется только для результата simplify, на входе НЕ предполагается.
"""

from src.core.domain.fraction import Fraction
from src.core.math.number_theory import DegenerateFractionError, gcd


def simplify(n: int, d: int) -> Fraction:
    """
    Сокращение дроби с нормализацией знака.

    numerator = sign(d) * n / g, denominator = |d| / g, где g = gcd(|n|, |d|).
    Знак числителя меняется ровно тогда, когда входной знаменатель < 0.

    Args:
        n: Числитель
        d: Знаменатель (не 0)

    Returns:
        Fraction в каноническом виде

    Raises:
        DegenerateFractionError: если d == 0 (включая n == d == 0)

    Examples:
        >>> str(simplify(4, 8))
        '1/2'
        >>> str(simplify(4, -8))
        '-1/2'
    """
    if d == 0:
        raise DegenerateFractionError(f"cannot simplify {n}/{d}: denominator is 0")

    g = gcd(abs(n), abs(d))
    sign = -1 if d < 0 else 1
    return Fraction.of(sign * (n // g), abs(d) // g)


def can_simplify(n: int, d: int) -> bool:
    """
    Проверка, можно ли сократить дробь.

    True только если d > 1 и gcd(|n|, |d|) > 1. Отрицательные знаменатели
    намеренно не проверяются: can_simplify(2, -4) is False.
    """
    return d > 1 and gcd(abs(n), abs(d)) > 1
