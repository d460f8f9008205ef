"""
Number Theory — gcd / lcm для целочисленных дробей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd работает на абсолютных значениях, результат >= 0
2. gcd(0, 0) == 0 (вырожденный случай, определён явно)
3. lcm(0, 0) не определён → DegenerateFractionError (fail fast)
4. Только целочисленная арифметика, без float
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateFractionError(ValueError):
    """
    Вырожденный вход: оба операнда равны 0 (или знаменатель равен 0).

    Нарушение precondition вызывающей стороны. Не восстанавливается внутри
    движка: правильно построенные дроби никогда не имеют нулевого знаменателя.
    """

    pass


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    Args:
        a: Целое число (знак игнорируется)
        b: Целое число (знак игнорируется)

    Returns:
        gcd(|a|, |b|) >= 0; gcd(a, 0) == |a|; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 8)
        4
        >>> gcd(7, 0)
        7
    """
    a = abs(a)
    b = abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: |a*b| / gcd(a, b).

    Raises:
        DegenerateFractionError: если a == 0 и b == 0

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-2, 3)
        6
    """
    g = gcd(a, b)
    if g == 0:
        raise DegenerateFractionError(f"lcm undefined for a={a}, b={b}: gcd is 0")
    return abs(a * b) // g
