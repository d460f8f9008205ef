"""
FractionOperator — закрытое перечисление арифметических операций

Значения enum совпадают с символами, которые игры передают на wire:
'+', '−' (U+2212), '×' (U+00D7), '÷' (U+00F7).
ASCII-замены ('-', '*', '/') НЕ распознаются.
"""

from enum import Enum


class FractionOperator(str, Enum):
    """Арифметическая операция над дробями"""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"


def parse_operator(symbol: "FractionOperator | str") -> FractionOperator | None:
    """
    Преобразование wire-символа в FractionOperator.

    Args:
        symbol: член FractionOperator или один из четырёх символов

    Returns:
        FractionOperator или None для нераспознанного символа

    Examples:
        >>> parse_operator("+")
        <FractionOperator.ADD: '+'>
        >>> parse_operator("-") is None
        True
    """
    if isinstance(symbol, FractionOperator):
        return symbol
    if not isinstance(symbol, str):
        return None
    try:
        return FractionOperator(symbol)
    except ValueError:
        return None
