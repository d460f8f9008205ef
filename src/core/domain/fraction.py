"""
Fraction — value object целочисленной дроби

Immutable Pydantic модель пары (numerator, denominator).

Модель НЕ приводит дробь к каноническому виду: отрицательный и сократимый
знаменатель допустимы (raw input от игр). Канонизация выполняется только
через src.core.math.normalization.simplify.

ИНВАРИАНТЫ:
1. denominator != 0 (иначе ValidationError при создании)
2. Только int (strict mode): float, str и bool отклоняются
3. Равенство модели (==) структурное, НЕ по значению: 2/4 != 1/2
"""

from pydantic import BaseModel, Field, field_validator


class Fraction(BaseModel):
    """
    Целочисленная дробь numerator / denominator.

    Wire-формат (JSON от игр): {"n": numerator, "d": denominator}.
    Поля принимаются как по имени, так и по alias.
    """

    numerator: int = Field(..., alias="n", description="Числитель")
    denominator: int = Field(..., alias="d", description="Знаменатель (не 0, знак произвольный)")

    model_config = {"frozen": True, "strict": True, "populate_by_name": True}

    @field_validator("denominator")
    @classmethod
    def validate_denominator(cls, v: int) -> int:
        """Знаменатель 0 не представим"""
        if v == 0:
            raise ValueError("denominator must be non-zero")
        return v

    @classmethod
    def of(cls, n: int, d: int) -> "Fraction":
        """
        Позиционный конструктор.

        Examples:
            >>> Fraction.of(1, 2)
            Fraction(numerator=1, denominator=2)
        """
        return cls(numerator=n, denominator=d)

    def to_wire(self) -> dict[str, int]:
        """Сериализация в wire-формат {"n", "d"}"""
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
