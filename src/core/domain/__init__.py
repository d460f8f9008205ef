"""
Domain value objects.

Contains the Fraction value model and the closed set of arithmetic operators.
"""

from src.core.domain.fraction import Fraction
from src.core.domain.operators import FractionOperator, parse_operator

__all__ = [
    "Fraction",
    "FractionOperator",
    "parse_operator",
]
