"""
Core math modules

Точная рациональная арифметика для игр с дробями: только целые числа,
без скрытого состояния, все функции чистые.
"""

# Number theory
from src.core.math.number_theory import (
    DegenerateFractionError,
    gcd,
    lcm,
)

# Normalization
from src.core.math.normalization import (
    can_simplify,
    simplify,
)

# Comparators & metrics
from src.core.math.comparators import (
    PROXIMITY_FLOOR,
    PROXIMITY_TARGET,
    fractions_equal,
    frac_val,
    is_one,
    is_s1,
    prox1,
)

# Arithmetic & validity
from src.core.math.fraction_ops import (
    FailureReason,
    FractionOpResult,
    frac_op,
    frac_valid,
)

__all__ = [
    # Number theory
    "DegenerateFractionError",
    "gcd",
    "lcm",
    # Normalization
    "can_simplify",
    "simplify",
    # Comparators — Constants
    "PROXIMITY_FLOOR",
    "PROXIMITY_TARGET",
    # Comparators — Functions
    "fractions_equal",
    "frac_val",
    "is_one",
    "is_s1",
    "prox1",
    # Arithmetic — Types
    "FailureReason",
    "FractionOpResult",
    # Arithmetic — Functions
    "frac_op",
    "frac_valid",
]
