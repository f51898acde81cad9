"""
exactfrac — точные рациональные числа в 64-bit

Публичный API: Fraction и константы ZERO / ONE, свободные функции
gcd / lcm и их checked-варианты, сигналы ошибок и Outcome.
"""

from exactfrac.core.contracts import (
    FractionAbort,
    FractionError,
    FractionErrorKind,
    FractionOverflowError,
    GcdError,
    Outcome,
    ZeroDenominatorError,
)
from exactfrac.core.domain import ONE, ZERO, Fraction, Sign
from exactfrac.core.math import (
    GCD_MAX_ITERATIONS,
    I64_MAX,
    I64_MIN,
    U64_MAX,
    checked_gcd,
    checked_lcm,
    gcd,
    lcm,
)

__version__ = "0.1.0"

__all__ = [
    # Fraction
    "Fraction",
    "Sign",
    "ZERO",
    "ONE",
    # Errors
    "FractionAbort",
    "FractionError",
    "FractionErrorKind",
    "FractionOverflowError",
    "GcdError",
    "ZeroDenominatorError",
    "Outcome",
    # Numeric utilities
    "checked_gcd",
    "checked_lcm",
    "gcd",
    "lcm",
    "GCD_MAX_ITERATIONS",
    "I64_MAX",
    "I64_MIN",
    "U64_MAX",
]
