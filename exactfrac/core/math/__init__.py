"""
Core math modules для exactfrac

Целочисленные примитивы фиксированной разрядности, НОД и НОК.
"""

# Integer Bounds
from exactfrac.core.math.integer_bounds import (
    # Width constants
    GCD_MAX_ITERATIONS,
    I64_MAX,
    I64_MIN,
    U64_MAX,
    # Checked primitives
    checked_abs_i64,
    checked_add_u64,
    checked_mul_u64,
    is_i64,
    is_u64,
)

# Divisibility
from exactfrac.core.math.divisibility import (
    checked_gcd,
    checked_lcm,
    gcd,
    gcd_u64,
    lcm,
    lcm_u64,
)

__all__ = [
    # Integer Bounds: Width constants
    "GCD_MAX_ITERATIONS",
    "I64_MAX",
    "I64_MIN",
    "U64_MAX",
    # Integer Bounds: Checked primitives
    "checked_abs_i64",
    "checked_add_u64",
    "checked_mul_u64",
    "is_i64",
    "is_u64",
    # Divisibility
    "checked_gcd",
    "checked_lcm",
    "gcd",
    "gcd_u64",
    "lcm",
    "lcm_u64",
]
