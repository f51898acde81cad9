"""
Divisibility — НОД и НОК

Свободные функции, не зависящие от Fraction:
- gcd / lcm: неограниченные Python int (алгоритм Евклида по модулям)
- checked_gcd / checked_lcm: signed 64-bit, result-style через Outcome
- gcd_u64 / lcm_u64: модули unsigned 64-bit, ошибки через исключения;
  используются ядром Fraction

Граничные случаи:
    gcd(0, n) == abs(n)
    gcd(0, 0) == 0
    lcm(x, 0) == lcm(0, 0) == 0 (деления на gcd(0, 0) не происходит)
"""

from exactfrac.core.contracts.errors import FractionOverflowError, GcdError
from exactfrac.core.contracts.outcome import Outcome
from exactfrac.core.math.integer_bounds import (
    GCD_MAX_ITERATIONS,
    checked_abs_i64,
    checked_mul_u64,
    is_i64,
    is_u64,
)


def _euclid(a: int, b: int, max_iterations: int | None = None) -> int:
    """
    Алгоритм Евклида для неотрицательных a, b.

    Raises:
        GcdError: Если max_iterations задан и алгоритм не сошёлся
    """
    iterations = 0
    while b != 0:
        if max_iterations is not None and iterations >= max_iterations:
            raise GcdError(f"GCD did not converge within {max_iterations} iterations")
        a, b = b, a % b
        iterations += 1
    return a


# =============================================================================
# НЕОГРАНИЧЕННЫЕ ВАРИАНТЫ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель.

    Examples:
        >>> gcd(54, 24)
        6
        >>> gcd(0, 10)
        10
        >>> gcd(-4, 6)
        2
    """
    return _euclid(abs(a), abs(b))


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: |a*b| / gcd(a, b).

    Делим до умножения, чтобы не раздувать промежуточное значение.

    Examples:
        >>> lcm(4, 5)
        20
        >>> lcm(21, 6)
        42
        >>> lcm(0, 0)
        0
    """
    if a == 0 or b == 0:
        return 0
    return abs(a) // gcd(a, b) * abs(b)


# =============================================================================
# CHECKED-ВАРИАНТЫ (signed 64-bit)
# =============================================================================


def _checked_gcd(a: int, b: int) -> int:
    try:
        a = checked_abs_i64(a)
        b = checked_abs_i64(b)
    except FractionOverflowError as error:
        raise GcdError(f"Error computing GCD: {error}") from error
    return _euclid(a, b, GCD_MAX_ITERATIONS)


def _checked_lcm(a: int, b: int) -> int:
    divisor = _checked_gcd(a, b)
    if divisor == 0:
        return 0
    result = abs(a) // divisor * abs(b)
    if not is_i64(result):
        raise FractionOverflowError(f"lcm({a}, {b}) overflows signed 64-bit")
    return result


def checked_gcd(a: int, b: int) -> Outcome[int]:
    """
    НОД в signed 64-bit с защитой от переполнения и зацикливания.

    Args:
        a: Первое значение (signed 64-bit)
        b: Второе значение (signed 64-bit)

    Returns:
        Outcome с НОД или GcdError, если:
        - abs(a) или abs(b) не представим (значение == I64_MIN или вне диапазона)
        - алгоритм не сошёлся за GCD_MAX_ITERATIONS итераций
    """
    return Outcome.capture(_checked_gcd, a, b)


def checked_lcm(a: int, b: int) -> Outcome[int]:
    """
    НОК в signed 64-bit.

    Returns:
        Outcome с НОК, GcdError (проброс из checked_gcd) или
        FractionOverflowError, если результат не помещается в signed 64-bit
    """
    return Outcome.capture(_checked_lcm, a, b)


# =============================================================================
# UNSIGNED 64-BIT (ядро Fraction)
# =============================================================================


def gcd_u64(a: int, b: int) -> int:
    """
    НОД двух модулей unsigned 64-bit.

    Raises:
        FractionOverflowError: Если модуль вне unsigned 64-bit
        GcdError: Если алгоритм не сошёлся за GCD_MAX_ITERATIONS
    """
    if not is_u64(a) or not is_u64(b):
        raise FractionOverflowError(f"gcd({a}, {b}): magnitude outside unsigned 64-bit")
    return _euclid(a, b, GCD_MAX_ITERATIONS)


def lcm_u64(a: int, b: int) -> int:
    """
    НОК двух модулей unsigned 64-bit.

    Raises:
        FractionOverflowError: Если НОК > U64_MAX
    """
    divisor = gcd_u64(a, b)
    if divisor == 0:
        return 0
    try:
        return checked_mul_u64(a // divisor, b)
    except FractionOverflowError as error:
        raise FractionOverflowError(f"lcm({a}, {b}) overflows unsigned 64-bit") from error
