"""
Integer Bounds — Фиксированная разрядность и checked-примитивы

Модуль задаёт 64-bit границы, в которых живут все значения Fraction,
и примитивы, которые вместо молчаливого wraparound сигнализируют
переполнение через FractionOverflowError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна checked-операция не возвращает значение вне своего диапазона
2. abs(I64_MIN) не представим в signed 64-bit → ошибка, а не wrap
3. Все операции детерминированы
"""

from typing import Final

from exactfrac.core.contracts.errors import FractionOverflowError

# =============================================================================
# РАЗРЯДНОСТЬ
# =============================================================================

# Signed 64-bit: диапазон входных числителей/знаменателей
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

# Unsigned 64-bit: диапазон модулей числителя/знаменателя
U64_MAX: Final[int] = 2**64 - 1

# Жёсткий лимит итераций алгоритма Евклида в checked-вариантах.
# Для 64-bit модулей достаточно ~93 итераций.
GCD_MAX_ITERATIONS: Final[int] = 1000


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_i64(value: int) -> bool:
    """Проверка, что значение представимо как signed 64-bit."""
    return I64_MIN <= value <= I64_MAX


def is_u64(value: int) -> bool:
    """Проверка, что значение представимо как unsigned 64-bit."""
    return 0 <= value <= U64_MAX


# =============================================================================
# CHECKED-ПРИМИТИВЫ
# =============================================================================


def checked_abs_i64(value: int) -> int:
    """
    Модуль signed 64-bit значения.

    Args:
        value: Исходное значение

    Returns:
        abs(value)

    Raises:
        FractionOverflowError: Если value вне signed 64-bit или value == I64_MIN

    Examples:
        >>> checked_abs_i64(-5)
        5
        >>> checked_abs_i64(I64_MIN)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FractionOverflowError: ...
    """
    if not is_i64(value) or value == I64_MIN:
        raise FractionOverflowError(f"abs({value}) is not representable as signed 64-bit")
    return abs(value)


def checked_mul_u64(a: int, b: int) -> int:
    """
    Умножение модулей с проверкой переполнения.

    Raises:
        FractionOverflowError: Если a * b > U64_MAX
    """
    product = a * b
    if not is_u64(product):
        raise FractionOverflowError(f"{a} * {b} overflows unsigned 64-bit")
    return product


def checked_add_u64(a: int, b: int) -> int:
    """
    Сложение модулей с проверкой переполнения.

    Raises:
        FractionOverflowError: Если a + b > U64_MAX
    """
    total = a + b
    if not is_u64(total):
        raise FractionOverflowError(f"{a} + {b} overflows unsigned 64-bit")
    return total
