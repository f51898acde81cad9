"""
Fraction Errors — Типизированные сигналы ошибок

Две категории сбоев:
- FractionError и его подклассы: recoverable-канал. Никогда не выбрасываются
  наружу из try_* / checked_* операций, а возвращаются внутри Outcome.
- FractionAbort: fatal-канал. Выбрасывается non-fallible операциями
  (Fraction.new, операторы +,-,*,/) и останавливает вычисление до того,
  как будет создано невалидное значение.

FractionAbort намеренно НЕ является подклассом FractionError:
`except FractionError` не должен перехватывать fatal-сигнал.
"""

from enum import Enum


# =============================================================================
# ERROR KINDS
# =============================================================================


class FractionErrorKind(str, Enum):
    """Вид ошибки"""

    ZERO_DENOMINATOR = "zero_denominator"
    GCD_ERROR = "gcd_error"
    OVERFLOW = "overflow"


# =============================================================================
# RECOVERABLE ERRORS
# =============================================================================


class FractionError(Exception):
    """
    Базовый класс recoverable-ошибок.

    Каждый подкласс фиксирует свой kind и сообщение по умолчанию.
    """

    kind: FractionErrorKind
    default_message: str = "Fraction error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ZeroDenominatorError(FractionError, ZeroDivisionError):
    """Нулевой знаменатель (включая -0) или деление на нулевую дробь."""

    kind = FractionErrorKind.ZERO_DENOMINATOR
    default_message = "Denominator cannot be zero"


class GcdError(FractionError):
    """
    Ошибка вычисления НОД.

    Возникает, если abs(x) не представим в signed 64-bit (x == I64_MIN)
    либо алгоритм Евклида не сошёлся за GCD_MAX_ITERATIONS итераций.
    """

    kind = FractionErrorKind.GCD_ERROR
    default_message = "Error computing GCD"


class FractionOverflowError(FractionError, OverflowError):
    """Результат не помещается в 64-bit диапазон (вместо молчаливого wraparound)."""

    kind = FractionErrorKind.OVERFLOW
    default_message = "Integer overflow"


# =============================================================================
# FATAL
# =============================================================================


class FractionAbort(RuntimeError):
    """
    Fatal-сигнал: невосстановимое прерывание non-fallible операции.

    Оборачивает исходную FractionError (доступна через __cause__) и
    сохраняет её kind для диагностики.
    """

    def __init__(self, error: FractionError):
        self.kind = error.kind
        self.error = error
        super().__init__(f"{error.kind.value}: {error}")
