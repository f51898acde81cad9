"""
Fraction — Точная рациональная дробь в 64-bit

Immutable Pydantic модель: знак + беззнаковые модули числителя и знаменателя.
Все операции возвращают новый канонический экземпляр.

КАНОНИЧЕСКАЯ ФОРМА:
1. denominator_magnitude > 0
2. gcd(numerator_magnitude, denominator_magnitude) == 1
3. Ноль: ровно 0/1 со знаком POSITIVE (отрицательного нуля нет)

Отсюда: равенство значений ⇔ равенство канонических троек.

Две семьи API:
- try_*: recoverable, возвращают Outcome[Fraction]
- new / simplify / recip / операторы: fatal, выбрасывают FractionAbort
Fatal-формы реализованы как `try_*(...).unwrap()`.
"""

from enum import Enum
from typing import Any, ClassVar, Final, Mapping

from pydantic import BaseModel, Field, model_validator

from exactfrac.core.contracts.errors import FractionOverflowError, ZeroDenominatorError
from exactfrac.core.contracts.outcome import Outcome
from exactfrac.core.math.divisibility import gcd, gcd_u64, lcm
from exactfrac.core.math.integer_bounds import (
    U64_MAX,
    checked_mul_u64,
    is_i64,
    is_u64,
)


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак дроби"""

    POSITIVE = "+"
    NEGATIVE = "-"

    @classmethod
    def of(cls, negative: bool) -> "Sign":
        return cls.NEGATIVE if negative else cls.POSITIVE

    @property
    def factor(self) -> int:
        """Sign factor: +1 / -1"""
        return -1 if self is Sign.NEGATIVE else 1

    def flip(self) -> "Sign":
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE

    def xor(self, other: "Sign") -> "Sign":
        """Знак произведения/частного."""
        return Sign.of(self is not other)


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число в канонической форме.

    Immutable модель (frozen=True). Создаётся только через валидирующие
    конструкторы new / try_new / from_parts; прямой вызов Fraction(...) с
    неканонической тройкой отклоняется model validator'ом.

    model_copy(update=...) проводит обновлённую тройку через from_parts.
    model_construct не поддерживается: он обходит валидацию.
    """

    numerator_magnitude: int = Field(
        ..., ge=0, le=U64_MAX, description="Модуль числителя (unsigned 64-bit)"
    )
    denominator_magnitude: int = Field(
        ..., gt=0, le=U64_MAX, description="Модуль знаменателя (unsigned 64-bit, > 0)"
    )
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак (ноль всегда POSITIVE)")

    model_config = {"frozen": True, "strict": True}

    ZERO: ClassVar["Fraction"]
    ONE: ClassVar["Fraction"]

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "Fraction":
        """
        Проверка канонической формы.

        gcd(0, d) == d, поэтому для нуля проверка gcd == 1 заодно
        гарантирует знаменатель 1.
        """
        if gcd(self.numerator_magnitude, self.denominator_magnitude) != 1:
            raise ValueError(
                f"{self.numerator_magnitude}/{self.denominator_magnitude} is not in lowest terms"
            )
        if self.numerator_magnitude == 0 and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must carry a positive sign")
        return self

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Fraction":
        """
        Копия с обновлёнными полями, приведённая к канонической форме.

        Raises:
            ValueError: Если update содержит неизвестное поле
            FractionAbort: Если обновлённая тройка не даёт валидной дроби
        """
        if not update:
            return super().model_copy(deep=deep)

        unknown = set(update) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"unknown Fraction fields: {sorted(unknown)}")

        parts = {**self.model_dump(), **update}
        return self.from_parts(
            parts["sign"], parts["numerator_magnitude"], parts["denominator_magnitude"]
        )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_parts(cls, sign: Sign, numerator_magnitude: int, denominator_magnitude: int) -> "Fraction":
        _require_int(numerator_magnitude, "numerator_magnitude")
        _require_int(denominator_magnitude, "denominator_magnitude")

        if numerator_magnitude < 0 or denominator_magnitude < 0:
            raise ValueError(
                f"magnitudes must be non-negative, got {numerator_magnitude}/{denominator_magnitude}"
            )
        if denominator_magnitude == 0:
            raise ZeroDenominatorError()

        # Сначала сокращение, затем проверка диапазона: в 64-bit должна
        # помещаться каноническая форма, а не промежуточные значения
        divisor = gcd(numerator_magnitude, denominator_magnitude)
        numerator_magnitude //= divisor
        denominator_magnitude //= divisor

        if numerator_magnitude == 0:
            return ZERO
        if not is_u64(numerator_magnitude) or not is_u64(denominator_magnitude):
            raise FractionOverflowError(
                f"{numerator_magnitude}/{denominator_magnitude}: magnitude outside unsigned 64-bit"
            )

        return cls(
            numerator_magnitude=numerator_magnitude,
            denominator_magnitude=denominator_magnitude,
            sign=sign,
        )

    @classmethod
    def _from_signed(cls, numerator: int, denominator: int) -> "Fraction":
        _require_int(numerator, "numerator")
        _require_int(denominator, "denominator")

        # -0 == 0 для int, отдельной проверки не требуется
        if denominator == 0:
            raise ZeroDenominatorError()
        if not is_i64(numerator) or not is_i64(denominator):
            raise FractionOverflowError(
                f"{numerator}/{denominator}: outside signed 64-bit range"
            )

        sign = Sign.of((numerator < 0) != (denominator < 0))
        return cls._from_parts(sign, abs(numerator), abs(denominator))

    @classmethod
    def try_new(cls, numerator: int, denominator: int) -> Outcome["Fraction"]:
        """
        Валидирующий конструктор (recoverable).

        Args:
            numerator: Числитель (signed 64-bit)
            denominator: Знаменатель (signed 64-bit, != 0)

        Returns:
            Outcome с канонической дробью или ошибкой:
            - ZeroDenominatorError: denominator == 0
            - FractionOverflowError: аргумент вне signed 64-bit

        Raises:
            TypeError: Если аргумент не int

        Examples:
            >>> str(Fraction.try_new(6, -8).unwrap())
            '-3/4'
            >>> Fraction.try_new(1, 0).ok
            False
        """
        return Outcome.capture(cls._from_signed, numerator, denominator)

    @classmethod
    def new(cls, numerator: int, denominator: int) -> "Fraction":
        """
        Конструктор для вызывающего кода, который уже гарантировал валидность.

        Raises:
            FractionAbort: При нулевом знаменателе или выходе за 64-bit
        """
        return cls.try_new(numerator, denominator).unwrap()

    @classmethod
    def from_integer(cls, value: int) -> "Fraction":
        return cls.new(value, 1)

    @classmethod
    def try_from_parts(
        cls, sign: Sign, numerator_magnitude: int, denominator_magnitude: int
    ) -> Outcome["Fraction"]:
        """
        Конструктор из знака и неотрицательных модулей.

        Результат приводится к канонической форме; модули канонической
        формы должны помещаться в unsigned 64-bit (иначе FractionOverflowError).

        Raises:
            ValueError: Если модуль отрицательный
            TypeError: Если модуль не int
        """
        return Outcome.capture(cls._from_parts, sign, numerator_magnitude, denominator_magnitude)

    @classmethod
    def from_parts(cls, sign: Sign, numerator_magnitude: int, denominator_magnitude: int) -> "Fraction":
        return cls.try_from_parts(sign, numerator_magnitude, denominator_magnitude).unwrap()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        """Знаковый числитель"""
        return self.sign.factor * self.numerator_magnitude

    @property
    def denominator(self) -> int:
        return self.denominator_magnitude

    @property
    def is_zero(self) -> bool:
        return self.numerator_magnitude == 0

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_integer(self) -> bool:
        return self.denominator_magnitude == 1

    # -------------------------------------------------------------------------
    # Упрощение
    # -------------------------------------------------------------------------

    def try_simplify(self) -> Outcome["Fraction"]:
        """
        Приведение к канонической форме (идемпотентно).

        Для экземпляров, прошедших model validator, всегда возвращает
        равное значение. Нулевой знаменатель всё равно проверяется.
        """
        return self.try_from_parts(self.sign, self.numerator_magnitude, self.denominator_magnitude)

    def simplify(self) -> "Fraction":
        return self.try_simplify().unwrap()

    # -------------------------------------------------------------------------
    # Арифметика: ядро
    # -------------------------------------------------------------------------

    def _add(self, other: "Fraction") -> "Fraction":
        # Общий знаменатель: НОК знаменателей. Промежуточные значения
        # вычисляются точно в Python int; диапазон проверяет _from_parts
        denominator = lcm(self.denominator_magnitude, other.denominator_magnitude)
        left = self.numerator_magnitude * (denominator // self.denominator_magnitude)
        right = other.numerator_magnitude * (denominator // other.denominator_magnitude)

        if self.sign is other.sign:
            return self._from_parts(self.sign, left + right, denominator)
        if left >= right:
            return self._from_parts(self.sign, left - right, denominator)
        return self._from_parts(other.sign, right - left, denominator)

    def _sub(self, other: "Fraction") -> "Fraction":
        if self == other:
            return ZERO
        return self._add(-other)

    def _mul(self, other: "Fraction") -> "Fraction":
        # Перекрёстное сокращение до умножения: произведения уже несократимы,
        # поэтому переполнение здесь ⇔ результат не представим в 64-bit
        cross_left = gcd_u64(self.numerator_magnitude, other.denominator_magnitude)
        cross_right = gcd_u64(other.numerator_magnitude, self.denominator_magnitude)

        numerator = checked_mul_u64(
            self.numerator_magnitude // cross_left,
            other.numerator_magnitude // cross_right,
        )
        denominator = checked_mul_u64(
            self.denominator_magnitude // cross_right,
            other.denominator_magnitude // cross_left,
        )
        return self._from_parts(self.sign.xor(other.sign), numerator, denominator)

    def _recip(self) -> "Fraction":
        if self.is_zero:
            raise ZeroDenominatorError("Reciprocal of zero is undefined")
        return self._from_parts(self.sign, self.denominator_magnitude, self.numerator_magnitude)

    def _div(self, other: "Fraction") -> "Fraction":
        if other.is_zero:
            raise ZeroDenominatorError("Division by a zero-valued fraction")
        return self._mul(other._recip())

    # -------------------------------------------------------------------------
    # Арифметика: recoverable
    # -------------------------------------------------------------------------

    def try_add(self, other: "Fraction") -> Outcome["Fraction"]:
        return Outcome.capture(self._add, other)

    def try_sub(self, other: "Fraction") -> Outcome["Fraction"]:
        return Outcome.capture(self._sub, other)

    def try_mul(self, other: "Fraction") -> Outcome["Fraction"]:
        """
        Умножение.

        Returns:
            Outcome с произведением или FractionOverflowError, если модуль
            числителя или знаменателя результата > U64_MAX
        """
        return Outcome.capture(self._mul, other)

    def try_div(self, other: "Fraction") -> Outcome["Fraction"]:
        """
        Деление: self * other.recip().

        Returns:
            Outcome с частным или ZeroDenominatorError, если other == ZERO
        """
        return Outcome.capture(self._div, other)

    def try_recip(self) -> Outcome["Fraction"]:
        return Outcome.capture(self._recip)

    # -------------------------------------------------------------------------
    # Арифметика: fatal
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        return self.try_add(other).unwrap()

    def sub(self, other: "Fraction") -> "Fraction":
        return self.try_sub(other).unwrap()

    def mul(self, other: "Fraction") -> "Fraction":
        return self.try_mul(other).unwrap()

    def div(self, other: "Fraction") -> "Fraction":
        return self.try_div(other).unwrap()

    def recip(self) -> "Fraction":
        return self.try_recip().unwrap()

    def neg(self) -> "Fraction":
        """Смена знака. -ZERO == ZERO."""
        if self.is_zero:
            return self
        return Fraction(
            numerator_magnitude=self.numerator_magnitude,
            denominator_magnitude=self.denominator_magnitude,
            sign=self.sign.flip(),
        )

    # Операторы. Compound-формы (+=, -=, *=, /=) не определены явно:
    # Python использует бинарный оператор и перепривязывает имя.

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Fraction":
        return self.neg()

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        if self.is_negative:
            return self.neg()
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction") -> int:
        """
        Сравнение значений.

        Перекрёстное умножение n1*d2 vs n2*d1 выполняется в Python int:
        произведение двух 64-bit модулей занимает не более 128 бит и
        вычисляется точно, переполнения нет.

        Returns:
            -1 если self < other
             0 если self == other
            +1 если self > other

        Examples:
            >>> Fraction.new(1, 3).compare(Fraction.new(1, 2))
            -1
        """
        left = self.numerator * other.denominator_magnitude
        right = other.numerator * self.denominator_magnitude

        if left < right:
            return -1
        elif left > right:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (
            self.sign is other.sign
            and self.numerator_magnitude == other.numerator_magnitude
            and self.denominator_magnitude == other.denominator_magnitude
        )

    def __hash__(self) -> int:
        return hash((self.sign, self.numerator_magnitude, self.denominator_magnitude))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        "N/D" / "-N/D"; для целых "N" / "-N"; ноль "0".

        Examples:
            >>> str(Fraction.new(1, -2))
            '-1/2'
            >>> str(Fraction.new(4, 2))
            '2'
        """
        prefix = "-" if self.is_negative else ""
        if self.is_integer:
            return f"{prefix}{self.numerator_magnitude}"
        return f"{prefix}{self.numerator_magnitude}/{self.denominator_magnitude}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"Fraction(numerator={self.numerator}, denominator={self.denominator})"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Fraction] = Fraction(numerator_magnitude=0, denominator_magnitude=1)
ONE: Final[Fraction] = Fraction(numerator_magnitude=1, denominator_magnitude=1)

Fraction.ZERO = ZERO
Fraction.ONE = ONE
