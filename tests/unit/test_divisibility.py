"""
Тесты для модуля Divisibility

Проверяет:
1. gcd / lcm на эталонных значениях
2. Граничные случаи с нулём (gcd(0, 0), lcm(x, 0))
3. checked_gcd: отказ на I64_MIN, вне диапазона и при превышении лимита итераций
4. checked_lcm: проброс ошибки gcd и сигнал переполнения
5. gcd_u64 / lcm_u64 для модулей unsigned 64-bit
"""

import pytest

from exactfrac.core.contracts.errors import (
    FractionErrorKind,
    FractionOverflowError,
    GcdError,
)
from exactfrac.core.math import divisibility
from exactfrac.core.math.divisibility import (
    checked_gcd,
    checked_lcm,
    gcd,
    gcd_u64,
    lcm,
    lcm_u64,
)
from exactfrac.core.math.integer_bounds import I64_MAX, I64_MIN, U64_MAX

# Соседние числа Фибоначчи: худший случай для алгоритма Евклида
FIB_91: int = 4660046610375530309
FIB_92: int = 7540113804746346429


# =============================================================================
# ТЕСТЫ GCD / LCM
# =============================================================================


class TestGcd:
    """Тесты gcd"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (54, 24, 6),
            (0, 10, 10),
            (5, 0, 5),
            (101, 103, 1),
            (0, 0, 0),
            (-54, 24, 6),
            (54, -24, 6),
            (-54, -24, 6),
        ],
    )
    def test_reference_values(self, a: int, b: int, expected: int) -> None:
        assert gcd(a, b) == expected

    def test_symmetric(self) -> None:
        assert gcd(24, 54) == gcd(54, 24)

    def test_unbounded_inputs(self) -> None:
        """Неограниченный вариант работает за пределами 64-bit"""
        assert gcd(2**100, 2**70) == 2**70


class TestLcm:
    """Тесты lcm"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (4, 5, 20),
            (7, 3, 21),
            (21, 6, 42),
            (-4, 6, 12),
            (6, 6, 6),
        ],
    )
    def test_reference_values(self, a: int, b: int, expected: int) -> None:
        assert lcm(a, b) == expected

    def test_zero_operands(self) -> None:
        """lcm(0, 0) не делит на gcd(0, 0) == 0"""
        assert lcm(0, 0) == 0
        assert lcm(7, 0) == 0
        assert lcm(0, 7) == 0


# =============================================================================
# ТЕСТЫ CHECKED_GCD
# =============================================================================


class TestCheckedGcd:
    """Тесты checked_gcd"""

    def test_matches_gcd(self) -> None:
        outcome = checked_gcd(54, 24)
        assert outcome.ok
        assert outcome.value == 6

    def test_zero_zero(self) -> None:
        assert checked_gcd(0, 0).value == 0

    def test_min_value_fails(self) -> None:
        """abs(I64_MIN) не представим → GcdError"""
        outcome = checked_gcd(I64_MIN, 1)

        assert not outcome.ok
        assert isinstance(outcome.error, GcdError)
        assert outcome.error.kind is FractionErrorKind.GCD_ERROR
        assert "Error computing GCD" in str(outcome.error)

    def test_out_of_range_fails(self) -> None:
        assert isinstance(checked_gcd(1, I64_MAX + 1).error, GcdError)

    def test_near_min_value_succeeds(self) -> None:
        assert checked_gcd(I64_MIN + 1, I64_MAX).value == I64_MAX

    def test_fibonacci_worst_case_converges(self) -> None:
        """Худший случай 64-bit укладывается в лимит итераций"""
        assert checked_gcd(FIB_92, FIB_91).value == 1

    def test_iteration_cap_enforced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Превышение лимита итераций → GcdError"""
        monkeypatch.setattr(divisibility, "GCD_MAX_ITERATIONS", 1)

        outcome = checked_gcd(54, 24)

        assert isinstance(outcome.error, GcdError)
        assert "did not converge" in str(outcome.error)


# =============================================================================
# ТЕСТЫ CHECKED_LCM
# =============================================================================


class TestCheckedLcm:
    """Тесты checked_lcm"""

    def test_reference_values(self) -> None:
        assert checked_lcm(4, 5).value == 20
        assert checked_lcm(21, 6).value == 42
        assert checked_lcm(-4, 6).value == 12

    def test_zero_operands(self) -> None:
        assert checked_lcm(0, 0).value == 0
        assert checked_lcm(9, 0).value == 0

    def test_gcd_failure_propagates(self) -> None:
        outcome = checked_lcm(I64_MIN, 2)
        assert isinstance(outcome.error, GcdError)

    def test_overflow_signaled(self) -> None:
        """Взаимно простые большие значения: НОК не помещается в signed 64-bit"""
        outcome = checked_lcm(I64_MAX, I64_MAX - 1)

        assert isinstance(outcome.error, FractionOverflowError)
        assert outcome.error.kind is FractionErrorKind.OVERFLOW

    def test_largest_fitting_result(self) -> None:
        assert checked_lcm(I64_MAX, 1).value == I64_MAX


# =============================================================================
# ТЕСТЫ UNSIGNED 64-BIT
# =============================================================================


class TestUnsignedVariants:
    """Тесты gcd_u64 / lcm_u64"""

    def test_gcd_u64_full_range(self) -> None:
        assert gcd_u64(U64_MAX, 3) == 3
        assert gcd_u64(2**63, 2**10) == 2**10

    def test_gcd_u64_rejects_out_of_range(self) -> None:
        with pytest.raises(FractionOverflowError):
            gcd_u64(U64_MAX + 1, 1)
        with pytest.raises(FractionOverflowError):
            gcd_u64(-1, 1)

    def test_lcm_u64(self) -> None:
        assert lcm_u64(4, 6) == 12
        assert lcm_u64(2**63, 2) == 2**63

    def test_lcm_u64_overflow(self) -> None:
        with pytest.raises(FractionOverflowError, match="lcm"):
            lcm_u64(U64_MAX, U64_MAX - 1)
