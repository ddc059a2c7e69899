"""Tests for numeric predicates."""

import pytest

from filtermap.domain.exceptions import InvalidDivisorError
from filtermap.domain.predicates.numeric import is_divisible_by, is_even, is_odd


class TestParity:
    """Tests for is_even / is_odd."""

    @pytest.mark.parametrize("value", [-4, -2, 0, 2, 10])
    def test_even(self, value: int) -> None:
        """Even values (including zero and negatives)."""
        assert is_even(value) is True
        assert is_odd(value) is False

    @pytest.mark.parametrize("value", [-3, -1, 1, 7])
    def test_odd(self, value: int) -> None:
        """Odd values (including negatives)."""
        assert is_even(value) is False
        assert is_odd(value) is True


class TestIsDivisibleBy:
    """Tests for is_divisible_by."""

    def test_multiples(self) -> None:
        """Multiples of divisor match."""
        pred = is_divisible_by(3)

        assert [n for n in range(10) if pred(n)] == [0, 3, 6, 9]

    def test_negative_divisor(self) -> None:
        """Negative divisor matches the same multiples."""
        assert is_divisible_by(-3)(9) is True

    def test_zero_divisor_raises(self) -> None:
        """Zero divisor raises at construction (FAIL-FIRST)."""
        with pytest.raises(InvalidDivisorError):
            is_divisible_by(0)
