"""Tests for domain transforms."""

import pytest

from filtermap.domain.exceptions import InvalidCallableError
from filtermap.domain.transforms import compose, double, identity, multiply_by, to_lower, to_upper


class TestIdentity:
    """Tests for identity."""

    def test_returns_same_object(self) -> None:
        """Identity returns its argument unchanged."""
        item = object()

        assert identity(item) is item


class TestNumeric:
    """Tests for numeric transforms."""

    def test_double(self) -> None:
        """Double multiplies by two."""
        assert [double(n) for n in (-1, 0, 3)] == [-2, 0, 6]

    def test_multiply_by(self) -> None:
        """multiply_by uses the given factor."""
        assert multiply_by(5)(3) == 15


class TestText:
    """Tests for string transforms."""

    def test_upper(self) -> None:
        """to_upper upper-cases."""
        assert to_upper("taratata") == "TARATATA"

    def test_lower(self) -> None:
        """to_lower lower-cases."""
        assert to_lower("TiTi") == "titi"


class TestCompose:
    """Tests for compose."""

    def test_left_to_right(self) -> None:
        """compose(f, g)(x) == g(f(x))."""
        assert compose(double, str)(4) == "8"
        assert compose(str, to_upper)("ab") == "AB"

    def test_empty_is_identity(self) -> None:
        """compose() with no transforms returns input."""
        assert compose()(7) == 7

    def test_non_callable_raises(self) -> None:
        """Non-callable member raises at construction."""
        with pytest.raises(InvalidCallableError, match="transform"):
            compose(double, 2)  # type: ignore[arg-type]
