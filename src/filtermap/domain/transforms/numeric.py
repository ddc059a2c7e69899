"""Numeric transforms."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filtermap.domain.types import Transform


def multiply_by(factor: int) -> Transform[int, int]:
    """Create transform multiplying values by factor."""

    def _transform(value: int) -> int:
        return value * factor

    return _transform


double: Transform[int, int] = multiply_by(2)
