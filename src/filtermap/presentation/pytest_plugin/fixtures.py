"""pytest fixtures for filter/map testing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from filtermap.application.scenarios import DEFAULT_NUMBERS, DEFAULT_WORDS
from filtermap.infrastructure.recording import RecordingCallable

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def call_recorder() -> Callable[..., RecordingCallable]:
    """Factory wrapping a callable in RecordingCallable.

    Usage:
        def test_order(call_recorder):
            pred = call_recorder(is_even)
            filter_items([1, 2], pred)
            assert pred.calls == (1, 2)

    Returns:
        Function (func, name=None) -> RecordingCallable
    """

    def _make(func: Callable[[Any], Any], name: str | None = None) -> RecordingCallable:
        return RecordingCallable(func, name=name)

    return _make


@pytest.fixture
def reference_numbers() -> tuple[int, ...]:
    """Integer scenario input: 1..10."""
    return DEFAULT_NUMBERS


@pytest.fixture
def reference_words() -> tuple[str, ...]:
    """String scenario input."""
    return DEFAULT_WORDS
