"""pytest plugin for filtermap.

Provides fixtures for testing predicates, transforms and pipelines:
    call_recorder: Factory wrapping callables in RecordingCallable
    reference_numbers: Integer scenario input (1..10)
    reference_words: String scenario input
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from filtermap.presentation.pytest_plugin.fixtures import (
    call_recorder,
    reference_numbers,
    reference_words,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "call_recorder",
    "reference_numbers",
    "reference_words",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "filtermap: mark test as filter/map contract test",
    )
