"""RecordingCallable: call-logging wrapper for predicates and transforms.

Forwards every call to the wrapped function and records the argument
BEFORE invoking it, so a call that raises is still recorded.

Thread-safe: _lock protects the call log.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from filtermap.domain.operations import require_callable

if TYPE_CHECKING:
    from collections.abc import Callable


class RecordingCallable:
    """Single-argument callable that logs its arguments in call order.

    Contract:
      - __call__(x) records x, then returns func(x)
      - exceptions from func propagate unchanged
      - calls is a snapshot tuple; reset() clears the log
    """

    def __init__(self, func: Callable[[Any], Any], name: str | None = None) -> None:
        """Initialize with wrapped function.

        Args:
            func: Function to forward calls to.
            name: Display name (default: func __name__).

        Raises:
            InvalidCallableError: If func is not callable.
        """
        require_callable(func, "func")

        self._func = func
        self._lock = threading.Lock()
        self._calls: list[Any] = []
        self.__name__ = name or getattr(func, "__name__", type(func).__name__)

    def __call__(self, item: Any) -> Any:
        with self._lock:
            self._calls.append(item)
        return self._func(item)

    @property
    def calls(self) -> tuple[Any, ...]:
        """Recorded arguments in call order."""
        with self._lock:
            return tuple(self._calls)

    @property
    def call_count(self) -> int:
        """Number of recorded calls."""
        with self._lock:
            return len(self._calls)

    def reset(self) -> None:
        """Clear the call log."""
        with self._lock:
            self._calls.clear()

    def __repr__(self) -> str:
        return f"RecordingCallable({self.__name__!r}, calls={self.call_count})"
