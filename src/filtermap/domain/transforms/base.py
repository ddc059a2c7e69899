"""Generic transforms: identity and composition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from filtermap.domain.operations import require_callable

if TYPE_CHECKING:
    from filtermap.domain.types import Transform


def identity[T](item: T) -> T:
    """Return item unchanged."""
    return item


def compose(*transforms: Transform[Any, Any]) -> Transform[Any, Any]:
    """Create transform applying transforms left to right.

    compose(f, g)(x) == g(f(x)).

    Args:
        *transforms: Transforms to chain.

    Returns:
        Chained transform. Empty transforms = identity.

    Raises:
        InvalidCallableError: If any transform is not callable.
    """
    for transform in transforms:
        require_callable(transform, "transform")

    def _transform(item: Any) -> Any:
        result = item
        for transform in transforms:
            result = transform(result)
        return result

    return _transform
