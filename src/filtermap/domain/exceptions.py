"""Domain exceptions: all public errors of filtermap.

All exceptions visible to users are defined in domain.
Application/Infrastructure use these, not define their own public exceptions.

Errors raised by caller-supplied predicates and transforms are NOT
represented here: they propagate to the caller unchanged.
"""


class FilterMapError(Exception):
    """Base for all filtermap error exceptions.

    Allows: except FilterMapError to catch all library errors.
    """


class InvalidCallableError(FilterMapError, TypeError):
    """Argument must be callable.

    Raised when a predicate, transform or wrapped function is not callable.
    Inherits TypeError for semantic correctness.

    Attributes:
        role: What the callable was meant to be ("predicate", "transform", ...).
        got: Actual type received.
    """

    def __init__(self, role: str, got: type) -> None:
        """Initialize with role and actual type."""
        self.role = role
        self.got = got
        super().__init__(f"{role} must be callable, got {got.__name__}")


class InvalidCountError(FilterMapError, ValueError):
    """Count must be >= 1.

    Raised when a counting predicate is built with a count below 1.

    Attributes:
        count: Invalid count value.
    """

    def __init__(self, count: int) -> None:
        """Initialize with invalid count."""
        self.count = count
        super().__init__(f"count must be >= 1, got {count}")


class InvalidDivisorError(FilterMapError, ValueError):
    """Divisor must be non-zero.

    Attributes:
        divisor: Invalid divisor value.
    """

    def __init__(self, divisor: int) -> None:
        """Initialize with invalid divisor."""
        self.divisor = divisor
        super().__init__(f"divisor must not be zero, got {divisor}")


class EmptyLettersError(FilterMapError, ValueError):
    """Letter set must not be empty."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("letters must not be empty")
