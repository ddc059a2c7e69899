"""String transforms."""


def to_upper(text: str) -> str:
    """Return text in upper case."""
    return text.upper()


def to_lower(text: str) -> str:
    """Return text in lower case."""
    return text.lower()
