"""String predicates.

Counting is per character: each character of the string that belongs
to the letter set counts once, regardless of position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.domain.exceptions import EmptyLettersError, InvalidCountError

if TYPE_CHECKING:
    from filtermap.domain.types import Predicate


def contains_at_least(letters: str, count: int, *, ignore_case: bool = False) -> Predicate[str]:
    """Create predicate matching strings with at least count of the given letters.

    Args:
        letters: Characters to count (e.g. "tT"). Order irrelevant.
        count: Minimum number of matching characters (>= 1).
        ignore_case: Compare casefolded characters.

    Returns:
        Predicate that returns True when the string holds at least
        count characters drawn from letters.

    Raises:
        EmptyLettersError: If letters is empty.
        InvalidCountError: If count < 1.

    Example:
        >>> contains_at_least("t", 2)("titi")
        True
    """
    if not letters:
        raise EmptyLettersError
    if count < 1:
        raise InvalidCountError(count)

    letter_set = frozenset(letters.casefold() if ignore_case else letters)

    def _predicate(text: str) -> bool:
        chars = text.casefold() if ignore_case else text
        found = 0
        for char in chars:
            if char in letter_set:
                found += 1
                if found >= count:
                    return True
        return False

    return _predicate


# Same language as the pattern .*[tT].*[tT].*
has_at_least_two_t: Predicate[str] = contains_at_least("tT", 2)
