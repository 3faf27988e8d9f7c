"""Three-way comparison used to match payloads."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

type Comparator[T] = Callable[[T, T], int]


@runtime_checkable
class Comparable(Protocol):
    """A payload that knows how to compare itself against another payload.

    ``compare`` returns a negative number, zero or a positive number when
    ``self`` is less than, equal to or greater than ``other``.
    """

    def compare(self, other: Any) -> int: ...


def three_way_compare(left: Any, right: Any) -> int:
    """Compare two payloads, returning 1, 0 or -1.

    Payloads implementing :class:`Comparable` are asked first; anything else
    falls back to the rich comparison operators. Either way the result is
    clamped to 1, 0 or -1.

    Example:
        >>> three_way_compare(3, 2)
        1
        >>> three_way_compare("a", "a")
        0

    """
    if isinstance(left, Comparable):
        result = left.compare(right)
        return (result > 0) - (result < 0)
    if left > right:
        return 1
    if left == right:
        return 0
    return -1
