"""An iterator that is untruthful about its length.

Consumers such as ``list()`` or ``bytearray()`` size their buffers from
:func:`operator.length_hint`. :class:`BadIterator` reports ``claimed`` items
there while actually producing ``limit`` items, so tests can check that a
consumer neither truncates nor pads its output when the hint is wrong in
either direction.
"""

import operator
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["BadIterator"]


def _count(name: str, value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a non-negative integer")
    try:
        value = operator.index(value)
    except TypeError as exc:
        raise ValueError(f"{name} must be a non-negative integer") from exc
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return value


@dataclass(init=False, repr=False)
class BadIterator(Generic[T]):
    """Produce ``limit`` items while claiming to produce ``claimed``.

    Items are repeated in order when ``limit`` exceeds ``len(items)``.
    """

    _limit: int
    _claimed: int
    items: list[T]
    _cur: int = 0

    def __init__(self, limit: int, claimed: int, items: Iterable[T]) -> None:
        """Create the iterator.

        Args:
            limit: Number of items actually produced.
            claimed: Upper bound reported by :meth:`size_hint`.
            items: Items to cycle through. Must not be empty.

        Raises:
            ValueError: If ``items`` is empty or a count is not a
                non-negative integer.
        """

        self._limit = _count("limit", limit)
        self._claimed = _count("claimed", claimed)
        self.items = list(items)
        if not self.items:
            raise ValueError("items must not be empty")
        self._cur = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(limit={self._limit}, "
            f"claimed={self._claimed}, items={self.items!r})"
        )

    def __copy__(self) -> "BadIterator[T]":
        clone = type(self)(self._limit, self._claimed, self.items)
        clone._cur = self._cur
        return clone

    @property
    def limit(self) -> int:
        """Number of items actually produced."""
        return self._limit

    @property
    def claimed(self) -> int:
        """Upper bound reported by :meth:`size_hint`."""
        return self._claimed

    @property
    def position(self) -> int:
        """Number of items produced so far."""
        return self._cur

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._cur >= self._limit:
            raise StopIteration
        item = self.items[self._cur % len(self.items)]
        self._cur += 1
        return item

    def size_hint(self) -> tuple[int, int]:
        """Return ``(0, claimed)`` whatever is actually left."""
        return 0, self._claimed

    def __length_hint__(self) -> int:
        return self._claimed

    def remaining(self) -> int:
        """Return how many items will really be produced from here on."""
        return self._limit - self._cur
