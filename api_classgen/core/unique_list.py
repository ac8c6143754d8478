"""
Insertion-ordered collection without duplicates.

Used to accumulate import lines of a generated artifact.
"""

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class UniqueList(Generic[T]):
    """List that keeps the first occurrence of every item."""

    def __init__(self, *items: T):
        self._items: List[T] = []
        self._seen = set()
        self.push(*items)

    def push(self, *items: T) -> None:
        """Append every item not already present, keeping existing order."""
        for item in items:
            if item in self._seen:
                continue
            self._seen.add(item)
            self._items.append(item)

    def get(self) -> List[T]:
        """Return a copy of the items in insertion order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._seen

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"
