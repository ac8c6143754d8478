"""Sorting helpers that make generated output independent of insertion order."""

from typing import Any, Callable, Iterable, List, TypeVar, Union

T = TypeVar("T")


def sort_values(values: Iterable[T]) -> List[T]:
    """Return the values sorted alphabetically."""
    return sorted(values)


def sort_by(entries: Iterable[T], key: Union[int, str, Callable[[T], Any]]) -> List[T]:
    """
    Stable sort of entries by one of their components.

    Args:
        entries: Items to sort
        key: Index or mapping key looked up on every entry, or a callable

    Returns:
        New sorted list; entries with equal keys keep their relative order
    """
    if callable(key):
        return sorted(entries, key=key)
    return sorted(entries, key=lambda entry: entry[key])
