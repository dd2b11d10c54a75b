"""Ordering helpers."""

from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def unique_in_order(items: Iterable[T]) -> list[T]:
    """Drop repeated items, keeping the first occurrence of each.

    Args:
        items: Hashable items in their original order.

    Returns:
        A new list with duplicates removed.
    """
    # dict keys preserve insertion order
    return list(dict.fromkeys(items))
