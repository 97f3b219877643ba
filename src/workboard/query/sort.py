# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

SortInstruction = tuple[Callable[[T], Optional[Any]], bool]


def sort_items(items: list[T], sort_instructions: list[SortInstruction[T]]) -> list[T]:
    """
    Sort items by several keys, the first instruction being the primary key.

    Each instruction is a (key, descending) pair. Items whose key is None are
    kept after all items with a value for that key, whatever the direction.
    Sorting is stable, so equal items keep their input order.
    """
    sorted_items = list(items)

    for key, descending in reversed(sort_instructions):
        none_items = [item for item in sorted_items if key(item) is None]
        value_items = [item for item in sorted_items if key(item) is not None]
        value_items.sort(key=key, reverse=descending)
        sorted_items = value_items + none_items

    return sorted_items
