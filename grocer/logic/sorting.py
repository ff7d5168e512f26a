"""Sorted projections of a collection. They never change the persisted order."""
from enum import Enum
from typing import Iterable, List


class SortOption(str, Enum):
    DEFAULT = 'Default'
    NAME = 'Name'
    CATEGORY = 'Category'


def _name_key(item) -> str:
    return (item.name or '').casefold()


def sort_items(items: Iterable, option: SortOption = SortOption.DEFAULT) -> List:
    """Return a new list ordered by ``option``; ``sorted`` is stable so ties keep their order."""
    option = SortOption(option)
    result = list(items)
    if option is SortOption.NAME:
        result = sorted(result, key=_name_key)
    elif option is SortOption.CATEGORY:
        result = sorted(result, key=lambda item: ((item.category or '').casefold(), _name_key(item)))
    return result


def reorder_allowed(option: SortOption) -> bool:
    """Manual reordering only makes sense on the unsorted view."""
    return SortOption(option) is SortOption.DEFAULT


__all__ = ["SortOption", "sort_items", "reorder_allowed"]
