"""Derived ownership index: lower-cased names of everything in the pantry or on the shopping list."""
from __future__ import annotations
from typing import Iterable, Set

__all__ = ["normalize_name", "owned_names", "is_owned"]


def normalize_name(name: str) -> str:
    return (name or '').lower()


def owned_names(pantry_items: Iterable, shopping_list_items: Iterable) -> Set[str]:
    """Return the case-folded union of pantry and shopping-list names.

    Recomputed from the items passed in on every call; nothing is cached.
    """
    pantry_names = {normalize_name(item.name) for item in pantry_items}
    shopping_names = {normalize_name(item.name) for item in shopping_list_items}
    return pantry_names | shopping_names


def is_owned(name: str, owned: Set[str]) -> bool:
    return normalize_name(name) in owned
