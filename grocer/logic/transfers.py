"""Operations that move items between the pantry, the shopping list and saved recipes.

Moves insert a copy with a fresh id into the destination and then remove the
source by its original id, both inside one household transaction.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set

from grocer.domain.Item import PantryItem, ShoppingListItem, Unit
from grocer.domain.Recipe import ParsedIngredient, Recipe
from grocer.logic.categories import infer_category
from grocer.logic.ownership import normalize_name

logger = logging.getLogger(__name__)

__all__ = [
    "move_to_shopping_list", "mark_as_purchased", "add_missing_ingredients",
    "missing_ingredients", "preselect_ingredients", "add_parsed_to_shopping_list",
    "added_message",
]


def move_to_shopping_list(household, pantry_item_id: str) -> Optional[ShoppingListItem]:
    """Pantry -> shopping list. Quantity and unit are dropped. Returns None for an unknown id."""
    with household.transaction():
        source = household.pantry.get(pantry_item_id)
        if source is None:
            return None
        moved = household.shopping_list.append(ShoppingListItem(name=source.name, category=source.category))
        household.pantry.remove(source.id)
    logger.info("Moved %s from pantry to shopping list", source.name)
    return moved


def mark_as_purchased(household, shopping_item_id: str) -> Optional[PantryItem]:
    """Shopping list -> pantry with quantity 1 and unit pcs, never merged with an existing entry."""
    with household.transaction():
        source = household.shopping_list.get(shopping_item_id)
        if source is None:
            return None
        bought = household.pantry.append(
            PantryItem(name=source.name, category=source.category, quantity=1, unit=Unit.PCS))
        household.shopping_list.remove(source.id)
    logger.info("Marked %s as purchased", source.name)
    return bought


def missing_ingredients(recipe: Recipe, owned: Set[str]):
    return [ing for ing in recipe.ingredients if normalize_name(ing.name) not in owned]


def add_missing_ingredients(household, recipe: Recipe) -> List[ShoppingListItem]:
    """Append every recipe ingredient that is not owned yet and return what was added.

    The ownership index is read once before adding. Repeated calls are not
    de-duplicated against what an earlier call already put on the list.
    """
    with household.transaction():
        owned = household.owned_names
        new_items = [ShoppingListItem(name=ing.name, category=infer_category(ing.name))
                     for ing in missing_ingredients(recipe, owned)]
        household.shopping_list.extend(new_items)
    logger.info("Added %d missing ingredient(s) from %s", len(new_items), recipe.name)
    return new_items


def added_message(count: int) -> str:
    return f"{count} missing ingredients added to your shopping list!"


def preselect_ingredients(parsed: Iterable[ParsedIngredient], owned: Set[str]) -> Set[str]:
    """Names selected by default on import review: everything not already owned."""
    return {ing.name for ing in parsed if normalize_name(ing.name) not in owned}


def add_parsed_to_shopping_list(household, parsed: Iterable[ParsedIngredient],
                                selected_names: Iterable[str]) -> List[ShoppingListItem]:
    """Append the selected parsed ingredients, keeping the category the parser assigned."""
    selected = set(selected_names)
    with household.transaction():
        new_items = [ShoppingListItem(name=ing.name, category=ing.category)
                     for ing in parsed if ing.name in selected]
        household.shopping_list.extend(new_items)
    logger.info("Imported %d ingredient(s) to the shopping list", len(new_items))
    return new_items
