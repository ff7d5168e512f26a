"""Pantry endpoints."""
import logging

from fastapi import APIRouter, HTTPException, Query, status

from grocer.api.dependencies import HouseholdDep, require_found, require_reorder_allowed
from grocer.domain.Item import PantryItem
from grocer.logic.sorting import SortOption, sort_items
from grocer.logic.transfers import move_to_shopping_list
from grocer.utilities.validators import ItemUpdateInput, PantryItemInput, ReorderInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])
logger = logging.getLogger(__name__)


@router.get("")
def list_pantry(household: HouseholdDep, sort: SortOption = Query(default=SortOption.DEFAULT)):
    items = sort_items(household.pantry.get_items(), sort)
    return {"items": [i.to_dict() for i in items], "sort": sort.value, "reorder_enabled": sort is SortOption.DEFAULT}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_pantry_item(payload: PantryItemInput, household: HouseholdDep):
    item = PantryItem(name=payload.name, category=payload.category, quantity=payload.quantity, unit=payload.unit)
    with household.transaction():
        household.pantry.append(item)
    logger.info("Pantry add: %s", item)
    return item.to_dict()


@router.patch("/{item_id}")
def update_pantry_item(item_id: str, payload: ItemUpdateInput, household: HouseholdDep):
    with household.transaction():
        item = household.pantry.update(item_id, **payload.fields())
    return require_found(item, "Pantry item").to_dict()


@router.post("/{item_id}/increment")
def increment_pantry_item(item_id: str, household: HouseholdDep):
    with household.transaction():
        item = household.pantry.increment(item_id)
    return require_found(item, "Pantry item").to_dict()


@router.post("/{item_id}/decrement")
def decrement_pantry_item(item_id: str, household: HouseholdDep):
    with household.transaction():
        item = household.pantry.decrement(item_id)
    return require_found(item, "Pantry item").to_dict()


@router.delete("/{item_id}")
def delete_pantry_item(item_id: str, household: HouseholdDep):
    with household.transaction():
        item = household.pantry.remove(item_id)
    require_found(item, "Pantry item")
    return {"status": "deleted", "id": item_id}


@router.put("/order")
def reorder_pantry(payload: ReorderInput, household: HouseholdDep):
    require_reorder_allowed(payload.sort)
    try:
        with household.transaction():
            items = household.pantry.reorder(payload.ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"items": [i.to_dict() for i in items]}


@router.post("/{item_id}/move-to-shopping-list")
def move_pantry_item(item_id: str, household: HouseholdDep):
    moved = require_found(move_to_shopping_list(household, item_id), "Pantry item")
    return {"moved": moved.to_dict(), "removed_id": item_id}
