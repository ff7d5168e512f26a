"""Shopping-list endpoints."""
import logging

from fastapi import APIRouter, HTTPException, Query, status

from grocer.api.dependencies import HouseholdDep, require_found, require_reorder_allowed
from grocer.domain.Item import ShoppingListItem
from grocer.logic.sorting import SortOption, sort_items
from grocer.logic.transfers import mark_as_purchased
from grocer.utilities.validators import ItemUpdateInput, ReorderInput, ShoppingListItemInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])
logger = logging.getLogger(__name__)


@router.get("")
def list_shopping(household: HouseholdDep, sort: SortOption = Query(default=SortOption.DEFAULT)):
    items = sort_items(household.shopping_list.get_items(), sort)
    return {"items": [i.to_dict() for i in items], "sort": sort.value, "reorder_enabled": sort is SortOption.DEFAULT}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_shopping_item(payload: ShoppingListItemInput, household: HouseholdDep):
    item = ShoppingListItem(name=payload.name, category=payload.category)
    with household.transaction():
        household.shopping_list.append(item)
    logger.info("Shopping list add: %s", item)
    return item.to_dict()


@router.patch("/{item_id}")
def update_shopping_item(item_id: str, payload: ItemUpdateInput, household: HouseholdDep):
    with household.transaction():
        item = household.shopping_list.update(item_id, **payload.fields())
    return require_found(item, "Shopping list item").to_dict()


@router.delete("/{item_id}")
def delete_shopping_item(item_id: str, household: HouseholdDep):
    with household.transaction():
        item = household.shopping_list.remove(item_id)
    require_found(item, "Shopping list item")
    return {"status": "deleted", "id": item_id}


@router.put("/order")
def reorder_shopping(payload: ReorderInput, household: HouseholdDep):
    require_reorder_allowed(payload.sort)
    try:
        with household.transaction():
            items = household.shopping_list.reorder(payload.ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"items": [i.to_dict() for i in items]}


@router.post("/{item_id}/purchase")
def purchase_shopping_item(item_id: str, household: HouseholdDep):
    bought = require_found(mark_as_purchased(household, item_id), "Shopping list item")
    return {"purchased": bought.to_dict(), "removed_id": item_id}
