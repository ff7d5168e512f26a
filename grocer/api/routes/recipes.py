"""Saved-recipe endpoints: generate, save, delete with confirmation, add missing ingredients."""
import logging

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from grocer.api.dependencies import AssistantDep, HouseholdDep, get_guard, require_found
from grocer.logic.markdown import render_instructions
from grocer.logic.transfers import add_missing_ingredients, added_message
from grocer.utilities.constants import NO_INGREDIENTS_SELECTED_MESSAGE
from grocer.utilities.errors import ValidationFailure
from grocer.utilities.validators import GenerateRecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


class SaveRecipeInput(BaseModel):
    id: str


@router.get("")
def list_recipes(household: HouseholdDep):
    return {"recipes": [r.to_dict() for r in household.recipes.get_items()]}


@router.post("/generate")
def generate_recipe(payload: GenerateRecipeInput, request: Request, household: HouseholdDep, assistant: AssistantDep):
    """Generate a recipe from the selected pantry items. The result is pending until saved."""
    wanted = set(payload.item_ids)
    selected = [item for item in household.pantry.get_items() if item.id in wanted]
    if not selected:
        raise ValidationFailure(NO_INGREDIENTS_SELECTED_MESSAGE)
    with get_guard(request, "generate").hold():
        request.app.state.pending_recipe = None
        recipe = assistant.generate_recipe(selected, payload.strict_mode, payload.filters)
    request.app.state.pending_recipe = recipe
    return {"recipe": recipe.to_dict(), "instructions_html": render_instructions(recipe.instructions)}


@router.post("", status_code=status.HTTP_201_CREATED)
def save_recipe(payload: SaveRecipeInput, request: Request, household: HouseholdDep):
    pending = request.app.state.pending_recipe
    if pending is None or pending.id != payload.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No generated recipe with this id")
    with household.transaction():
        household.recipes.append(pending)
    request.app.state.pending_recipe = None
    logger.info("Saved recipe %s", pending.name)
    return pending.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, household: HouseholdDep, confirm: bool = Query(default=False)):
    require_found(household.recipes.get(recipe_id), "Recipe")
    if not confirm:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail="Are you sure you want to delete this recipe? Repeat with confirm=true.")
    with household.transaction():
        household.recipes.remove(recipe_id)
    return {"status": "deleted", "id": recipe_id}


@router.post("/{recipe_id}/add-missing")
def add_missing(recipe_id: str, household: HouseholdDep):
    recipe = require_found(household.recipes.get(recipe_id), "Recipe")
    added = add_missing_ingredients(household, recipe)
    return {"added": [i.to_dict() for i in added], "count": len(added), "message": added_message(len(added))}


@router.get("/{recipe_id}/html", response_class=HTMLResponse)
def recipe_instructions_html(recipe_id: str, household: HouseholdDep):
    recipe = require_found(household.recipes.get(recipe_id), "Recipe")
    return HTMLResponse(render_instructions(recipe.instructions))
