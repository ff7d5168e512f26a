"""Import-recipe modal endpoints: parse pasted text, then add the chosen ingredients."""
from fastapi import APIRouter, Request, status

from grocer.api.dependencies import AssistantDep, HouseholdDep, ViewStateDep, get_guard
from grocer.domain.Recipe import ParsedIngredient
from grocer.logic.ownership import is_owned
from grocer.logic.transfers import add_parsed_to_shopping_list, preselect_ingredients
from grocer.utilities.validators import ImportAddInput, ImportParseInput

router = APIRouter(prefix="/api/import", tags=["import"])


@router.post("/parse")
def parse_recipe(payload: ImportParseInput, request: Request, household: HouseholdDep, assistant: AssistantDep):
    with get_guard(request, "import").hold():
        parsed = assistant.parse_recipe_for_shopping_list(payload.recipe_text, payload.servings)
    owned = household.owned_names
    selected = preselect_ingredients(parsed, owned)
    return {
        "ingredients": [
            dict(ing.to_dict(), owned=is_owned(ing.name, owned), selected=ing.name in selected)
            for ing in parsed
        ],
        "selected_count": len(selected),
    }


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_to_shopping_list(payload: ImportAddInput, household: HouseholdDep, view_state: ViewStateDep):
    parsed = [ParsedIngredient(name=p.name, amount=p.amount, category=p.category) for p in payload.ingredients]
    added = add_parsed_to_shopping_list(household, parsed, payload.selected)
    view_state.close_import()
    return {"added": [i.to_dict() for i in added], "count": len(added)}
