"""FastAPI dependencies: shared state lives on ``app.state`` and is handed to routes from here."""
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from grocer.api.api_ai import RecipeAssistant
from grocer.api.guards import InFlightGuard
from grocer.domain.Household import Household
from grocer.domain.View import ViewState
from grocer.logic.sorting import SortOption, reorder_allowed


def get_household(request: Request) -> Household:
    return request.app.state.household


def get_assistant(request: Request) -> RecipeAssistant:
    return request.app.state.assistant


def get_view_state(request: Request) -> ViewState:
    return request.app.state.view_state


def get_guard(request: Request, name: str) -> InFlightGuard:
    return request.app.state.guards[name]


HouseholdDep = Annotated[Household, Depends(get_household)]
AssistantDep = Annotated[RecipeAssistant, Depends(get_assistant)]
ViewStateDep = Annotated[ViewState, Depends(get_view_state)]


def require_found(item, what: str):
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")
    return item


def require_reorder_allowed(sort: SortOption):
    if not reorder_allowed(sort):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail="Manual reordering is only available without sorting")
