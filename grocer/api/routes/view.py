"""View switching (Lists / Recipes) and the import modal flag."""
from fastapi import APIRouter

from grocer.api.dependencies import HouseholdDep, ViewStateDep
from grocer.utilities.validators import ViewInput

router = APIRouter(prefix="/api", tags=["view"])


@router.get("/view")
def get_view(view_state: ViewStateDep):
    return view_state.to_dict()


@router.put("/view")
def set_view(payload: ViewInput, view_state: ViewStateDep):
    if payload.view is not None:
        view_state.switch(payload.view)
    if payload.import_modal_open is True:
        view_state.open_import()
    elif payload.import_modal_open is False:
        view_state.close_import()
    return view_state.to_dict()


@router.get("/owned-names")
def get_owned_names(household: HouseholdDep):
    return {"owned": sorted(household.owned_names)}
