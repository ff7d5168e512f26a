from fastapi import FastAPI, Request, Query
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from typing import Optional
import logging

from grocer.api.api_ai import RecipeAssistant
from grocer.api.guards import InFlightGuard
from grocer.domain.Household import Household
from grocer.domain.View import View, ViewState
from grocer.infra.paths import DATA_DIR, TEMPLATES_DIR
from grocer.infra.Storage import JsonKeyValueStore
from grocer.logic.markdown import render_instructions
from grocer.logic.sorting import SortOption, sort_items
from grocer.logic.transfers import missing_ingredients
from grocer.utilities.config import require_api_key
from grocer.utilities.constants import CATEGORIES, DEFAULT_SERVINGS, RECIPE_FILTERS
from grocer.utilities.errors import RecipeGenerationError, RequestInProgress, ValidationFailure

# Routers
from grocer.api.routes import imports, pantry, recipes, shopping, view

# Logging
logger = logging.getLogger("grocer_app")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def create_app(household: Optional[Household] = None, assistant: Optional[RecipeAssistant] = None) -> FastAPI:
    """Build the application. Missing collaborators are created at startup."""
    app = FastAPI(title="Grocer: Pantry, Shopping List & Recipes API")
    app.state.household = household
    app.state.assistant = assistant
    app.state.view_state = ViewState()
    app.state.pending_recipe = None
    app.state.guards = {
        "generate": InFlightGuard("recipe generation"),
        "import": InFlightGuard("recipe import"),
    }

    # Include routers
    for module in (pantry, shopping, recipes, imports, view):
        app.include_router(module.router)

    @app.on_event("startup")
    def _startup_collaborators():
        """Refuse to start without an AI credential, then load the household from disk."""
        if app.state.assistant is None:
            app.state.assistant = RecipeAssistant(api_key=require_api_key())
        if app.state.household is None:
            app.state.household = Household(JsonKeyValueStore(DATA_DIR))
        logger.info("Grocer started with data dir %s", app.state.household.store.data_dir)

    # -------------------- Error mapping --------------------
    @app.exception_handler(ValidationFailure)
    async def _validation_failure(request: Request, exc: ValidationFailure):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RecipeGenerationError)
    async def _generation_failed(request: Request, exc: RecipeGenerationError):
        return JSONResponse(status_code=502, content={"detail": str(exc), "retryable": True})

    @app.exception_handler(RequestInProgress)
    async def _in_progress(request: Request, exc: RequestInProgress):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    # -------------------- UI PAGE --------------------
    @app.get("/", response_class=HTMLResponse)
    def main_page(request: Request,
                  pantry_sort: SortOption = Query(default=SortOption.DEFAULT),
                  shopping_sort: SortOption = Query(default=SortOption.DEFAULT)):
        state: Household = request.app.state.household
        view_state: ViewState = request.app.state.view_state
        owned = state.owned_names
        saved = [
            {
                "recipe": r,
                "instructions_html": render_instructions(r.instructions),
                "missing": missing_ingredients(r, owned),
            }
            for r in state.recipes.get_items()
        ]
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "view": view_state.view.value,
                "views": [v.value for v in View],
                "import_modal_open": view_state.import_modal_open,
                "pantry_items": sort_items(state.pantry.get_items(), pantry_sort),
                "shopping_items": sort_items(state.shopping_list.get_items(), shopping_sort),
                "pantry_sort": pantry_sort.value,
                "shopping_sort": shopping_sort.value,
                "sort_options": [o.value for o in SortOption],
                "saved_recipes": saved,
                "categories": CATEGORIES,
                "recipe_filters": RECIPE_FILTERS,
                "default_servings": DEFAULT_SERVINGS,
                "generating": request.app.state.guards["generate"].loading,
            },
        )

    return app


app = create_app()
