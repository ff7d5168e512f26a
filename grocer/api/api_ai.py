import json
import logging
import re
from json import JSONDecodeError
from typing import Any, Dict, Iterable, List, Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from grocer.domain.Item import PantryItem
from grocer.domain.Recipe import ParsedIngredient, Recipe, RecipeIngredient
from grocer.utilities.config import OPENAI_MODEL, require_api_key
from grocer.utilities.constants import (
    CATEGORIES, EMPTY_RECIPE_TEXT_MESSAGE, GENERATE_FAILED_MESSAGE, GENERATE_PROMPT_TEMPLATE,
    LENIENT_RULE, NO_INGREDIENTS_SELECTED_MESSAGE, PARSE_FAILED_MESSAGE, PARSE_PROMPT_TEMPLATE,
    STRICT_RULE,
)
from grocer.utilities.errors import RecipeGenerationError, ValidationFailure
from grocer.utilities.validators import ParsedIngredientPayload, RecipePayload

logger = logging.getLogger(__name__)


# === Response schemas sent with each request ===
RECIPE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "The creative name of the recipe."},
        "description": {"type": "string", "description": "A short, enticing description of the dish."},
        "ingredients": {
            "type": "array",
            "description": "A list of all ingredients required for the recipe.",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "The name of the ingredient."},
                    "amount": {"type": "string",
                               "description": 'The quantity and unit, e.g., "2 cups" or "100g".'},
                },
                "required": ["name", "amount"],
                "additionalProperties": False,
            },
        },
        "instructions": {"type": "string", "description": "Step-by-step cooking instructions in Markdown format."},
    },
    "required": ["name", "description", "ingredients", "instructions"],
    "additionalProperties": False,
}

# Structured output needs an object root, so the array travels under "ingredients"
PARSED_INGREDIENTS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "The normalized name of the ingredient."},
                    "amount": {"type": "string", "description": "The adjusted quantity for the specified servings."},
                    "category": {"type": "string", "description": "The grocery category for the ingredient."},
                },
                "required": ["name", "amount", "category"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["ingredients"],
    "additionalProperties": False,
}


# === Tagged parse result ===
class ParseOutcome:
    """Either a validated value or the reason the payload was rejected."""

    def __init__(self, value: Any = None, error: Optional[str] = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "ParseOutcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseOutcome":
        return cls(error=error)

    def __repr__(self) -> str:
        return f"ParseOutcome(ok={self.ok}, error={self.error!r})"


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _load_json(raw: Optional[str]) -> ParseOutcome:
    text = _strip_code_fences(raw or "")
    if not text:
        return ParseOutcome.failure("empty response")
    try:
        return ParseOutcome.success(json.loads(text))
    except JSONDecodeError as e:
        return ParseOutcome.failure(f"invalid JSON: {e}")


def validate_recipe_payload(raw: Optional[str]) -> ParseOutcome:
    """Check a generation response against the recipe contract; a local id is assigned on success."""
    loaded = _load_json(raw)
    if not loaded.ok:
        return loaded
    try:
        payload = RecipePayload.model_validate(loaded.value)
    except ValidationError as e:
        return ParseOutcome.failure(f"recipe does not match contract: {e.error_count()} error(s)")
    return ParseOutcome.success(Recipe(
        name=payload.name,
        description=payload.description,
        ingredients=[RecipeIngredient(name=i.name, amount=i.amount) for i in payload.ingredients],
        instructions=payload.instructions,
    ))


def validate_parsed_ingredients(raw: Optional[str]) -> ParseOutcome:
    """Check a parse response: an array (bare or under "ingredients") of {name, amount, category}."""
    loaded = _load_json(raw)
    if not loaded.ok:
        return loaded
    data = loaded.value
    if isinstance(data, dict) and set(data) == {"ingredients"}:
        data = data["ingredients"]
    if not isinstance(data, list):
        return ParseOutcome.failure(f"expected a JSON array, got {type(data).__name__}")
    parsed: List[ParsedIngredient] = []
    for index, entry in enumerate(data):
        try:
            p = ParsedIngredientPayload.model_validate(entry)
        except ValidationError as e:
            # All or nothing: one bad element rejects the whole response
            return ParseOutcome.failure(f"ingredient {index} does not match contract: {e.error_count()} error(s)")
        parsed.append(ParsedIngredient(name=p.name, amount=p.amount, category=p.category))
    return ParseOutcome.success(parsed)


# === Prompt builders ===
def _format_quantity(quantity) -> str:
    if isinstance(quantity, float) and quantity.is_integer():
        return str(int(quantity))
    return str(quantity)


def build_generate_prompt(items: Iterable[PantryItem], strict_mode: bool, filters: Dict[str, str]) -> str:
    ingredients = ", ".join(f"{i.name} ({_format_quantity(i.quantity)}{i.unit.value})" for i in items)
    preferences = ", ".join(f"{key}: {value}" for key, value in (filters or {}).items()
                            if value and value != "None")
    return GENERATE_PROMPT_TEMPLATE.format(
        ingredients=ingredients,
        rule=STRICT_RULE if strict_mode else LENIENT_RULE,
        preferences=preferences,
    )


def build_parse_prompt(recipe_text: str, servings: int) -> str:
    return PARSE_PROMPT_TEMPLATE.format(servings=servings, categories=", ".join(CATEGORIES), text=recipe_text)


# === Client ===
class RecipeAssistant:
    """Stateless boundary to the hosted model. Results are never cached; every call asks again."""

    def __init__(self, client: Optional[OpenAI] = None, model: str = OPENAI_MODEL, api_key: Optional[str] = None):
        self.client = client if client is not None else OpenAI(api_key=require_api_key(api_key))
        self.model = model

    def _request(self, prompt: str, schema_name: str, schema: Dict[str, Any]) -> str:
        response = self.client.responses.create(
            model=self.model,
            input=prompt,
            text={"format": {"type": "json_schema", "name": schema_name, "schema": schema, "strict": True}},
        )
        return (response.output_text or "").strip()

    def generate_recipe(self, items: List[PantryItem], strict_mode: bool = False,
                        filters: Optional[Dict[str, str]] = None) -> Recipe:
        if not items:
            raise ValidationFailure(NO_INGREDIENTS_SELECTED_MESSAGE)
        prompt = build_generate_prompt(items, strict_mode, filters or {})
        try:
            raw = self._request(prompt, "recipe", RECIPE_SCHEMA)
        except OpenAIError as e:
            logger.exception("Error generating recipe")
            raise RecipeGenerationError(GENERATE_FAILED_MESSAGE) from e
        outcome = validate_recipe_payload(raw)
        if not outcome.ok:
            logger.error("Rejected generated recipe: %s", outcome.error)
            raise RecipeGenerationError(GENERATE_FAILED_MESSAGE)
        logger.info("Generated recipe %r from %d item(s)", outcome.value.name, len(items))
        return outcome.value

    def parse_recipe_for_shopping_list(self, recipe_text: str, servings: int) -> List[ParsedIngredient]:
        if not recipe_text or not recipe_text.strip():
            raise ValidationFailure(EMPTY_RECIPE_TEXT_MESSAGE)
        if servings < 1:
            raise ValidationFailure("Servings must be at least 1.")
        prompt = build_parse_prompt(recipe_text, servings)
        try:
            raw = self._request(prompt, "parsed_ingredients", PARSED_INGREDIENTS_SCHEMA)
        except OpenAIError as e:
            logger.exception("Error parsing recipe")
            raise RecipeGenerationError(PARSE_FAILED_MESSAGE) from e
        outcome = validate_parsed_ingredients(raw)
        if not outcome.ok:
            logger.error("Rejected parsed ingredients: %s", outcome.error)
            raise RecipeGenerationError(PARSE_FAILED_MESSAGE)
        return outcome.value
