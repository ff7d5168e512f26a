import json

import pytest
from openai import OpenAIError

from grocer.api.api_ai import (
    RecipeAssistant, build_generate_prompt, build_parse_prompt, validate_parsed_ingredients,
    validate_recipe_payload,
)
from grocer.domain.Item import PantryItem, Unit
from grocer.utilities.errors import MissingConfiguration, RecipeGenerationError, ValidationFailure

RECIPE = {
    "name": "Tomato Rice",
    "description": "Cozy and quick.",
    "ingredients": [{"name": "rice", "amount": "200g"}, {"name": "tomato", "amount": "2"}],
    "instructions": "**Boil** rice\n- add tomato",
}


@pytest.fixture
def items():
    return [PantryItem("Rice", "Pantry", quantity=200, unit=Unit.G), PantryItem("Tomato", "Produce", quantity=2)]


def test_generate_prompt_lists_items_rule_and_filters(items):
    prompt = build_generate_prompt(items, True, {"diet": "None", "cookingTime": "< 30 min", "cookingMethod": ""})
    assert "Ingredients available: Rice (200g), Tomato (2pcs)." in prompt
    assert "You MUST only use the provided ingredients" in prompt
    assert "Recipe preferences: cookingTime: < 30 min." in prompt
    assert "diet" not in prompt
    assert "cookingMethod" not in prompt


def test_generate_prompt_lenient(items):
    assert "1-2 additional common ingredients" in build_generate_prompt(items, False, {})


def test_parse_prompt_mentions_servings_and_categories():
    prompt = build_parse_prompt("2 eggs, 1 cup milk", 6)
    assert "for 6 servings" in prompt
    assert "Produce, Dairy, Meat, Bakery, Pantry, Frozen, Beverages, Other" in prompt
    assert "2 eggs, 1 cup milk" in prompt


def test_generate_recipe_assigns_local_id(assistant, responses, items):
    responses.queue(RECIPE)
    recipe = assistant.generate_recipe(items, strict_mode=False, filters={})
    assert recipe.name == "Tomato Rice"
    assert [i.amount for i in recipe.ingredients] == ["200g", "2"]
    assert recipe.id
    call = responses.calls[0]
    assert call["model"] == "test-model"
    assert call["text"]["format"]["strict"] is True


def test_generate_recipe_is_not_cached(assistant, responses, items):
    responses.queue(RECIPE).queue(dict(RECIPE, name="Tomato Risotto"))
    first = assistant.generate_recipe(items)
    second = assistant.generate_recipe(items)
    assert (first.name, second.name) == ("Tomato Rice", "Tomato Risotto")
    assert first.id != second.id
    assert len(responses.calls) == 2


def test_generate_requires_selection_before_any_call(assistant, responses):
    with pytest.raises(ValidationFailure, match="Please select at least one ingredient."):
        assistant.generate_recipe([])
    assert responses.calls == []


@pytest.mark.parametrize("output", [
    "",
    "not json at all",
    json.dumps({k: v for k, v in RECIPE.items() if k != "instructions"}),
    json.dumps(dict(RECIPE, ingredients=[{"name": "rice"}])),
    json.dumps(dict(RECIPE, ingredients="rice")),
    json.dumps(dict(RECIPE, servings=2)),
    json.dumps([RECIPE]),
])
def test_generate_rejects_non_conforming_payload(assistant, responses, items, output):
    responses.queue(output)
    with pytest.raises(RecipeGenerationError, match="Failed to generate recipe from AI."):
        assistant.generate_recipe(items)


def test_generate_service_failure(assistant, responses, items):
    responses.queue(OpenAIError("503 upstream"))
    with pytest.raises(RecipeGenerationError) as exc:
        assistant.generate_recipe(items)
    assert str(exc.value) == "Failed to generate recipe from AI."


def test_parse_accepts_bare_array_and_wrapped_array(assistant, responses):
    rows = [{"name": "flour", "amount": "3 cups", "category": "Pantry"}]
    responses.queue(rows).queue({"ingredients": rows})
    assert [i.to_dict() for i in assistant.parse_recipe_for_shopping_list("flour", 4)] == rows
    assert [i.to_dict() for i in assistant.parse_recipe_for_shopping_list("flour", 4)] == rows


def test_parse_missing_category_fails_whole_response(assistant, responses):
    responses.queue([
        {"name": "flour", "amount": "3 cups", "category": "Pantry"},
        {"name": "eggs", "amount": "2"},
    ])
    with pytest.raises(RecipeGenerationError, match="Failed to parse recipe with AI."):
        assistant.parse_recipe_for_shopping_list("pancakes", 2)


def test_parse_validates_input_before_calling(assistant, responses):
    with pytest.raises(ValidationFailure, match="Please paste a recipe."):
        assistant.parse_recipe_for_shopping_list("   ", 4)
    with pytest.raises(ValidationFailure):
        assistant.parse_recipe_for_shopping_list("soup", 0)
    assert responses.calls == []


def test_validate_helpers_return_tagged_outcomes():
    ok = validate_recipe_payload("```json\n" + json.dumps(RECIPE) + "\n```")
    assert ok.ok and ok.value.name == "Tomato Rice"
    bad = validate_parsed_ingredients(json.dumps({"items": []}))
    assert not bad.ok
    assert "expected a JSON array" in bad.error
    wrong_type = validate_parsed_ingredients(json.dumps([{"name": "x", "amount": 2, "category": "Other"}]))
    assert not wrong_type.ok


def test_missing_credential_is_fatal(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(MissingConfiguration):
        RecipeAssistant(api_key="")
