from typing import Final

# Storage keys (one JSON array per collection)
PANTRY_KEY: Final[str] = "pantryItems"
SHOPPING_LIST_KEY: Final[str] = "shoppingListItems"
RECIPES_KEY: Final[str] = "savedRecipes"

CATEGORIES: Final[list[str]] = [
    'Produce',
    'Dairy',
    'Meat',
    'Bakery',
    'Pantry',
    'Frozen',
    'Beverages',
    'Other',
]
DEFAULT_CATEGORY: Final[str] = CATEGORIES[0]
FALLBACK_CATEGORY: Final[str] = 'Pantry'

# Keyword -> category rules, first match wins (substring, case-sensitive)
CATEGORY_KEYWORDS: Final[list[tuple[str, tuple[str, ...]]]] = [
    ('Dairy', ('milk', 'cheese')),
    ('Meat', ('chicken', 'beef')),
    ('Produce', ('lettuce', 'apple')),
]

RECIPE_FILTERS: Final[dict[str, list[str]]] = {
    'cookingTime': ['< 15 min', '< 30 min', '< 1 hour', '> 1 hour'],
    'cookingMethod': ['Stove-top', 'Oven', 'Microwave', 'Grill', 'No-cook'],
    'diet': ['None', 'Vegetarian', 'Vegan', 'Gluten-Free', 'Keto'],
    'calorieGoal': ['< 300', '300-500', '500-700', '> 700'],
    'proteinGoal': ['< 10g', '10-20g', '20-40g', '> 40g'],
}

DEFAULT_SERVINGS: Final[int] = 4
QUANTITY_STEP: Final[int] = 1

STRICT_RULE: Final[str] = (
    "You MUST only use the provided ingredients. "
    "You can assume common staples like oil, salt, pepper are available."
)
LENIENT_RULE: Final[str] = (
    "You can suggest 1-2 additional common ingredients if it significantly improves the recipe."
)

GENERATE_PROMPT_TEMPLATE: Final[str] = (
    """
    You are a creative chef. Generate a single recipe based on the following criteria.
    Ingredients available: {ingredients}.
    Ingredient usage rule: {rule}.
    Recipe preferences: {preferences}.

    Provide the response in the exact JSON format specified. The instructions should be a single string in Markdown format.
    """
)

PARSE_PROMPT_TEMPLATE: Final[str] = (
    """
    Analyze the following recipe text. Adjust the ingredient quantities for {servings} servings.
    For each ingredient, provide a normalized name (e.g., "all-purpose flour" becomes "flour"), the adjusted quantity as a string (e.g., "2 cups"), and assign it a category from this list: {categories}.
    Return the result as a JSON array.

    Recipe Text:
    ---
    {text}
    ---
    """
)

GENERATE_FAILED_MESSAGE: Final[str] = "Failed to generate recipe from AI."
PARSE_FAILED_MESSAGE: Final[str] = "Failed to parse recipe with AI."
EMPTY_RECIPE_TEXT_MESSAGE: Final[str] = "Please paste a recipe."
NO_INGREDIENTS_SELECTED_MESSAGE: Final[str] = "Please select at least one ingredient."
