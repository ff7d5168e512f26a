"""Saved recipes, in the order they were saved."""
from grocer.domain.Collection import ItemCollection
from grocer.domain.Recipe import Recipe


class RecipeBook(ItemCollection):
    name = "recipes"
    item_type = Recipe
