"""Recipe domain entity: name, description, ingredient amounts and markdown instructions."""
from typing import List, Optional

from grocer.domain.Item import new_id


class RecipeIngredient:
    def __init__(self, name: str = "", amount: str = ""):
        self.name = name
        self.amount = amount  # free text, e.g. "2 cups" or "100g"

    def __eq__(self, other) -> bool:
        return isinstance(other, RecipeIngredient) and (self.name, self.amount) == (other.name, other.amount)

    def __str__(self) -> str:
        return f"{self.amount} {self.name}".strip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RecipeIngredient(name=d.get("name", ""), amount=d.get("amount", ""))

    def to_dict(self):
        return {"name": self.name, "amount": self.amount}


class ParsedIngredient(RecipeIngredient):
    """An ingredient returned by the recipe import parser, already categorized."""

    def __init__(self, name: str = "", amount: str = "", category: str = ""):
        super().__init__(name=name, amount=amount)
        self.category = category

    def __eq__(self, other) -> bool:
        return isinstance(other, ParsedIngredient) and self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ParsedIngredient(name=d.get("name", ""), amount=d.get("amount", ""),
                                category=d.get("category", ""))

    def to_dict(self):
        return {"name": self.name, "amount": self.amount, "category": self.category}


class Recipe:
    def __init__(self, name: str = "", description: str = "",
                 ingredients: Optional[List[RecipeIngredient]] = None,
                 instructions: str = "", id: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions

    editable_fields = ("name", "description", "instructions")

    def apply(self, fields: dict):
        for key, value in fields.items():
            if key in self.editable_fields:
                setattr(self, key, value)
        if "ingredients" in fields:
            self.ingredients = [ing if isinstance(ing, RecipeIngredient) else RecipeIngredient.from_dict(ing)
                                for ing in fields["ingredients"]]

    def __eq__(self, other) -> bool:
        return isinstance(other, Recipe) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            name=d.get("name", ""),
            description=d.get("description", ""),
            ingredients=[RecipeIngredient.from_dict(ing) for ing in d.get("ingredients") or []],
            instructions=d.get("instructions", ""),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
        }
