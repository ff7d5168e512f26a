"""
Input validation schemas using Pydantic for request bodies and AI payloads.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grocer.domain.Item import Unit
from grocer.logic.sorting import SortOption
from grocer.utilities.constants import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_SERVINGS


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class PantryItemInput(BaseModel):
    """Schema for the pantry add form."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = DEFAULT_CATEGORY
    quantity: float = Field(1, ge=0)
    unit: Unit = Unit.PCS

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v not in CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
        return v


class ShoppingListItemInput(BaseModel):
    """Schema for the shopping-list add form."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = DEFAULT_CATEGORY

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v not in CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
        return v


class ItemUpdateInput(BaseModel):
    """Partial update. Quantity is direct entry and is not clamped."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[Unit] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v is not None and v not in CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
        return v

    def fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class ReorderInput(BaseModel):
    ids: List[str]
    sort: SortOption = SortOption.DEFAULT


class GenerateRecipeInput(BaseModel):
    item_ids: List[str] = Field(default_factory=list)
    strict_mode: bool = False
    filters: Dict[str, str] = Field(default_factory=dict)


class ImportParseInput(BaseModel):
    recipe_text: str = ""
    servings: int = Field(DEFAULT_SERVINGS, ge=1)


class ImportedIngredientInput(BaseModel):
    """A reviewed import row sent back by the client; display-only keys are ignored."""
    name: str = Field(..., min_length=1)
    amount: str = ""
    category: str = ""


class ImportAddInput(BaseModel):
    ingredients: List[ImportedIngredientInput]
    selected: List[str] = Field(default_factory=list)


class ViewInput(BaseModel):
    view: Optional[str] = Field(None, pattern=r'^(LISTS|RECIPES)$')
    import_modal_open: Optional[bool] = None


# --- AI response contracts ------------------------------------------------
class _Contract(BaseModel):
    """Exact field/type contract: missing, extra or mistyped fields are rejected."""
    model_config = ConfigDict(extra='forbid', strict=True)


class RecipeIngredientPayload(_Contract):
    name: str
    amount: str


class RecipePayload(_Contract):
    name: str
    description: str
    ingredients: List[RecipeIngredientPayload]
    instructions: str


class ParsedIngredientPayload(_Contract):
    name: str
    amount: str
    category: str

