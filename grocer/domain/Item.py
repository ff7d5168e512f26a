"""Item entities: the shared base shape plus pantry and shopping-list variants."""
from enum import Enum
from typing import Optional
from uuid import uuid4

from grocer.utilities.constants import DEFAULT_CATEGORY


def new_id() -> str:
    return str(uuid4())


class Unit(str, Enum):
    PCS = 'pcs'
    G = 'g'

    @classmethod
    def parse(cls, value) -> "Unit":
        if isinstance(value, Unit):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PCS


class Item:
    # Fields update() may change; the id never is
    editable_fields = ("name", "category")

    def __init__(self, name: str = "", category: str = DEFAULT_CATEGORY, id: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        self.category = category

    @property
    def normalized_name(self) -> str:
        return (self.name or "").lower()

    def apply(self, fields: dict):
        '''Merges the supplied fields into this item, ignoring unknown keys and the id.'''
        for key, value in fields.items():
            if key in self.editable_fields:
                setattr(self, key, value)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} [{self.category}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, category={self.category!r})"

    @classmethod
    def from_dict(cls, data):
        '''Creates an item from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return cls(name=d.get("name", ""), category=d.get("category", DEFAULT_CATEGORY), id=d.get("id"))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "category": self.category}


class ShoppingListItem(Item):
    pass


class PantryItem(Item):
    editable_fields = ("name", "category", "quantity", "unit")

    def __init__(self, name: str = "", category: str = DEFAULT_CATEGORY, quantity: float = 1,
                 unit: Unit = Unit.PCS, id: Optional[str] = None):
        super().__init__(name=name, category=category, id=id)
        self.quantity = quantity
        self.unit = Unit.parse(unit)

    def apply(self, fields: dict):
        super().apply(fields)
        if "unit" in fields:
            self.unit = Unit.parse(fields["unit"])

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity}{self.unit.value} [{self.category}]"

    def __repr__(self) -> str:
        return (f"PantryItem(id={self.id!r}, name={self.name!r}, category={self.category!r}, "
                f"quantity={self.quantity!r}, unit={self.unit.value!r})")

    @classmethod
    def from_dict(cls, data):
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity", 1)
        if not isinstance(quantity, (int, float)) or isinstance(quantity, bool):
            try:
                quantity = float(quantity)
            except (TypeError, ValueError):
                quantity = 0
        return cls(name=d.get("name", ""), category=d.get("category", DEFAULT_CATEGORY),
                   quantity=quantity, unit=d.get("unit", Unit.PCS), id=d.get("id"))

    def to_dict(self):
        d = super().to_dict()
        d["quantity"] = self.quantity
        d["unit"] = self.unit.value
        return d
