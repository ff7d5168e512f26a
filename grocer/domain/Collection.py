"""Ordered, id-keyed collection with change notification.

Pantry, ShoppingList and RecipeBook all build on this. Every mutation runs to
completion and publishes ``collection.changed`` before returning, so readers
(the household, the ownership index, sorted views) always see the new state.
"""
from typing import Iterable, Iterator, List, Optional

from grocer.domain.Item import Item
from grocer.events.Event_Bus import EventBus, COLLECTION_CHANGED


class ItemCollection:
    name = "items"
    item_type = Item

    def __init__(self, items: Optional[Iterable] = None, event_bus: Optional[EventBus] = None):
        self.items: List = []
        self._event_bus = event_bus or EventBus()
        for item in items or []:
            self._check_new_id(item)
            self.items.append(item)

    # --- Observer helpers -------------------------------------------------
    def _notify(self):
        self._event_bus.publish(COLLECTION_CHANGED, {"collection": self.name, "items": self.get_items()})

    # --- Queries ----------------------------------------------------------
    def get_items(self) -> list:
        '''
        Returns a snapshot of the items in persisted order.
        '''
        return list(self.items)

    def get(self, item_id: str):
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def ids(self) -> List[str]:
        return [item.id for item in self.items]

    def __contains__(self, item_id) -> bool:
        return self.get(item_id) is not None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.get_items())

    # --- Mutations ---------------------------------------------------------
    def _check_new_id(self, item):
        if not isinstance(item, self.item_type):
            raise TypeError(f"{self.name} only holds {self.item_type.__name__} objects, got {type(item).__name__}")
        if any(existing.id == item.id for existing in self.items):
            raise ValueError(f"Duplicate id in {self.name}: {item.id}")

    def append(self, item):
        '''
        Adds an item at the end of the collection. Items built without an id get a fresh one.
        '''
        self._check_new_id(item)
        self.items.append(item)
        self._notify()
        return item

    def update(self, item_id: str, **fields):
        '''
        Merges fields into the item with this id. Unknown ids are ignored.
        '''
        item = self.get(item_id)
        if item is None:
            return None
        item.apply(fields)
        self._notify()
        return item

    def remove(self, item_id: str):
        '''
        Removes the item with this id. Unknown ids are ignored.
        '''
        item = self.get(item_id)
        if item is None:
            return None
        self.items.remove(item)
        self._notify()
        return item

    def reorder(self, item_ids: List[str]):
        '''
        Replaces the order with ``item_ids``, which must hold exactly the current ids.
        '''
        current = self.ids()
        if len(item_ids) != len(current) or set(item_ids) != set(current):
            raise ValueError(f"Reorder of {self.name} must contain exactly the current ids")
        index = {item.id: item for item in self.items}
        self.items = [index[item_id] for item_id in item_ids]
        self._notify()
        return self.get_items()

    def restore(self, items: list):
        '''Puts back a previous snapshot without notifying subscribers.'''
        self.items = list(items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{type(self).__name__}:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    # --- Serialization -----------------------------------------------------
    @classmethod
    def from_dict(cls, data, event_bus: Optional[EventBus] = None):
        '''
        Builds the collection from a list of dictionaries; entries repeating an id are dropped.
        '''
        items = []
        seen = set()
        for entry in data if isinstance(data, list) else []:
            item = cls.item_type.from_dict(entry)
            if item.id in seen:
                continue
            seen.add(item.id)
            items.append(item)
        return cls(items, event_bus=event_bus)

    def to_dict(self):
        return [item.to_dict() for item in self.items]
