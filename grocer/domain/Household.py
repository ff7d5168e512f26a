"""Household: the owned-state container for the pantry, the shopping list and saved recipes.

Each collection is mirrored to the key/value store under its own key. The
household listens for ``collection.changed`` and writes the changed
collection back. Inside ``transaction()`` writes are deferred until the block
finishes, and a block that raises puts every collection back the way it was,
so compound operations (moves between lists) never persist half done.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Optional, Set

from grocer.domain.Collection import ItemCollection
from grocer.domain.Pantry import Pantry
from grocer.domain.RecipeBook import RecipeBook
from grocer.domain.ShoppingList import ShoppingList
from grocer.events.Event_Bus import EventBus, COLLECTION_CHANGED
from grocer.infra.Storage import JsonKeyValueStore
from grocer.logic.ownership import owned_names
from grocer.utilities.constants import PANTRY_KEY, SHOPPING_LIST_KEY, RECIPES_KEY

logger = logging.getLogger(__name__)

STORAGE_KEYS: Dict[str, str] = {
    Pantry.name: PANTRY_KEY,
    ShoppingList.name: SHOPPING_LIST_KEY,
    RecipeBook.name: RECIPES_KEY,
}


class Household:
    def __init__(self, store: JsonKeyValueStore, event_bus: Optional[EventBus] = None):
        self.store = store
        self.event_bus = event_bus or EventBus()
        self.pantry = Pantry.from_dict(store.get(PANTRY_KEY, []), event_bus=self.event_bus)
        self.shopping_list = ShoppingList.from_dict(store.get(SHOPPING_LIST_KEY, []), event_bus=self.event_bus)
        self.recipes = RecipeBook.from_dict(store.get(RECIPES_KEY, []), event_bus=self.event_bus)
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty: Set[str] = set()
        self.event_bus.subscribe(COLLECTION_CHANGED, self._on_collection_changed)
        logger.info("Household loaded: %d pantry, %d shopping, %d recipes",
                    len(self.pantry), len(self.shopping_list), len(self.recipes))

    @property
    def owned_names(self) -> Set[str]:
        return owned_names(self.pantry.get_items(), self.shopping_list.get_items())

    def collection(self, name: str) -> ItemCollection:
        collections = {c.name: c for c in (self.pantry, self.shopping_list, self.recipes)}
        try:
            return collections[name]
        except KeyError:
            raise KeyError(f"Unknown collection: {name}") from None

    # --- Persistence -------------------------------------------------------
    def _on_collection_changed(self, event_name: str, payload):
        name = payload["collection"]
        if self._depth:
            self._dirty.add(name)
        else:
            self.persist(name)

    def persist(self, name: str):
        self.store.set(STORAGE_KEYS[name], self.collection(name).to_dict())

    def _restore(self, snapshots: Dict[str, list]):
        for name, data in snapshots.items():
            collection = self.collection(name)
            collection.restore([collection.item_type.from_dict(entry) for entry in data])

    @contextmanager
    def transaction(self):
        with self._lock:
            snapshots = None
            if self._depth == 0:
                snapshots = {c.name: c.to_dict() for c in (self.pantry, self.shopping_list, self.recipes)}
            self._depth += 1
            try:
                yield self
            except Exception:
                self._depth -= 1
                if snapshots is not None:
                    self._restore(snapshots)
                    logger.warning("Household transaction rolled back: %s", sorted(self._dirty))
                    self._dirty.clear()
                raise
            self._depth -= 1
            if self._depth == 0:
                dirty, self._dirty = self._dirty, set()
                written = []
                try:
                    for name in sorted(dirty):
                        self.persist(name)
                        written.append(name)
                except Exception:
                    # A failed write undoes the whole transaction, on disk and in memory
                    self._restore(snapshots)
                    for name in written:
                        self.store.set(STORAGE_KEYS[name], snapshots[name])
                    logger.warning("Household transaction not persisted, rolled back: %s", sorted(dirty))
                    raise
