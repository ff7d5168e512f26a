"""Pantry aggregate: owned items with a quantity and a unit."""
from grocer.domain.Collection import ItemCollection
from grocer.domain.Item import PantryItem
from grocer.utilities.constants import QUANTITY_STEP


class Pantry(ItemCollection):
    name = "pantry"
    item_type = PantryItem

    def increment(self, item_id: str):
        '''
        Raises the quantity of an item by one step.
        '''
        item = self.get(item_id)
        if item is None:
            return None
        return self.update(item_id, quantity=item.quantity + QUANTITY_STEP)

    def decrement(self, item_id: str):
        '''
        Lowers the quantity of an item by one step, never below zero.
        '''
        item = self.get(item_id)
        if item is None:
            return None
        return self.update(item_id, quantity=max(0, item.quantity - QUANTITY_STEP))

    def set_quantity(self, item_id: str, quantity: float):
        '''
        Direct numeric entry: stored as given, negative and fractional values included.
        '''
        return self.update(item_id, quantity=quantity)
