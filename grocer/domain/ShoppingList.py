"""ShoppingList aggregate: items still to purchase."""

from grocer.domain.Collection import ItemCollection
from grocer.domain.Item import ShoppingListItem


class ShoppingList(ItemCollection):
    name = "shopping_list"
    item_type = ShoppingListItem

    def extend(self, items):
        '''
        Appends several items in order, publishing one change for the whole batch.
        '''
        added = list(items)
        batch_ids = [item.id for item in added]
        if len(set(batch_ids)) != len(batch_ids):
            raise ValueError(f"Duplicate id in {self.name} batch")
        for item in added:
            self._check_new_id(item)
        self.items.extend(added)
        if added:
            self._notify()
        return added
