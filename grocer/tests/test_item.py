import unittest
from grocer.domain.Item import Item, PantryItem, ShoppingListItem, Unit


class TestItem(unittest.TestCase):

    def test_new_items_get_unique_ids(self):
        a = ShoppingListItem("Eggs", "Dairy")
        b = ShoppingListItem("Eggs", "Dairy")
        self.assertTrue(a.id)
        self.assertNotEqual(a.id, b.id)

    def test_apply_never_changes_id(self):
        item = Item("Bread", "Bakery", id="fixed")
        item.apply({"id": "other", "name": "Rye bread"})
        self.assertEqual(item.id, "fixed")
        self.assertEqual(item.name, "Rye bread")

    def test_pantry_item_round_trip(self):
        item = PantryItem("Rice", "Pantry", quantity=500, unit=Unit.G)
        data = item.to_dict()
        self.assertEqual(data["unit"], "g")
        self.assertEqual(PantryItem.from_dict(data), item)

    def test_pantry_item_from_dict_defaults(self):
        item = PantryItem.from_dict({"name": "Apples", "quantity": "3", "unit": "PCS"})
        self.assertEqual(item.quantity, 3.0)
        self.assertIs(item.unit, Unit.PCS)
        self.assertEqual(item.category, "Produce")

    def test_unit_update_is_parsed(self):
        item = PantryItem("Flour", "Pantry")
        item.apply({"unit": "g"})
        self.assertIs(item.unit, Unit.G)

    def test_shopping_item_ignores_quantity(self):
        item = ShoppingListItem("Milk", "Dairy")
        item.apply({"quantity": 4})
        self.assertFalse(hasattr(item, "quantity"))
