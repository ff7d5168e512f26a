import unittest
from grocer.domain.Item import PantryItem, Unit
from grocer.domain.Pantry import Pantry


class TestPantry(unittest.TestCase):

    def setUp(self):
        self.pantry = Pantry()
        self.sugar = self.pantry.append(PantryItem("Sugar", "Pantry", 1, Unit.PCS))

    def test_increment(self):
        self.pantry.increment(self.sugar.id)
        self.pantry.increment(self.sugar.id)
        self.assertEqual(self.pantry.get(self.sugar.id).quantity, 3)

    def test_decrement_clamps_at_zero(self):
        self.pantry.decrement(self.sugar.id)
        self.pantry.decrement(self.sugar.id)
        self.assertEqual(self.pantry.get(self.sugar.id).quantity, 0)

    def test_decrement_from_fraction_clamps(self):
        self.pantry.set_quantity(self.sugar.id, 0.5)
        self.pantry.decrement(self.sugar.id)
        self.assertEqual(self.pantry.get(self.sugar.id).quantity, 0)

    def test_direct_entry_is_not_clamped(self):
        self.pantry.set_quantity(self.sugar.id, -2.5)
        self.assertEqual(self.pantry.get(self.sugar.id).quantity, -2.5)

    def test_unknown_id_is_ignored(self):
        self.assertIsNone(self.pantry.increment("missing"))
        self.assertIsNone(self.pantry.decrement("missing"))
        self.assertEqual(self.pantry.get(self.sugar.id).quantity, 1)

    def test_from_dict_drops_repeated_ids(self):
        pantry = Pantry.from_dict([
            {"id": "a", "name": "Salt", "category": "Pantry", "quantity": 1, "unit": "pcs"},
            {"id": "a", "name": "Pepper", "category": "Pantry", "quantity": 1, "unit": "pcs"},
        ])
        self.assertEqual([i.name for i in pantry.get_items()], ["Salt"])
