import unittest
from grocer.domain.Item import ShoppingListItem
from grocer.logic.sorting import SortOption, reorder_allowed, sort_items


class TestSorting(unittest.TestCase):

    def setUp(self):
        self.items = [
            ShoppingListItem("banana", "Produce", id="1"),
            ShoppingListItem("Apple", "Produce", id="2"),
            ShoppingListItem("cheddar", "Dairy", id="3"),
            ShoppingListItem("apple", "Produce", id="4"),
        ]

    def test_default_keeps_order(self):
        self.assertEqual([i.id for i in sort_items(self.items)], ["1", "2", "3", "4"])

    def test_name_sort_is_case_insensitive_and_stable(self):
        result = sort_items(self.items, SortOption.NAME)
        self.assertEqual([i.id for i in result], ["2", "4", "1", "3"])

    def test_category_sort_breaks_ties_by_name(self):
        result = sort_items(self.items, SortOption.CATEGORY)
        self.assertEqual([i.id for i in result], ["3", "2", "4", "1"])

    def test_sorting_does_not_mutate_input(self):
        sort_items(self.items, "Name")
        self.assertEqual([i.id for i in self.items], ["1", "2", "3", "4"])

    def test_reorder_only_without_sort(self):
        self.assertTrue(reorder_allowed(SortOption.DEFAULT))
        self.assertFalse(reorder_allowed(SortOption.NAME))
        self.assertFalse(reorder_allowed(SortOption.CATEGORY))
