import random

from grocer.domain.Item import PantryItem, ShoppingListItem
from grocer.logic.ownership import owned_names


def test_owned_names_scenario(household):
    assert household.owned_names == set()
    household.pantry.append(PantryItem("Milk", "Dairy"))
    assert household.owned_names == {"milk"}
    household.shopping_list.append(ShoppingListItem("Eggs", "Dairy"))
    assert household.owned_names == {"milk", "eggs"}


def test_owned_names_is_case_folded_union():
    pantry = [PantryItem("Milk", "Dairy"), PantryItem("FLOUR", "Pantry")]
    shopping = [ShoppingListItem("milk", "Dairy"), ShoppingListItem("Basil", "Produce")]
    assert owned_names(pantry, shopping) == {"milk", "flour", "basil"}


def test_owned_names_tracks_interleaved_mutations(household):
    rng = random.Random(11)
    names = ["Milk", "eggs", "Flour", "BUTTER", "Apple", "apple"]
    for _ in range(150):
        target = rng.choice([household.pantry, household.shopping_list])
        items = target.get_items()
        if items and rng.random() < 0.4:
            target.remove(rng.choice(items).id)
        elif items and rng.random() < 0.3:
            target.update(rng.choice(items).id, name=rng.choice(names))
        elif target is household.pantry:
            target.append(PantryItem(rng.choice(names), "Other"))
        else:
            target.append(ShoppingListItem(rng.choice(names), "Other"))
        expected = {i.name.lower() for i in household.pantry.get_items()} | \
                   {i.name.lower() for i in household.shopping_list.get_items()}
        assert household.owned_names == expected
