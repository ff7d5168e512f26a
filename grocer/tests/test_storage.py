import pytest

from grocer.infra.Storage import JsonKeyValueStore


def test_missing_key_returns_default(store):
    assert store.get("pantryItems", []) == []
    assert store.get("pantryItems") is None


def test_set_then_get(store):
    store.set("savedRecipes", [{"id": "r1", "name": "Soup"}])
    assert store.get("savedRecipes", []) == [{"id": "r1", "name": "Soup"}]
    # No temp files left behind
    assert sorted(p.name for p in store.data_dir.iterdir()) == ["savedRecipes.json"]


def test_corrupt_value_falls_back_to_default(store, caplog):
    store.data_dir.mkdir(parents=True)
    (store.data_dir / "shoppingListItems.json").write_text("[{not json", encoding="utf-8")
    assert store.get("shoppingListItems", ["fallback"]) == ["fallback"]
    assert "Invalid JSON" in caplog.text


def test_rejects_path_like_keys(store):
    with pytest.raises(ValueError):
        store.get("../etc/passwd")
