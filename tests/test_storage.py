from __future__ import annotations

from pathlib import Path

import pytest

from content_studio.storage import (
    InMemoryStore,
    JsonFileStore,
    SavedArticles,
    SearchHistory,
    StorageError,
)


def test_json_file_store_round_trip(tmp_path: Path):
    path = tmp_path / "nested" / "store.json"
    store = JsonFileStore(path)
    assert store.get("missing") is None

    store.set("theme", "dark")
    store.set("lang", "en")
    reopened = JsonFileStore(path)
    assert reopened.get("theme") == "dark"

    reopened.remove("theme")
    reopened.remove("not-there")
    assert JsonFileStore(path).get("theme") is None
    assert JsonFileStore(path).get("lang") == "en"


def test_json_file_store_rejects_corrupt_file(tmp_path: Path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get("anything")

    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get("anything")


def test_saved_articles_save_list_delete(tmp_path: Path):
    articles = SavedArticles(JsonFileStore(tmp_path / "store.json"))
    first = articles.save("Bees", "# Bees\n\nBuzz.")
    second = articles.save("Ants", "# Ants\n\nMarch.")

    listed = articles.list()
    assert [a.title for a in listed] == ["Bees", "Ants"]
    assert listed[0].id == first.id
    assert listed[0].content == "# Bees\n\nBuzz."
    assert listed[0].created_at

    assert articles.delete(first.id) is True
    assert articles.delete(first.id) is False
    assert [a.id for a in articles.list()] == [second.id]


def test_saved_articles_rejects_non_list_payload():
    store = InMemoryStore({"savedArticles": '{"id": 1}'})
    with pytest.raises(StorageError):
        SavedArticles(store).list()


def test_search_history_is_most_recent_first_and_bounded():
    history = SearchHistory(InMemoryStore(), max_items=3)
    for topic in ["bees", "ants", "wasps", "Bees", "moths"]:
        history.add(topic)

    assert history.items() == ["moths", "Bees", "wasps"]
    history.add("   ")
    assert history.items() == ["moths", "Bees", "wasps"]


def test_search_history_remove_and_clear():
    store = InMemoryStore()
    history = SearchHistory(store)
    history.add("bees")
    history.add("ants")

    assert history.remove(5) == ["ants", "bees"]
    assert history.remove(0) == ["bees"]
    history.clear()
    assert history.items() == []
    assert store.get("searchHistory") is None
