import json

import pytest

from wordbrowser.models import Word, WordDefinition, WordMeaning
from wordbrowser.user_lists import FavoritesService, HistoryService, UserLists
from wordbrowser.word_store import StorageReadError, WordListStore, storage_key


@pytest.fixture
def detail():
    return Word(
        id=1,
        word="hello",
        phonetic="həˈləʊ",
        meanings=[WordMeaning(part_of_speech="noun", definitions=[WordDefinition(definition="A greeting.")])],
        audio="",
    )


def test_storage_keys():
    assert storage_key("favorites", "u1") == "favorites_u1"
    assert storage_key("history", "u1") == "history_u1"


def test_store_round_trip_uses_api_field_names(tmp_path, detail):
    store = WordListStore(tmp_path / "favorites_u1.json")
    store.save([detail, Word(id=2, word="stub")])

    raw = json.loads((tmp_path / "favorites_u1.json").read_text(encoding="utf-8"))
    assert raw["words"][0]["meanings"][0]["partOfSpeech"] == "noun"
    assert "phonetic" not in raw["words"][1]

    loaded = store.load()
    assert loaded[0] == detail
    assert loaded[1].is_stub


def test_store_missing_file_is_empty(tmp_path):
    assert WordListStore(tmp_path / "nothing.json").load() == []


def test_store_corrupt_file_raises(tmp_path):
    path = tmp_path / "history_u1.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(StorageReadError):
        WordListStore(path).load()


def test_toggle_favorite_twice_restores_list(tmp_path, detail):
    favorites = FavoritesService(tmp_path)

    assert favorites.toggle(detail, "u1") is True
    assert favorites.is_favorite(detail)
    assert favorites.toggle(detail, "u1") is False
    assert favorites.favorites == []


def test_toggle_matches_by_word_text(tmp_path, detail):
    favorites = FavoritesService(tmp_path)
    favorites.toggle(detail, "u1")

    favorites.toggle(Word(id=99, word="hello"), "u1")

    assert not favorites.is_favorite(detail)


def test_favorites_persist_per_user(tmp_path, detail):
    FavoritesService(tmp_path).toggle(detail, "u1")

    assert [w.word for w in FavoritesService(tmp_path).load("u1")] == ["hello"]
    assert FavoritesService(tmp_path).load("u2") == []


def test_history_ignores_repeats(tmp_path, detail):
    history = HistoryService(tmp_path)

    assert history.add(detail, "u1") is True
    assert history.add(Word(id=5, word="hello"), "u1") is False
    history.add(Word(id=6, word="world"), "u1")

    assert [w.word for w in HistoryService(tmp_path).load("u1")] == ["hello", "world"]


def test_load_failure_is_swallowed(tmp_path, detail):
    (tmp_path / "history_u1.json").write_text("[1, 2", encoding="utf-8")
    history = HistoryService(tmp_path)
    history.words = [detail]

    assert history.load("u1") == [detail]


def test_save_failure_keeps_change(tmp_path, detail):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    favorites = FavoritesService(blocker)

    assert favorites.toggle(detail, "u1") is True
    assert favorites.is_favorite(detail)


def test_user_lists_bundle(tmp_path, detail):
    lists = UserLists("u1", store_dir=tmp_path)
    lists.toggle_favorite(detail)
    lists.record_access(detail)

    reloaded = UserLists("u1", store_dir=tmp_path)
    reloaded.load()

    assert reloaded.is_favorite(detail)
    assert reloaded.history.is_accessed(detail)
