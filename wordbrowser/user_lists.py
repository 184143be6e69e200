"""Per-user favorites and access history."""

from pathlib import Path
from typing import Optional

import config
from wordbrowser.logger import get_logger
from wordbrowser.models import Word
from wordbrowser.word_store import StorageError, WordListStore, storage_key


class _StoredWordList:
    """A word list kept in memory and mirrored to a per-user store.

    Storage failures are logged and swallowed: a failed load keeps the
    current list, a failed save keeps the in-memory change.
    """

    key_prefix = ""

    def __init__(self, store_dir: Path = config.STORE_DIR):
        self.store_dir = store_dir
        self.words: list[Word] = []

    def _store(self, user_id: str) -> WordListStore:
        return WordListStore.for_key(self.store_dir, storage_key(self.key_prefix, user_id))

    def load(self, user_id: str) -> list[Word]:
        try:
            self.words = self._store(user_id).load()
        except StorageError as e:
            get_logger().error(f"Error loading {self.key_prefix}: {e}")
        return self.words

    def _save(self, user_id: str) -> None:
        try:
            self._store(user_id).save(self.words)
        except StorageError as e:
            get_logger().error(f"Error saving {self.key_prefix}: {e}")

    def contains(self, word: Word) -> bool:
        return any(w.word == word.word for w in self.words)

    def __len__(self) -> int:
        return len(self.words)


class FavoritesService(_StoredWordList):
    key_prefix = config.FAVORITES_KEY_PREFIX

    @property
    def favorites(self) -> list[Word]:
        return self.words

    def is_favorite(self, word: Word) -> bool:
        return self.contains(word)

    def toggle(self, word: Word, user_id: str) -> bool:
        """
        Add a word to favorites, or remove it if already there.

        Args:
            word: Word to toggle, matched by its text
            user_id: Owner of the list

        Returns:
            True if the word is a favorite afterwards
        """
        if self.is_favorite(word):
            self.words = [w for w in self.words if w.word != word.word]
            added = False
        else:
            self.words = [*self.words, word]
            added = True
        self._save(user_id)
        return added


class HistoryService(_StoredWordList):
    key_prefix = config.HISTORY_KEY_PREFIX

    @property
    def history(self) -> list[Word]:
        return self.words

    def is_accessed(self, word: Word) -> bool:
        return self.contains(word)

    def add(self, word: Word, user_id: str) -> bool:
        """Record an accessed word once. Returns False if it was already there."""
        if self.is_accessed(word):
            return False
        self.words = [*self.words, word]
        self._save(user_id)
        return True


class UserLists:
    """Favorites and history bound to the signed-in user."""

    def __init__(
        self,
        user_id: str,
        favorites: Optional[FavoritesService] = None,
        history: Optional[HistoryService] = None,
        store_dir: Path = config.STORE_DIR,
    ):
        self.user_id = user_id
        self.favorites = favorites if favorites is not None else FavoritesService(store_dir)
        self.history = history if history is not None else HistoryService(store_dir)

    def load(self) -> None:
        self.favorites.load(self.user_id)
        self.history.load(self.user_id)

    def toggle_favorite(self, word: Word) -> bool:
        return self.favorites.toggle(word, self.user_id)

    def is_favorite(self, word: Word) -> bool:
        return self.favorites.is_favorite(word)

    def record_access(self, word: Word) -> bool:
        return self.history.add(word, self.user_id)
