"""JSON file storage for per-user word lists."""

import fcntl
import json
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from wordbrowser.models import Word, WordListData


class StorageError(Exception):
    """Base class for word list storage failures."""

    pass


class StorageReadError(StorageError):
    """Raised when a stored list cannot be read."""

    pass


class StorageWriteError(StorageError):
    """Raised when a list cannot be written."""

    pass


def storage_key(prefix: str, user_id: str) -> str:
    """Key of a user's list, e.g. ``favorites_<user_id>``."""
    return f"{prefix}_{user_id}"


class WordListStore:
    """Reads and writes one word list file."""

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Path to the list JSON file
        """
        self.path = path
        self._lock_path = path.with_suffix(".lock")

    @classmethod
    def for_key(cls, store_dir: Path, key: str) -> "WordListStore":
        return cls(store_dir / f"{key}.json")

    @contextmanager
    def _file_lock(self):
        """Context manager for file locking using fcntl."""
        self._lock_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._lock_path, "w") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def load(self) -> list[Word]:
        """Load the stored words, or an empty list if nothing is stored yet."""
        try:
            with self._file_lock():
                if not self.path.exists():
                    return []
                with open(self.path, "r", encoding="utf-8") as f:
                    data = WordListData(**json.load(f))
        except (OSError, ValueError, TypeError, ValidationError) as e:
            raise StorageReadError(f"Could not read {self.path}: {e}") from e
        return data.words

    def save(self, words: list[Word]) -> None:
        """Replace the stored list."""
        data = WordListData(words=words)
        try:
            with self._file_lock():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "w", encoding="utf-8") as f:
                    json.dump(
                        data.model_dump(by_alias=True, exclude_none=True),
                        f,
                        ensure_ascii=False,
                        indent=2,
                    )
        except OSError as e:
            raise StorageWriteError(f"Could not write {self.path}: {e}") from e
