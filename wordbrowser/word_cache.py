"""Session-scoped memoization of word lookups."""

import asyncio
from typing import Optional

import httpx

from wordbrowser.dictionary_client import lookup_word, parse_word_detail
from wordbrowser.logger import get_logger
from wordbrowser.models import Word


class WordCache:
    """Maps word text to the detail fetched for it.

    Entries are write-once and never evicted; the cache lives as long as the
    view that owns it.
    """

    def __init__(self):
        self._entries: dict[str, Word] = {}
        self._pending: dict[str, asyncio.Task] = {}

    def get(self, word: str) -> Optional[Word]:
        return self._entries.get(word)

    def put(self, word: str, detail: Word) -> Word:
        """Store a detail unless one is already cached. Returns the cached one."""
        return self._entries.setdefault(word, detail)

    def __contains__(self, word: str) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def lookup_or_fetch(self, word: str, client: httpx.AsyncClient) -> Word:
        """
        Return the cached detail for a word, fetching it on a miss.

        Concurrent calls for the same word share one request.

        Args:
            word: Word text, used as the cache key
            client: Async HTTP client

        Returns:
            The word detail

        Raises:
            WordNotFoundError: If the dictionary has no entry (nothing cached)
            DetailFetchError: If the lookup fails (nothing cached)
        """
        cached = self._entries.get(word)
        if cached is not None:
            return cached

        task = self._pending.get(word)
        if task is None:
            task = asyncio.ensure_future(self._fetch(word, client))
            self._pending[word] = task
            task.add_done_callback(lambda t: self._finish(word, t))

        # shield: one caller going away must not cancel the shared request
        return await asyncio.shield(task)

    def _finish(self, word: str, task: asyncio.Task) -> None:
        self._pending.pop(word, None)
        # exception is retrieved here even when no caller is left waiting
        if not task.cancelled() and task.exception() is not None:
            get_logger().debug(f"Lookup for {word} failed: {task.exception()}")

    async def _fetch(self, word: str, client: httpx.AsyncClient) -> Word:
        logger = get_logger()
        logger.debug(f"Cache miss: {word}")
        data = await lookup_word(word, client)
        detail = parse_word_detail(data, word_id=len(self._entries) + 1)
        logger.debug(f"Cached {word} as #{detail.id}")
        return self.put(word, detail)
