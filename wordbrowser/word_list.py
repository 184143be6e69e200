"""Word list with a detail panel: paging, lookups and meaning navigation."""

from typing import Callable, Optional

import httpx

import config
from wordbrowser.dictionary_client import DetailFetchError, WordNotFoundError
from wordbrowser.logger import get_logger
from wordbrowser.meaning_cursor import MeaningCursor
from wordbrowser.models import Word, WordDictionary, WordMeaning
from wordbrowser.paginator import Paginator
from wordbrowser.session import NotLoggedInError
from wordbrowser.user_lists import UserLists
from wordbrowser.word_cache import WordCache

SOURCE_FAVORITES = "favorites"
SOURCE_HISTORY = "history"
SOURCE_DICTIONARY = "dictionary"

Notifier = Callable[[str, str], None]


def log_notice(title: str, message: str) -> None:
    get_logger().warning(f"{title}: {message}")


class WordListView:
    """
    State behind the word grid and its detail panel.

    The list shows favorites, history or the paginated dictionary, picked in
    that order from whichever is supplied. Selecting a word opens the panel
    at once with the row's data, then fills it in from the word cache.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        word_dictionary: Optional[WordDictionary] = None,
        favorites: Optional[list[Word]] = None,
        history: Optional[list[Word]] = None,
        user_lists: Optional[UserLists] = None,
        notify: Optional[Notifier] = None,
        page_size: int = config.PAGE_SIZE,
    ):
        self.client = client
        self.user_lists = user_lists
        self.cache = WordCache()
        self.cursor = MeaningCursor()
        self.selected: Optional[Word] = None
        self._notify = notify or log_notice
        self._paginator: Optional[Paginator] = None
        self._fixed_words: list[Word] = []
        self._selection = 0
        self._live = True

        if favorites is not None:
            self.source = SOURCE_FAVORITES
            self._fixed_words = list(favorites)
        elif history is not None:
            self.source = SOURCE_HISTORY
            self._fixed_words = list(history)
        elif word_dictionary is not None:
            self.source = SOURCE_DICTIONARY
            self._paginator = Paginator(word_dictionary, page_size)
            self._paginator.load_next_page()
        else:
            raise ValueError("WordListView needs a dictionary, favorites or history")

    @property
    def words(self) -> list[Word]:
        if self._paginator is not None:
            return self._paginator.words
        return self._fixed_words

    @property
    def is_live(self) -> bool:
        return self._live

    def on_end_reached(self) -> list[Word]:
        """Load more rows when scrolled near the end. Fixed lists never grow."""
        if self._paginator is None:
            return []
        return self._paginator.on_end_reached()

    async def select(self, word: Word) -> Optional[Word]:
        """
        Open the detail panel for a word and enrich it.

        Args:
            word: Row that was picked

        Returns:
            The word detail, or None if the lookup failed or the result
            arrived after the panel moved on
        """
        self._selection += 1
        selection = self._selection
        self.selected = word
        self.cursor.reset(word.meanings)

        if self.user_lists is not None:
            self.user_lists.record_access(word)

        logger = get_logger()
        try:
            detail = await self.cache.lookup_or_fetch(word.word, self.client)
        except WordNotFoundError as e:
            logger.info(str(e))
            if self._is_current(selection):
                self._notify("Error", config.MSG_DETAIL_NOT_FOUND)
            return None
        except DetailFetchError as e:
            logger.error(f"Could not fetch details for {word.word}: {e}")
            if self._is_current(selection):
                self._notify("Error", config.MSG_DETAIL_FETCH_FAILED)
            return None

        if not self._is_current(selection):
            logger.debug(f"Discarding stale details for {word.word}")
            return None

        self.selected = detail
        self.cursor.reset(detail.meanings)
        return detail

    def _is_current(self, selection: int) -> bool:
        return self._live and selection == self._selection and self.selected is not None

    def close(self) -> None:
        self._selection += 1
        self.selected = None
        self.cursor.reset()

    def dispose(self) -> None:
        """Tear the view down. Lookups still in flight are ignored when they land."""
        self.close()
        self._live = False

    @property
    def current_meaning(self) -> Optional[WordMeaning]:
        return self.cursor.current

    @property
    def has_next(self) -> bool:
        return self.cursor.has_next

    @property
    def has_previous(self) -> bool:
        return self.cursor.has_previous

    def next_meaning(self) -> Optional[WordMeaning]:
        return self.cursor.next()

    def previous_meaning(self) -> Optional[WordMeaning]:
        return self.cursor.previous()

    @property
    def is_favorite(self) -> bool:
        if self.selected is None or self.user_lists is None:
            return False
        return self.user_lists.is_favorite(self.selected)

    def toggle_favorite(self) -> bool:
        """Toggle the open word in the user's favorites. Returns the new state."""
        if self.user_lists is None:
            raise NotLoggedInError("Log in to keep favorites")
        if self.selected is None:
            raise ValueError("No word selected")
        return self.user_lists.toggle_favorite(self.selected)
