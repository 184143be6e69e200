"""Client-side pagination over the fully loaded word dictionary."""

from itertools import islice

import config
from wordbrowser.logger import get_logger
from wordbrowser.models import Word, WordDictionary


def load_page(
    dictionary: WordDictionary,
    page_number: int,
    page_size: int = config.PAGE_SIZE,
) -> list[Word]:
    """
    Slice one page of word stubs out of the dictionary.

    Args:
        dictionary: Full word mapping; its key order is the page order
        page_number: 1-based page number
        page_size: Number of words per page

    Returns:
        Stubs with ids ``start + 1`` onwards, empty past the end of the dictionary
    """
    if page_number < 1:
        raise ValueError(f"Page number must be >= 1, got {page_number}")
    if page_size < 1:
        raise ValueError(f"Page size must be >= 1, got {page_size}")

    start_index = (page_number - 1) * page_size
    end_index = start_index + page_size

    return [
        Word(id=start_index + i + 1, word=word)
        for i, word in enumerate(islice(dictionary, start_index, end_index))
    ]


class Paginator:
    """Accumulates pages of word stubs as the list is scrolled."""

    def __init__(self, dictionary: WordDictionary, page_size: int = config.PAGE_SIZE):
        self.dictionary = dictionary
        self.page_size = page_size
        self.words: list[Word] = []
        self.page = 0
        self.exhausted = False

    def load_next_page(self) -> list[Word]:
        """Load the page after the last one loaded and append it.

        Slicing is synchronous, so the page counter alone keeps a page from
        being loaded twice.
        """
        page_number = self.page + 1
        new_words = load_page(self.dictionary, page_number, self.page_size)
        self.page = page_number
        self.words.extend(new_words)
        if len(new_words) < self.page_size:
            self.exhausted = True

        get_logger().debug(
            f"Loaded page {self.page}: {len(new_words)} words ({len(self.words)} total)"
        )
        return new_words

    def on_end_reached(self) -> list[Word]:
        """Scroll-near-end trigger. Loads nothing once the dictionary is used up."""
        if self.exhausted:
            return []
        return self.load_next_page()

    def __len__(self) -> int:
        return len(self.words)
