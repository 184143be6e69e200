"""Bounded navigation through the meanings of a selected word."""

from typing import Optional, Sequence

from wordbrowser.models import WordMeaning


class MeaningCursor:
    """Tracks which meaning of a word is on display."""

    def __init__(self, meanings: Optional[Sequence[WordMeaning]] = None):
        self.reset(meanings)

    def reset(self, meanings: Optional[Sequence[WordMeaning]] = None) -> None:
        self._meanings = list(meanings or [])
        self.index = 0

    @property
    def count(self) -> int:
        return len(self._meanings)

    @property
    def current(self) -> Optional[WordMeaning]:
        if not self._meanings:
            return None
        return self._meanings[self.index]

    @property
    def has_next(self) -> bool:
        return self.index < self.count - 1

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    def next(self) -> Optional[WordMeaning]:
        if self.has_next:
            self.index += 1
        return self.current

    def previous(self) -> Optional[WordMeaning]:
        if self.has_previous:
            self.index -= 1
        return self.current
