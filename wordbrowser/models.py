"""Pydantic data models for the word browser."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WordDefinition(BaseModel):
    """A single text definition."""

    model_config = ConfigDict(frozen=True)

    definition: str


class WordMeaning(BaseModel):
    """One part-of-speech sense of a word with its definitions."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: list[WordDefinition] = Field(default_factory=list)


class Word(BaseModel):
    """A word record.

    A stub carries only ``id`` and ``word``. A detail built from a dictionary
    lookup always has ``phonetic``, ``meanings`` and ``audio`` set.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    word: str
    phonetic: Optional[str] = None
    meanings: Optional[list[WordMeaning]] = None
    audio: Optional[str] = None

    @property
    def is_stub(self) -> bool:
        return self.meanings is None


class WordListData(BaseModel):
    """Stored favorites or history list."""

    words: list[Word] = Field(default_factory=list)


WordDictionary = dict[str, int]
