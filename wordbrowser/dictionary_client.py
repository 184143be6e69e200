"""Clients for the bulk word list and the Free Dictionary API."""

import json
from urllib.parse import quote

import httpx
from pydantic import ValidationError
from tenacity import retry, stop_after_attempt, retry_if_exception_type
from tqdm import tqdm

import config
from wordbrowser.logger import get_logger
from wordbrowser.models import Word, WordDictionary, WordMeaning


class DictionaryError(Exception):
    """Base class for dictionary source failures."""

    pass


class BulkFetchError(DictionaryError):
    """Raised when the full word list cannot be loaded."""

    pass


class DetailFetchError(DictionaryError):
    """Raised when a word lookup fails in transport or parsing."""

    pass


class WordNotFoundError(DictionaryError):
    """Raised when the dictionary has no entry for a word."""

    pass


async def fetch_word_dictionary(
    client: httpx.AsyncClient,
    url: str = config.WORD_LIST_URL,
    show_progress: bool = False,
) -> WordDictionary:
    """
    Download the full word list.

    Args:
        client: Async HTTP client
        url: Location of a JSON object mapping every word to a number
        show_progress: Display a download progress bar

    Returns:
        Mapping of word to value, in the order the source lists them

    Raises:
        BulkFetchError: If the list cannot be downloaded or decoded
    """
    logger = get_logger()
    logger.debug(f"Fetching word list from {url}")

    try:
        async with client.stream("GET", url, timeout=config.WORD_LIST_TIMEOUT) as response:
            if response.status_code != 200:
                raise BulkFetchError(f"Failed to fetch word dictionary: HTTP {response.status_code}")

            total = int(response.headers.get("content-length", 0)) or None
            chunks = []
            with tqdm(
                total=total,
                unit="B",
                unit_scale=True,
                desc="Loading words",
                disable=not show_progress,
            ) as pbar:
                async for chunk in response.aiter_bytes():
                    chunks.append(chunk)
                    pbar.update(len(chunk))
    except httpx.HTTPError as e:
        raise BulkFetchError(f"Failed to fetch word dictionary: {e}") from e

    try:
        data = json.loads(b"".join(chunks))
    except ValueError as e:
        raise BulkFetchError(f"Word dictionary is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise BulkFetchError("Word dictionary must be a JSON object")

    logger.info(f"Loaded {len(data)} words")
    return data


@retry(
    stop=stop_after_attempt(config.DICTIONARY_API_MAX_ATTEMPTS),
    retry=retry_if_exception_type(httpx.TimeoutException),
    reraise=True,
)
async def _get_entries(url: str, client: httpx.AsyncClient) -> httpx.Response:
    return await client.get(url, timeout=config.DICTIONARY_API_TIMEOUT)


async def lookup_word(word: str, client: httpx.AsyncClient) -> list:
    """
    Look up a word in the Free Dictionary API.

    Args:
        word: The word to look up (sent lowercase)
        client: Async HTTP client

    Returns:
        Raw API response (list of entries)

    Raises:
        WordNotFoundError: If word is not in the dictionary
        DetailFetchError: If the request or decoding fails
    """
    url = f"{config.FREE_DICTIONARY_API_URL}/{quote(word.lower(), safe='')}"

    try:
        response = await _get_entries(url, client)
    except httpx.HTTPError as e:
        raise DetailFetchError(f"Lookup failed for {word}: {e}") from e

    if response.status_code == 404:
        raise WordNotFoundError(f"Word not found: {word}")

    if response.is_error:
        raise DetailFetchError(f"Lookup failed for {word}: HTTP {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise DetailFetchError(f"Unexpected response format for: {word}") from e


def parse_word_detail(data: list, word_id: int) -> Word:
    """
    Build a word detail from the first entry of an API response.

    Args:
        data: Raw API response (list of entries)
        word_id: Local sequence number for the record

    Returns:
        Word with phonetic, meanings and audio filled in

    Raises:
        WordNotFoundError: If the response holds no entries
        DetailFetchError: If the first entry is malformed
    """
    if not data or not isinstance(data, list):
        raise WordNotFoundError("Word details not found")

    entry = data[0]
    if not isinstance(entry, dict) or not entry.get("word"):
        raise DetailFetchError("Malformed dictionary entry")

    try:
        # First phonetic with a non-empty audio URL
        audio = ""
        for p in entry.get("phonetics") or []:
            if isinstance(p, dict) and p.get("audio"):
                audio = p["audio"]
                break

        meanings = [
            WordMeaning(
                part_of_speech=m.get("partOfSpeech") or "",
                definitions=m.get("definitions") or [],
            )
            for m in entry.get("meanings") or []
        ]

        return Word(
            id=word_id,
            word=entry["word"],
            phonetic=entry.get("phonetic") or "",
            meanings=meanings,
            audio=audio,
        )
    except (AttributeError, TypeError, ValidationError) as e:
        raise DetailFetchError(f"Malformed dictionary entry for {entry['word']!r}") from e
