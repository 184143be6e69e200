"""Shared fixtures: canned dictionary API responses and a mocked HTTP client."""

import httpx
import pytest

HELLO_ENTRY = [
    {
        "word": "hello",
        "phonetic": "həˈləʊ",
        "phonetics": [
            {"text": "həˈləʊ", "audio": ""},
            {"text": "həˈloʊ", "audio": "https://api.dictionaryapi.dev/media/pronunciations/en/hello-us.mp3"},
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [{"definition": "\"Hello!\" or an equivalent greeting.", "synonyms": []}],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To greet with \"hello\"."}],
            },
            {
                "partOfSpeech": "interjection",
                "definitions": [
                    {"definition": "A greeting (salutation) said when meeting someone."},
                    {"definition": "A greeting used when answering the telephone."},
                ],
            },
        ],
    }
]

NOT_FOUND_BODY = {
    "title": "No Definitions Found",
    "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
    "resolution": "You can try the search again at later time or head to the web instead.",
}


class FakeDictionaryApi:
    """Serves canned entries per word and counts requests."""

    def __init__(self, entries=None):
        self.entries = dict(entries or {})
        self.requests: list[str] = []
        self.fail_with: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        word = request.url.path.rsplit("/", 1)[-1]
        self.requests.append(word)
        if self.fail_with is not None:
            raise self.fail_with
        if word not in self.entries:
            return httpx.Response(404, json=NOT_FOUND_BODY)
        return httpx.Response(200, json=self.entries[word])

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def api():
    return FakeDictionaryApi({"hello": HELLO_ENTRY})


@pytest.fixture
def words_45():
    return {f"word{i:02d}": 1 for i in range(1, 46)}


@pytest.fixture
def hello_entry():
    return HELLO_ENTRY
