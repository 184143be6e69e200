"""Configuration settings for the word browser."""

from datetime import datetime
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
STORE_DIR = DATA_DIR / "store"  # favorites_<user>.json, history_<user>.json
LOGS_DIR = PROJECT_ROOT / "logs"


def get_log_path(timestamp: datetime | None = None) -> Path:
    """Generate a session log path with datetime suffix.

    Args:
        timestamp: Datetime to use for suffix. If None, uses current time.

    Returns:
        Path like logs/session_20260131_143022.log
    """
    if timestamp is None:
        timestamp = datetime.now()
    return LOGS_DIR / f"session_{timestamp.strftime('%Y%m%d_%H%M%S')}.log"


# API settings
WORD_LIST_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/refs/heads/master/words_dictionary.json"
)
WORD_LIST_TIMEOUT = 60  # seconds
FREE_DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
DICTIONARY_API_TIMEOUT = 10  # seconds
DICTIONARY_API_MAX_ATTEMPTS = 1  # 1 = no automatic retries

# List settings
PAGE_SIZE = 20
GRID_COLUMNS = 2

# Storage keys
FAVORITES_KEY_PREFIX = "favorites"
HISTORY_KEY_PREFIX = "history"

# User-facing messages
MSG_DICTIONARY_LOAD_FAILED = "An error occurred while loading the word dictionary."
MSG_DETAIL_NOT_FOUND = "Word details not found."
MSG_DETAIL_FETCH_FAILED = "Could not fetch word details. Please try again later."
MSG_AUDIO_UNAVAILABLE = "No pronunciation audio found for this word."
MSG_LOGIN_REQUIRED = "You need to be logged in to view your {kind}."
MSG_NO_FAVORITES = "You haven't added any favorites yet."
MSG_NO_HISTORY = "You haven't accessed any words yet."
