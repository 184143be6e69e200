#!/usr/bin/env python3
"""Word Browser - interactive console dictionary."""

import argparse
import asyncio
import logging
import sys

import httpx

import config
from wordbrowser.dictionary_client import (
    BulkFetchError,
    DetailFetchError,
    WordNotFoundError,
    fetch_word_dictionary,
)
from wordbrowser.logger import get_logger, setup_logger
from wordbrowser.models import Word
from wordbrowser.session import NotLoggedInError, Session
from wordbrowser.user_lists import UserLists
from wordbrowser.word_cache import WordCache
from wordbrowser.word_list import SOURCE_DICTIONARY, WordListView

HELP_TEXT = """Commands:
  list            show the loaded words
  more            load the next page
  open ID|WORD    open a word
  next / prev     show the next or previous meaning
  play            show the pronunciation audio URL
  fav             add or remove the open word from favorites
  close           close the open word
  quit            leave"""


def print_notice(title: str, message: str) -> None:
    print(f"{title}: {message}")


def render_list(words: list[Word], start: int = 0) -> None:
    """Print words as a grid."""
    rows = words[start:]
    width = max((len(w.word) for w in rows), default=0) + 8
    for i in range(0, len(rows), config.GRID_COLUMNS):
        cells = [f"{w.id:>6}  {w.word}".ljust(width) for w in rows[i:i + config.GRID_COLUMNS]]
        print("".join(cells).rstrip())


def render_panel(view: WordListView) -> None:
    """Print the detail panel for the open word."""
    word = view.selected
    if word is None:
        return

    print()
    print(word.word)
    if word.phonetic:
        print(f"  {word.phonetic}")
    if word.audio:
        print("  (play) Play Pronunciation")

    meaning = view.current_meaning
    if meaning is not None:
        print(f"  Meanings ({view.cursor.index + 1}/{view.cursor.count})")
        for d in meaning.definitions:
            print(f"    {meaning.part_of_speech.capitalize()} - {d.definition}")

    if view.user_lists is not None:
        print("  [*] Remove from Favorites" if view.is_favorite else "  [ ] Add to Favorites")

    prev_label = "< prev" if view.has_previous else "      "
    next_label = "next >" if view.has_next else ""
    print(f"  {prev_label}    {next_label}".rstrip())


def find_word(view: WordListView, key: str) -> Word | None:
    if key.isdigit():
        word_id = int(key)
        return next((w for w in view.words if w.id == word_id), None)
    return next((w for w in view.words if w.word == key), None)


async def run_session(view: WordListView) -> None:
    """Read commands until the user quits."""
    render_list(view.words)
    print("Type 'help' for commands.")

    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            break

        command, _, arg = line.strip().partition(" ")
        arg = arg.strip()

        if command in ("quit", "exit", "q"):
            break
        elif command == "help":
            print(HELP_TEXT)
        elif command == "list":
            render_list(view.words)
        elif command == "more":
            before = len(view.words)
            if view.source != SOURCE_DICTIONARY:
                print(f"The {view.source} list has no more pages.")
            elif not view.on_end_reached():
                print("No more words.")
            else:
                render_list(view.words, start=before)
        elif command == "open":
            word = find_word(view, arg)
            if word is None:
                print(f"No word '{arg}' in the list. Try 'more' to load further pages.")
                continue
            await view.select(word)
            render_panel(view)
        elif view.selected is None:
            print("Open a word first.")
        elif command == "next":
            view.next_meaning()
            render_panel(view)
        elif command == "prev":
            view.previous_meaning()
            render_panel(view)
        elif command == "play":
            if view.selected.audio:
                print(view.selected.audio)
            else:
                print_notice("Audio not available", config.MSG_AUDIO_UNAVAILABLE)
        elif command == "fav":
            try:
                view.toggle_favorite()
            except NotLoggedInError:
                print("Log in with --user to keep favorites.")
                continue
            render_panel(view)
        elif command == "close":
            view.close()
        else:
            print(f"Unknown command: {command}")

    view.dispose()


def load_user_lists(session: Session) -> UserLists | None:
    if not session.is_logged_in:
        return None
    user_lists = UserLists(session.user_id)
    user_lists.load()
    return user_lists


async def browse(session: Session) -> int:
    logger = get_logger()
    async with httpx.AsyncClient(follow_redirects=True) as client:
        try:
            word_dictionary = await fetch_word_dictionary(client, show_progress=True)
        except BulkFetchError as e:
            logger.error(f"Error loading word list: {e}")
            print(config.MSG_DICTIONARY_LOAD_FAILED)
            return 1

        view = WordListView(
            client,
            word_dictionary=word_dictionary,
            user_lists=load_user_lists(session),
            notify=print_notice,
        )
        await run_session(view)
    return 0


async def browse_user_list(session: Session, kind: str) -> int:
    try:
        user_id = session.require_user()
    except NotLoggedInError:
        print(config.MSG_LOGIN_REQUIRED.format(kind=kind))
        return 1

    user_lists = UserLists(user_id)
    user_lists.load()
    if kind == "favorites":
        words, empty_message = user_lists.favorites.favorites, config.MSG_NO_FAVORITES
    else:
        words, empty_message = user_lists.history.history, config.MSG_NO_HISTORY

    if not words:
        print(empty_message)
        return 0

    async with httpx.AsyncClient(follow_redirects=True) as client:
        view = WordListView(client, user_lists=user_lists, notify=print_notice, **{kind: words})
        await run_session(view)
    return 0


async def lookup(session: Session, text: str) -> int:
    user_lists = load_user_lists(session)
    cache = WordCache()
    async with httpx.AsyncClient(follow_redirects=True) as client:
        try:
            detail = await cache.lookup_or_fetch(text, client)
        except WordNotFoundError:
            print_notice("Error", config.MSG_DETAIL_NOT_FOUND)
            return 1
        except DetailFetchError as e:
            get_logger().error(f"Lookup failed: {e}")
            print_notice("Error", config.MSG_DETAIL_FETCH_FAILED)
            return 1

    if user_lists is not None:
        user_lists.record_access(detail)

    print(detail.word)
    if detail.phonetic:
        print(f"  {detail.phonetic}")
    if detail.audio:
        print(f"  {detail.audio}")
    for meaning in detail.meanings or []:
        print(f"  {meaning.part_of_speech.capitalize()}")
        for i, d in enumerate(meaning.definitions, start=1):
            print(f"    {i}. {d.definition}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Word Browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Browse the full word list
  python main.py browse --user alice

  # Browse saved words
  python main.py favorites --user alice
  python main.py history --user alice

  # Look up a single word
  python main.py lookup serendipity
        """,
    )
    parser.add_argument(
        "--user",
        type=str,
        help="User id; favorites and history are kept per user",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo log records to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("browse", help="Browse the full word list")
    subparsers.add_parser("favorites", help="Browse your favorite words")
    subparsers.add_parser("history", help="Browse words you have opened")
    lookup_parser = subparsers.add_parser("lookup", help="Look up one word")
    lookup_parser.add_argument("word", type=str)

    args = parser.parse_args()

    logger = setup_logger(
        level=logging.DEBUG if args.verbose else logging.INFO,
        console=args.verbose,
    )
    session = Session(args.user)
    logger.info(f"Command: {args.command} (user: {session.user_id or '-'})")

    try:
        if args.command == "browse":
            status = asyncio.run(browse(session))
        elif args.command == "lookup":
            status = asyncio.run(lookup(session, args.word))
        else:
            status = asyncio.run(browse_user_list(session, args.command))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        status = 1

    sys.exit(status)


if __name__ == "__main__":
    main()
