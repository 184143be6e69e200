from wordbrowser.meaning_cursor import MeaningCursor
from wordbrowser.models import WordMeaning


def make_meanings(count):
    return [WordMeaning(part_of_speech=f"pos{i}", definitions=[]) for i in range(count)]


def test_next_clamps_at_last_meaning():
    cursor = MeaningCursor(make_meanings(3))
    for _ in range(3):
        cursor.next()

    assert cursor.index == 2
    assert cursor.current.part_of_speech == "pos2"
    assert not cursor.has_next
    assert cursor.has_previous


def test_previous_clamps_at_first_meaning():
    cursor = MeaningCursor(make_meanings(3))
    cursor.previous()

    assert cursor.index == 0
    assert not cursor.has_previous
    assert cursor.has_next


def test_single_meaning_has_no_navigation():
    cursor = MeaningCursor(make_meanings(1))
    cursor.next()

    assert cursor.index == 0
    assert not cursor.has_next
    assert not cursor.has_previous


def test_no_meanings():
    cursor = MeaningCursor([])

    assert cursor.current is None
    assert cursor.next() is None
    assert cursor.previous() is None
    assert not cursor.has_next
    assert not cursor.has_previous


def test_reset_returns_to_first_meaning():
    cursor = MeaningCursor(make_meanings(4))
    cursor.next()
    cursor.next()

    cursor.reset(make_meanings(2))

    assert cursor.index == 0
    assert cursor.count == 2
