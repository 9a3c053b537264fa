from dataclasses import dataclass

import pytest

from termreader.reader_data import ReaderData


@dataclass
class FakeChapter:
    contents: str
    name: str = ""


LONG_TEXT = "\n".join(f"line{n}" for n in range(10))


def test_empty_reader():
    data = ReaderData()
    assert data.chapter_progress() is None
    assert data.chapter_progress_pct() is None
    data.scroll_down()
    data.scroll_up()
    assert data.reader is None


def test_set_data_requires_chapter():
    data = ReaderData()
    with pytest.raises(ValueError):
        data.set_data("book", None)
    assert data.book is None


def test_set_data_stores_book_and_chapter():
    data = ReaderData()
    chapter = FakeChapter(LONG_TEXT)
    data.set_data("book", chapter)
    assert data.book == "book"
    assert data.chapter is chapter
    assert data.reader.contents.text_length == len(LONG_TEXT)


def test_set_dimensions():
    data = ReaderData()
    data.set_dimensions(40, 12)
    assert (data.term_width, data.term_height) == (40, 12)


def test_progress_before_display():
    data = ReaderData()
    data.set_data("book", FakeChapter(LONG_TEXT))
    progress = data.chapter_progress()
    assert not progress.finished
    assert data.chapter_progress_pct() == 0.0


def test_short_chapter_finishes():
    data = ReaderData()
    data.set_data("book", FakeChapter("one two three"))
    data.set_dimensions(20, 5)
    data.scroll_down()
    assert data.chapter_progress().finished
    assert data.chapter_progress_pct() == 1.0


def test_scroll_down_then_up_returns_to_start():
    data = ReaderData()
    data.set_data("book", FakeChapter(LONG_TEXT))
    data.set_dimensions(20, 3)
    data.scroll_down()
    assert data.reader.state.start_word_idx > 0
    pct = data.chapter_progress_pct()
    assert 0.0 < pct < 1.0
    data.scroll_up()
    assert data.reader.state.start_word_idx == 0


def test_scroll_up_at_start_stays():
    data = ReaderData()
    data.set_data("book", FakeChapter(LONG_TEXT))
    data.set_dimensions(20, 3)
    data.scroll_up()
    assert data.reader.state.start_word_idx == 0