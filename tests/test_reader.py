import pytest

from termreader.reader import ChapterProgress, GlobalReader, ReaderState

TEN_WORDS = "one two three four five six seven eight nine ten"


def test_from_text_splits_words_and_newlines():
    reader = GlobalReader.from_text("hello world\nfoo")
    assert reader.contents.words == ["hello", "world", "\n", "foo"]
    assert reader.contents.text_length == len("hello world\nfoo")
    assert reader.total_words() == 4


def test_from_text_drops_trailing_newlines():
    reader = GlobalReader.from_text("a\n\nb\n\n")
    assert reader.contents.words == ["a", "\n", "\n", "b"]


def test_empty_text_has_no_words():
    assert GlobalReader.from_text("").total_words() == 0


def test_display_lines_keep_blank_lines():
    reader = GlobalReader.from_text("a\n\nb")
    lines = reader.contents.display_lines(reader.state, 10, 5)
    assert lines == ["a", "", "b"]


def test_display_lines_fit_width_and_preserve_words():
    reader = GlobalReader.from_text(TEN_WORDS)
    lines = reader.contents.display_lines(reader.state, 10, 2)
    assert len(lines) == 2
    assert all(len(line) < 10 for line in lines)
    shown = " ".join(lines).split()
    assert shown == reader.contents.words[: len(shown)]
    assert reader.state.end_word_idx == len(shown)


def test_long_word_raises():
    reader = GlobalReader.from_text("supercalifragilistic")
    with pytest.raises(ValueError):
        reader.contents.display_lines(reader.state, 5, 3)


def test_resize_clears_scroll_history():
    reader = GlobalReader.from_text(TEN_WORDS)
    reader.scroll_down(10, 2)
    assert reader.state.prev_start_words
    reader.contents.display_lines(reader.state, 20, 2)
    assert reader.state.prev_start_words == []


def test_scroll_down_then_up_returns_to_start():
    reader = GlobalReader.from_text(TEN_WORDS)
    reader.scroll_down(10, 2)
    assert reader.state.start_word_idx > 0
    reader.scroll_up(10, 2)
    assert reader.state.start_word_idx == 0


def test_scroll_down_stops_when_screen_would_not_fill():
    reader = GlobalReader.from_text("a b")
    reader.scroll_down(10, 5)
    assert reader.state.start_word_idx == 0
    assert reader.state.prev_start_words == []


def test_scroll_up_at_top_is_noop():
    reader = GlobalReader.from_text(TEN_WORDS)
    reader.scroll_up(10, 2)
    assert reader.state.start_word_idx == 0


def test_scroll_up_without_history_finds_line_start():
    reader = GlobalReader.from_text(TEN_WORDS)
    reader.state = ReaderState(start_word_idx=2)
    reader.scroll_up(10, 2)
    assert reader.state.start_word_idx == 0


def test_scroll_up_without_history_stops_at_newline():
    reader = GlobalReader.from_text("alpha beta\ngamma delta")
    newline_at = reader.contents.words.index("\n")
    reader.state = ReaderState(start_word_idx=newline_at + 2)
    reader.scroll_up(40, 3)
    assert reader.state.start_word_idx == newline_at + 1


def test_progress_finished_when_all_shown():
    reader = GlobalReader.from_text("a b c")
    reader.contents.display_lines(reader.state, 20, 5)
    assert reader.progress() == ChapterProgress(finished=True)


def test_progress_reports_word_range():
    reader = GlobalReader.from_text(TEN_WORDS)
    reader.contents.display_lines(reader.state, 10, 2)
    progress = reader.progress()
    assert progress.finished is False
    assert progress.start == reader.state.start_word_idx
    assert progress.end == reader.state.end_word_idx
    assert progress.end < reader.total_words()