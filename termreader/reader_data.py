"""What is being read: the book, the chapter and its scrollable text."""

from __future__ import annotations

from typing import Any

from termreader.reader import ChapterProgress, GlobalReader


class ReaderData:
    """The open book and chapter, with the reader and the screen size it uses.

    A chapter is any object with a ``contents`` attribute holding its text.
    """

    def __init__(self) -> None:
        self.book: Any = None
        self.chapter: Any = None
        self.reader: GlobalReader | None = None
        self.term_width = 0
        self.term_height = 0

    def set_data(self, book: Any, chapter: Any) -> None:
        """Open ``chapter`` of ``book`` in the reader."""
        if chapter is None:
            raise ValueError("a chapter is required to open the reader")
        self.reader = GlobalReader.from_text(chapter.contents)
        self.book = book
        self.chapter = chapter

    def scroll_down(self) -> None:
        if self.reader is not None:
            self.reader.scroll_down(self.term_width, self.term_height)

    def scroll_up(self) -> None:
        if self.reader is not None:
            self.reader.scroll_up(self.term_width, self.term_height)

    def set_dimensions(self, width: int, height: int) -> None:
        """Record the size of the area the text is drawn in."""
        self.term_width = width
        self.term_height = height

    def chapter_progress_pct(self) -> float | None:
        """Progress through the chapter as a fraction, by the last word shown."""
        if self.reader is None:
            return None
        progress = self.reader.progress()
        if progress.finished:
            return 1.0
        return progress.end / self.reader.total_words()

    def chapter_progress(self) -> ChapterProgress | None:
        if self.reader is None:
            return None
        return self.reader.progress()