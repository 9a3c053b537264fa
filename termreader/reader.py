"""Word-wrapped, scrollable chapter text."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

NEWLINE = "\n"


@dataclass(frozen=True)
class ChapterProgress:
    """Progress through a chapter: the displayed word range, or finished."""

    start: int = 0
    end: int = 0
    finished: bool = False


@dataclass
class ReaderState:
    start_word_idx: int = 0
    end_word_idx: int = 0
    # Earlier start words, so scrolling back up shows the text as it first was.
    prev_start_words: list[int] = field(default_factory=list)
    prev_term_width: int = 0
    prev_term_height: int = 0


@dataclass
class ReaderContents:
    """The words of a chapter; line breaks are kept as ``"\\n"`` words."""

    words: list[str]
    text_length: int

    def display_lines(self, state: ReaderState, term_width: int, term_height: int) -> list[str]:
        """Return the lines to show for the given size, updating ``state``."""
        if (term_width, term_height) != (state.prev_term_width, state.prev_term_height):
            state.prev_start_words = []
            state.prev_term_width = term_width
            state.prev_term_height = term_height

        cursor = state.start_word_idx
        word_count = 0
        lines: list[str] = []
        current = ""
        while len(lines) < term_height:
            if cursor >= len(self.words):
                lines.append(current)
                break
            word = self.words[cursor]
            if word == NEWLINE:
                lines.append(current)
                current = ""
                cursor += 1
                word_count += 1
                continue
            if not current and len(word) > term_width:
                raise ValueError("encountered word longer than terminal width")
            if not current:
                current = word
            elif len(current) + 1 + len(word) < term_width:
                current = f"{current} {word}"
            else:
                lines.append(current)
                current = ""
                continue
            cursor += 1
            word_count += 1

        state.end_word_idx = state.start_word_idx + word_count
        return lines


@dataclass
class GlobalReader:
    contents: ReaderContents
    state: ReaderState = field(default_factory=ReaderState)

    @classmethod
    def from_text(cls, text: str) -> GlobalReader:
        """Build a reader from a chapter's text."""
        raw_lines = text.split(NEWLINE)
        if raw_lines and raw_lines[-1] == "":
            raw_lines.pop()
        words: list[str] = []
        for line in raw_lines:
            words.extend(line.removesuffix("\r").split())
            words.append(NEWLINE)
        while words and not words[-1].strip():
            words.pop()
        return cls(ReaderContents(words, len(text)))

    def scroll_down(self, term_width: int, term_height: int) -> None:
        """Scroll down one line, if that still fills the screen."""
        current = self.contents.display_lines(self.state, term_width, term_height)
        if not current:
            return

        if current[0] == "":
            offset = 1
        elif len(current) > 1 and current[1] != "":
            offset = len(current[0].split())
        else:
            offset = len(current[0].split()) + 1
        logger.debug("scroll offset: %d", offset)

        proposed = copy.deepcopy(self.state)
        proposed.start_word_idx = self.state.start_word_idx + offset
        proposed.prev_start_words.append(self.state.start_word_idx)

        new_display = self.contents.display_lines(proposed, term_width, term_height)
        if len(new_display) < term_height:
            return
        self.state = proposed

    def scroll_up(self, term_width: int, term_height: int) -> None:
        """Scroll up one line."""
        state = self.state
        words = self.contents.words
        if state.prev_start_words:
            state.start_word_idx = state.prev_start_words.pop()
            return
        if state.start_word_idx == 0:
            return

        pos = state.start_word_idx - 1
        if words[pos] == NEWLINE:
            if pos == 0:
                state.start_word_idx = 0
                return
            pos -= 1

        if len(words[pos]) > term_width:
            raise ValueError("encountered word longer than terminal width")
        line = words[pos]
        while True:
            if pos == 0:
                state.start_word_idx = 0
                return
            pos -= 1
            word = words[pos]
            if word == NEWLINE:
                state.start_word_idx = pos + 1
                return
            if len(line) + len(word) + 1 <= term_width:
                line = f"{word} {line}"
            else:
                state.start_word_idx = pos + 1
                return

    def progress(self) -> ChapterProgress:
        if self.state.end_word_idx >= len(self.contents.words) - 1:
            return ChapterProgress(finished=True)
        return ChapterProgress(self.state.start_word_idx, self.state.end_word_idx)

    def total_words(self) -> int:
        return len(self.contents.words)