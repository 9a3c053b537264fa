"""Selection state for the sources tab.

The context passed in provides ``source_info()``, a list of
``(source_id, name)`` pairs; there is always at least one source.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from termreader.history import swap_library_option
from termreader.lists import StatefulList

SOURCE_OPTIONS = ("Search", "View Popular")
NOVEL_OPTIONS = ("Start from beginning", "Add to library", "Open in browser")


class PreviewField(Enum):
    """The focused part of a novel preview."""

    SUMMARY = "summary"
    CHAPTERS = "chapters"
    OPTIONS = "options"

    def next_opts(self) -> PreviewField:
        """The next field when the options pane is shown."""
        return {
            PreviewField.SUMMARY: PreviewField.OPTIONS,
            PreviewField.CHAPTERS: PreviewField.SUMMARY,
            PreviewField.OPTIONS: PreviewField.CHAPTERS,
        }[self]

    def prev_opts(self) -> PreviewField:
        """The previous field when the options pane is shown."""
        return {
            PreviewField.SUMMARY: PreviewField.CHAPTERS,
            PreviewField.CHAPTERS: PreviewField.OPTIONS,
            PreviewField.OPTIONS: PreviewField.SUMMARY,
        }[self]

    def next_no_opts(self) -> PreviewField:
        """The next field when there is no options pane."""
        if self is PreviewField.OPTIONS:
            raise ValueError("the options field is not shown")
        if self is PreviewField.SUMMARY:
            return PreviewField.CHAPTERS
        return PreviewField.SUMMARY

    def prev_no_opts(self) -> PreviewField:
        """The previous field when there is no options pane."""
        return self.next_no_opts()


class SourceData:
    """The selected source and the options offered on the sources tab."""

    def __init__(self) -> None:
        self.selected_source = 0
        self.source_options: StatefulList[str] = StatefulList(SOURCE_OPTIONS)
        self.novel_options: StatefulList[str] = StatefulList(NOVEL_OPTIONS)
        self.novel_preview_selected_field = PreviewField.CHAPTERS

    def reset_novel_options(self) -> None:
        self.novel_options = StatefulList(NOVEL_OPTIONS)

    def swap_library_options(self) -> None:
        """Swap between adding a book to and removing it from the library."""
        swap_library_option(self.novel_options)

    def select_next(self, ctx: Any) -> None:
        """Select the next source, wrapping around."""
        self.selected_source = (self.selected_source + 1) % len(ctx.source_info())

    def select_prev(self, ctx: Any) -> None:
        """Select the previous source, wrapping around."""
        if self.selected_source == 0:
            self.selected_source = len(ctx.source_info()) - 1
        else:
            self.selected_source -= 1

    def selected_source_id(self, ctx: Any) -> Any:
        return ctx.source_info()[self.selected_source][0]