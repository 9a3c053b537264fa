"""The state of the whole interface and the screens it moves between.

The context passed in is duck-typed. Besides what the tab modules expect
(``library_categories()``, ``library_books()``, ``history()``,
``history_entry_count()``, ``updates_entry_count()``, ``source_info()``), it
provides:

- ``save_dir()``, where the configuration is kept;
- ``remove_history_entry(book_id)`` and ``add_history_entry(book_id)``.

A book from a source provides ``id``, ``is_local()``, ``current_chapter()``
and ``set_progress(progress, chapter)``.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from termreader.buffer import Buffer
from termreader.channels import ChannelData
from termreader.config import ConfigData, ConfigError
from termreader.history import HistoryData
from termreader.library import LibData
from termreader.lists import StatefulList
from termreader.reader_data import ReaderData
from termreader.source_state import SourceData
from termreader.updates import UpdatesData

MENU_TABS = ("Library", "Updates", "Sources", "History", "Settings")


class Screen(Enum):
    """The screen the user is looking at."""

    READER = auto()
    LIB_MAIN = auto()
    LIB_BOOK_VIEW = auto()
    LIB_BOOK_VIEW_CATEGORY = auto()
    LIB_CATEGORY_SELECT = auto()
    LIB_CATEGORY_OPTIONS = auto()
    UPDATES_MAIN = auto()
    SOURCES_MAIN = auto()
    SOURCES_SEARCH_RES = auto()
    SOURCES_SELECT = auto()
    SOURCES_BOOK_VIEW = auto()
    HISTORY_MAIN = auto()
    HISTORY_BOOK_VIEW = auto()
    SETTINGS_MAIN = auto()


MAIN_SCREENS = frozenset(
    {
        Screen.LIB_MAIN,
        Screen.UPDATES_MAIN,
        Screen.SOURCES_MAIN,
        Screen.HISTORY_MAIN,
        Screen.SETTINGS_MAIN,
    }
)
# Screens that are never returned to with the back button.
SELECTION_SCREENS = frozenset({Screen.SOURCES_SELECT})


def _load_config(ctx: Any) -> ConfigData:
    try:
        return ConfigData.load(ctx.save_dir())
    except ConfigError:
        return ConfigData()


class AppState:
    """Everything the interface needs to run, apart from the stored books."""

    def __init__(self, ctx: Any) -> None:
        self.quit = False
        self.screen = Screen.LIB_MAIN
        self.prev_screens: list[Screen] = []
        self.channel = ChannelData()
        self.menu_tabs: StatefulList[str] = StatefulList(MENU_TABS)
        self.lib_data = LibData(ctx)
        self.source_data = SourceData()
        self.history_data = HistoryData(ctx)
        self.updates_data = UpdatesData(ctx)
        self.reader_data = ReaderData()
        self.config = _load_config(ctx)
        self.buffer = Buffer()
        self.command_bar = False
        self.typing = False

    def update_screen(self, new: Screen) -> None:
        """Move to ``new``, remembering the current screen for going back."""
        if self.screen == new:
            return
        if new in MAIN_SCREENS:
            self.prev_screens = []
        elif self.screen not in SELECTION_SCREENS:
            self.prev_screens.append(self.screen)
        self.screen = new

    def in_main_screen(self) -> bool:
        return self.screen in MAIN_SCREENS

    def move_to_reader(self, book: Any, chapter: Any) -> None:
        """Open ``chapter`` of ``book`` and switch to the reader."""
        self.reader_data.set_data(book, chapter)
        self.prev_screens = []
        self.screen = Screen.READER

    def update_from_reader(self, ctx: Any) -> None:
        """Store the reading progress and put the book on top of the history."""
        book = self.reader_data.book
        if book is None:
            return
        if book.is_local():
            raise ValueError("reading progress is only tracked for books from a source")
        progress = self.reader_data.chapter_progress()
        if progress is None:
            raise ValueError("no chapter is open in the reader")
        book.set_progress(progress, book.current_chapter())

        ctx.remove_history_entry(book.id)
        ctx.add_history_entry(book.id)
        self.history_data.selected_entry = 0