"""Selection state for the history tab.

The context passed in provides ``history()``, a list of entries, and
``history_entry_count()``.
"""

from __future__ import annotations

from typing import Any

from termreader.lists import StatefulList

LOCAL_BOOK_OPTIONS = ("Continue reading", "Remove from history")
GLOBAL_BOOK_OPTIONS = ("Continue reading", "Remove from history", "Open in browser")
ADD_TO_LIBRARY = "Add to library"
REMOVE_FROM_LIBRARY = "Remove from library"


def swap_library_option(options: StatefulList[str]) -> None:
    """Turn "Add to library" into "Remove from library" and back."""
    swapped = {ADD_TO_LIBRARY: REMOVE_FROM_LIBRARY, REMOVE_FROM_LIBRARY: ADD_TO_LIBRARY}
    options.items = [swapped.get(item, item) for item in options.items]


class HistoryData:
    """The selected history entry and the options for a history book."""

    def __init__(self, ctx: Any) -> None:
        self.selected_entry: int | None = 0 if ctx.history_entry_count() else None
        self.local_book_options: StatefulList[str] = StatefulList(LOCAL_BOOK_OPTIONS)
        self.global_book_options: StatefulList[str] = StatefulList(GLOBAL_BOOK_OPTIONS)

    def reset_options(self) -> None:
        """Restore the default option lists."""
        self.local_book_options = StatefulList(LOCAL_BOOK_OPTIONS)
        self.global_book_options = StatefulList(GLOBAL_BOOK_OPTIONS)

    def swap_library_options(self) -> None:
        """Swap between adding a book to and removing it from the library."""
        swap_library_option(self.global_book_options)

    def selected_book(self, ctx: Any) -> Any:
        """Return the selected history entry, or None."""
        if self.selected_entry is None:
            return None
        return ctx.history()[self.selected_entry]

    def select_next_entry(self, ctx: Any) -> None:
        count = ctx.history_entry_count()
        if count == 0:
            self.selected_entry = None
        elif self.selected_entry is None:
            self.selected_entry = 0
        else:
            self.selected_entry = (self.selected_entry + 1) % count

    def select_prev_entry(self, ctx: Any) -> None:
        count = ctx.history_entry_count()
        if self.selected_entry is None or self.selected_entry == 0:
            if count != 0:
                self.selected_entry = count - 1
        else:
            self.selected_entry -= 1