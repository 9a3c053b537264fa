"""Selection state for the library tab.

The context passed in provides ``library_categories()``, an ordered list of
category names, and ``library_books()``, a mapping of category name to books.
There is always at least one category.
"""

from __future__ import annotations

from typing import Any

from termreader.lists import StatefulList

BOOK_OPTIONS = (
    "Continue reading",
    "Update chapter list",
    "Move to category",
    "Rename",
    "Reset Progress",
    "Remove book from library",
    "Open in browser",
)
CATEGORY_OPTIONS = (
    "Create categories",
    "Re-order categories",
    "Rename categories",
    "Delete categories",
)


class LibData:
    """The selected category and book, and the options offered for them."""

    def __init__(self, ctx: Any) -> None:
        first = ctx.library_categories()[0]
        books = ctx.library_books()[first]
        self.current_category_idx = 0
        self.selected_book_idx: int | None = 0 if books else None
        self.global_selected_book_opts: StatefulList[str] = StatefulList(BOOK_OPTIONS)
        self.category_options: StatefulList[str] = StatefulList(CATEGORY_OPTIONS)

    def select_next_category(self, ctx: Any) -> None:
        """Select the next category, wrapping around."""
        count = len(ctx.library_categories())
        self.current_category_idx = (self.current_category_idx + 1) % count
        self.selected_book_idx = None
        self.fix_book_selection_state(ctx)

    def select_previous_category(self, ctx: Any) -> None:
        """Select the previous category, wrapping around."""
        last = len(ctx.library_categories()) - 1
        if self.current_category_idx == 0:
            self.current_category_idx = last
        else:
            self.current_category_idx -= 1
        self.selected_book_idx = None
        self.fix_book_selection_state(ctx)

    def fix_book_selection_state(self, ctx: Any) -> None:
        """Select the first book if none is selected and the category has books."""
        if self.selected_book_idx is None and self.current_category_size(ctx) > 0:
            self.selected_book_idx = 0

    def reset_selection(self, ctx: Any) -> None:
        self.selected_book_idx = None
        self.fix_book_selection_state(ctx)

    def current_category_size(self, ctx: Any) -> int:
        """Return the number of books in the selected category."""
        name = ctx.library_categories()[self.current_category_idx]
        return len(ctx.library_books()[name])

    def selected_book(self, ctx: Any) -> Any:
        """Return the selected book, or None."""
        if self.selected_book_idx is None:
            return None
        categories = ctx.library_categories()
        if self.current_category_idx >= len(categories):
            return None
        books = ctx.library_books().get(categories[self.current_category_idx])
        if books is None:
            return None
        return books[self.selected_book_idx]

    def select_next_book(self, ctx: Any) -> None:
        """Select the next book; the first if none is selected."""
        size = self.current_category_size(ctx)
        if self.selected_book_idx is not None:
            self.selected_book_idx = (self.selected_book_idx + 1) % size
        elif size:
            self.selected_book_idx = 0

    def select_prev_book(self, ctx: Any) -> None:
        """Select the previous book; the last if none is selected."""
        size = self.current_category_size(ctx)
        if self.selected_book_idx is not None:
            if self.selected_book_idx == 0:
                self.selected_book_idx = size - 1
            else:
                self.selected_book_idx -= 1
        elif size:
            self.selected_book_idx = size - 1