"""Checks and preparation done before moving to another screen.

Besides what ``termreader.app_state`` expects, the context provides:

- ``book(book_id)`` and ``book_by_url(url)``, returning a stored book or None;
- ``move_book_category(book_id, category)``;
- ``create_library_category(name)``, ``delete_library_category(name)`` and
  ``rename_library_category(old, new)``, raising ValueError on failure;
- ``reorder_category_forwards(index)`` and ``reorder_category_backwards(index)``,
  returning the category's new position, or None if it cannot move.

A book provides ``id``, ``chapters``, ``full_url`` and ``in_library()``.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from termreader.app_state import AppState, Screen
from termreader.buffer import BookViewOption
from termreader.history import ADD_TO_LIBRARY, REMOVE_FROM_LIBRARY
from termreader.lists import StatefulList
from termreader.source_state import PreviewField


class EntryError(Exception):
    """A screen could not be entered."""

    UNSET_VALUE = "a required value was unset"
    UNSELECTED_LIB_BOOK = "a book should have been selected in the library but was not"
    NO_CHAPTERS = "the selected book has no chapters"
    UNSELECTED_CATEGORY = "a category should have been selected but was not"


class BookError(Exception):
    """A book, or one of its chapters, is not available."""

    NON_EXISTENT = "the book does not exist"
    NO_CHAPTERS = "the book has no available chapters"
    UNAVAILABLE_CHAPTER = "the requested chapter is unavailable"


class SourceError(Exception):
    """A source is not available."""

    NON_EXISTENT = "the source does not exist"


class BookViewType(Enum):
    """Where a book view was opened from."""

    SOURCE = auto()
    LIB = auto()
    HISTORY = auto()


def enter_typing(app_state: AppState) -> None:
    app_state.buffer.text = ""
    app_state.typing = True


def exit_typing(app_state: AppState) -> None:
    app_state.typing = False


def enter_book_view(app_state: AppState, ctx: Any, book: Any, view: BookViewType) -> None:
    """Show ``book`` with the options that fit where it was opened from."""
    buffer = app_state.buffer
    buffer.chapter_previews = StatefulList(book.chapters)
    buffer.novel = book
    app_state.source_data.novel_preview_selected_field = PreviewField.OPTIONS

    if view is BookViewType.SOURCE:
        buffer.book_view_option = BookViewOption.SOURCE_OPTIONS
        app_state.source_data.reset_novel_options()
        stored = ctx.book_by_url(book.full_url)
        if stored is not None and stored.in_library():
            app_state.source_data.swap_library_options()
        app_state.update_screen(Screen.SOURCES_BOOK_VIEW)
    elif view is BookViewType.LIB:
        buffer.book_view_option = BookViewOption.LIB_OPTIONS
        app_state.lib_data.global_selected_book_opts.select_first()
        app_state.update_screen(Screen.LIB_BOOK_VIEW)
    else:
        buffer.book_view_option = BookViewOption.HISTORY_OPTIONS
        history = app_state.history_data
        history.reset_options()
        stored = ctx.book(book.id)
        in_library = stored is not None and stored.in_library()
        history.global_book_options.push(REMOVE_FROM_LIBRARY if in_library else ADD_TO_LIBRARY)
        history.global_book_options.select_first()
        app_state.update_screen(Screen.HISTORY_BOOK_VIEW)


def _refresh_categories(app_state: AppState, ctx: Any) -> None:
    app_state.buffer.temporary_list = StatefulList(list(ctx.library_categories()))


def enter_category_select(app_state: AppState, ctx: Any) -> None:
    _refresh_categories(app_state, ctx)
    app_state.update_screen(Screen.LIB_CATEGORY_SELECT)


def enter_book_opts_categories(app_state: AppState, ctx: Any) -> None:
    _refresh_categories(app_state, ctx)
    app_state.update_screen(Screen.LIB_BOOK_VIEW_CATEGORY)


def enter_category_options(app_state: AppState) -> None:
    app_state.lib_data.category_options.select_first()
    app_state.update_screen(Screen.LIB_CATEGORY_OPTIONS)


def move_book_category(app_state: AppState, ctx: Any) -> None:
    """Move the selected library book to the category picked in the list."""
    book = app_state.lib_data.selected_book(ctx)
    if book is None:
        raise EntryError(EntryError.UNSELECTED_LIB_BOOK)
    category_idx = app_state.buffer.temporary_list.selected_index
    if category_idx is None:
        raise EntryError(EntryError.UNSELECTED_CATEGORY)

    ctx.move_book_category(book.id, ctx.library_categories()[category_idx])

    app_state.lib_data.reset_selection(ctx)
    app_state.lib_data.global_selected_book_opts.select_first()
    app_state.update_screen(Screen.LIB_MAIN)


def delete_category(app_state: AppState, ctx: Any, category_name: str) -> None:
    """Delete a category; errors from the context propagate."""
    ctx.delete_library_category(category_name)
    lib = app_state.lib_data
    # The selected category was the last one and is gone.
    if len(ctx.library_categories()) == lib.current_category_idx:
        lib.current_category_idx = max(0, lib.current_category_idx - 1)
    _refresh_categories(app_state, ctx)


def create_category(app_state: AppState, ctx: Any, category_name: str) -> None:
    """Create a category; errors from the context propagate."""
    ctx.create_library_category(category_name)
    _refresh_categories(app_state, ctx)


def _selected_category_idx(app_state: AppState) -> int:
    idx = app_state.buffer.temporary_list.selected_index
    if idx is None:
        raise EntryError(EntryError.UNSELECTED_CATEGORY)
    return idx


def _move_category(app_state: AppState, ctx: Any, new_pos: int | None) -> None:
    if new_pos is None:
        return
    _refresh_categories(app_state, ctx)
    app_state.buffer.temporary_list.select(new_pos)


def move_category_up(app_state: AppState, ctx: Any) -> None:
    """Move the selected category one place towards the front."""
    idx = _selected_category_idx(app_state)
    _move_category(app_state, ctx, ctx.reorder_category_forwards(idx))


def move_category_down(app_state: AppState, ctx: Any) -> None:
    """Move the selected category one place towards the back."""
    idx = _selected_category_idx(app_state)
    _move_category(app_state, ctx, ctx.reorder_category_backwards(idx))


def rename_category(app_state: AppState, ctx: Any, new_name: str) -> None:
    """Rename the selected category; a rejected name leaves it unchanged."""
    old_name = app_state.buffer.temporary_list.selected()
    if old_name is None:
        raise EntryError(EntryError.UNSELECTED_CATEGORY)
    try:
        ctx.rename_library_category(old_name, new_name)
    except ValueError:
        pass
    _refresh_categories(app_state, ctx)