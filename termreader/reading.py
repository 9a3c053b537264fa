"""Starting background requests for chapters, book details and searches.

Besides what ``termreader.navigation`` expects, the context provides:

- ``book_source(book_id)``, the source a stored book comes from, or None;
- ``source_by_id(source_id)``, a source, or None;
- ``add_to_lib(book_id, category)``, raising ValueError if the book cannot be added.

A book from a source provides ``id``, ``url``, ``chapter_url(number)``,
``total_chapter_count()``, ``current_chapter()``, ``next_ordered_chapter()``
(None when there is nothing left to read), ``is_local()``, ``rename(name)``
and ``original_name()``.

A source provides ``parse_chapter(novel_url, chapter_url)``,
``parse_novel_and_chapters(url)``, ``search_novels(term)`` and
``popular(order, page)``.

A history entry provides ``chapter``, ``book`` and ``book_id``.

Functions that start a request return the thread doing the work; its result
arrives on ``app_state.channel``.
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Any

from termreader.app_state import AppState
from termreader.channels import BookInfo, BookInfoDetails, ChapterLoaded, SearchResults
from termreader.navigation import BookError, EntryError, SourceError

POPULAR_ORDER = "rating"
POPULAR_PAGE = 1


def _book_source(ctx: Any, book_id: Any) -> Any:
    source = ctx.book_source(book_id)
    if source is None:
        raise SourceError(SourceError.NON_EXISTENT)
    return source


def _source(ctx: Any, source_id: Any) -> Any:
    source = ctx.source_by_id(source_id)
    if source is None:
        raise SourceError(SourceError.NON_EXISTENT)
    return source


def _require_global(book: Any) -> None:
    if book.is_local():
        raise ValueError("only books from a source can be fetched")


def _fetch_chapter(app_state: AppState, source: Any, book: Any, chapter: int) -> threading.Thread:
    novel_url = book.url
    chapter_url = book.chapter_url(chapter)
    return app_state.channel.submit(
        lambda: source.parse_chapter(novel_url, chapter_url),
        partial(ChapterLoaded, book_id=book.id, chapter_no=chapter),
    )


def continue_reading_global_select(app_state: AppState, ctx: Any) -> threading.Thread:
    """Fetch the next chapter to read of the book selected in the library."""
    book = app_state.lib_data.selected_book(ctx)
    if book is None:
        raise EntryError(EntryError.UNSELECTED_LIB_BOOK)
    chapter = book.next_ordered_chapter()
    if chapter is None:
        raise EntryError(EntryError.NO_CHAPTERS)
    source = _book_source(ctx, book.id)
    return _fetch_chapter(app_state, source, book, chapter)


def search_book_details(
    app_state: AppState,
    ctx: Any,
    source_id: Any,
    novel: Any,
    view_type: BookInfoDetails,
) -> threading.Thread:
    """Fetch a novel's details and chapter list from a source."""
    source = _source(ctx, source_id)
    url = novel.url
    return app_state.channel.submit(
        lambda: source.parse_novel_and_chapters(url),
        partial(BookInfo, details=view_type),
    )


def start_book_from_beginning(app_state: AppState, ctx: Any, book: Any) -> threading.Thread:
    """Fetch the first chapter of ``book``."""
    _require_global(book)
    if book.total_chapter_count() == 0:
        raise BookError(BookError.NO_CHAPTERS)
    source = _book_source(ctx, book.id)
    return _fetch_chapter(app_state, source, book, 1)


def start_book_from_ch(app_state: AppState, ctx: Any, book: Any, chapter: int) -> threading.Thread:
    """Fetch chapter ``chapter`` of a stored book."""
    _require_global(book)
    if book.total_chapter_count() < chapter:
        raise BookError(BookError.NO_CHAPTERS)
    source = _book_source(ctx, book.id)
    if ctx.book(book.id) is None:
        raise BookError(BookError.NON_EXISTENT)
    return _fetch_chapter(app_state, source, book, chapter)


def continue_book_history(app_state: AppState, ctx: Any, entry: Any) -> threading.Thread:
    """Fetch the chapter a history entry was left at."""
    source = _book_source(ctx, entry.book_id)
    book = entry.book
    novel_url = book.url
    chapter_url = book.chapter_url(entry.chapter)
    return app_state.channel.submit(
        lambda: source.parse_chapter(novel_url, chapter_url),
        partial(ChapterLoaded, book_id=entry.book_id, chapter_no=entry.chapter),
    )


def _open_book(app_state: AppState, ctx: Any) -> Any:
    app_state.update_from_reader(ctx)
    book = app_state.reader_data.book
    if book is None:
        raise BookError(BookError.NON_EXISTENT)
    return book


def goto_next_ch(app_state: AppState, ctx: Any) -> threading.Thread:
    """Save progress and fetch the chapter after the one being read."""
    book = _open_book(app_state, ctx)
    chapter = book.current_chapter() + 1
    if chapter > book.total_chapter_count():
        raise BookError(BookError.UNAVAILABLE_CHAPTER)
    source = _book_source(ctx, book.id)
    return _fetch_chapter(app_state, source, book, chapter)


def goto_prev_ch(app_state: AppState, ctx: Any) -> threading.Thread:
    """Save progress and fetch the chapter before the one being read."""
    book = _open_book(app_state, ctx)
    current = book.current_chapter()
    if current == 1:
        raise BookError(BookError.UNAVAILABLE_CHAPTER)
    source = _book_source(ctx, book.id)
    return _fetch_chapter(app_state, source, book, current - 1)


def remove_history_entry(app_state: AppState, ctx: Any, book_id: Any) -> None:
    """Remove a book from the history and select the entry before it."""
    ctx.remove_history_entry(book_id)
    history = app_state.history_data
    selected = history.selected_entry
    if selected is None:
        return
    if selected == 0:
        history.selected_entry = 0 if ctx.history_entry_count() else None
    else:
        history.selected_entry = selected - 1


def search_source(
    app_state: AppState, ctx: Any, source_id: Any, search_term: str | None
) -> threading.Thread:
    """Search a source for ``search_term``, or list its popular books if None."""
    source = _source(ctx, source_id)
    if search_term is not None:
        work = partial(source.search_novels, search_term)
    else:
        work = partial(source.popular, POPULAR_ORDER, POPULAR_PAGE)
    return app_state.channel.submit(work, SearchResults)


def rename_book(book: Any, new_name: str | None) -> str:
    """Rename ``book``, restoring its original name if no name is given."""
    if new_name is None:
        _require_global(book)
        new_name = book.original_name()
    book.rename(new_name)
    return new_name


def add_book_to_lib(app_state: AppState, ctx: Any, book: Any) -> None:
    """Add ``book`` to the default category, selecting it if nothing was selected."""
    try:
        ctx.add_to_lib(book.id, None)
    except ValueError:
        pass
    app_state.lib_data.fix_book_selection_state(ctx)