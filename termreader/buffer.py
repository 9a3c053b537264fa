"""Temporary data shared between the screens of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Any

from termreader.lists import StatefulList


class BookViewOption(Enum):
    """Which set of options a book view shows."""

    NONE = auto()
    LIB_OPTIONS = auto()
    SOURCE_OPTIONS = auto()
    HISTORY_OPTIONS = auto()


@dataclass
class Buffer:
    """Short-lived values: typed text, search results, the book being viewed."""

    text: str = ""
    novel_search_res: StatefulList[Any] = field(default_factory=StatefulList)
    chapter_previews: StatefulList[Any] = field(default_factory=StatefulList)
    novel: Any = None
    novel_preview_scroll: int = 0
    book: Any = None
    temporary_list: StatefulList[str] = field(default_factory=StatefulList)
    book_view_option: BookViewOption = BookViewOption.NONE
    reorder_lock: bool = False

    def clear(self) -> None:
        """Reset every value to its initial state."""
        fresh = Buffer()
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))

    def clear_safe(self) -> None:
        """Reset only the values that never outlive a screen change."""
        self.reorder_lock = False