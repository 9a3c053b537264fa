"""Selectable lists and small display helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class StatefulList(Generic[T]):
    """A list of items together with an optional selected index."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.items: list[T] = list(items)
        self.selected_index: int | None = 0 if self.items else None

    @classmethod
    def with_item(cls, item: T) -> StatefulList[T]:
        """Create a list holding a single, selected item."""
        return cls([item])

    def select(self, index: int | None) -> None:
        """Select the item at ``index``, or nothing when ``index`` is None."""
        self.selected_index = index

    def unselect(self) -> None:
        self.selected_index = None

    def selected(self) -> T | None:
        """Return the selected item, or None if nothing is selected."""
        if self.selected_index is None:
            return None
        return self.items[self.selected_index]

    def insert(self, item: T) -> None:
        """Append an item, selecting the first one if nothing was selected."""
        self.items.append(item)
        if self.selected_index is None:
            self.selected_index = 0

    def next(self) -> None:
        """Select the next item, wrapping around at the end."""
        if not self.items:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + 1) % len(self.items)

    def previous(self) -> None:
        """Select the previous item, wrapping around at the start."""
        if not self.items:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        elif self.selected_index == 0:
            self.selected_index = len(self.items) - 1
        else:
            self.selected_index -= 1

    def select_first(self) -> None:
        """Select the first item, or nothing if the list is empty."""
        self.selected_index = 0 if self.items else None

    def push(self, item: T) -> None:
        """Append an item without touching the selection."""
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatefulList):
            return NotImplemented
        return self.items == other.items and self.selected_index == other.selected_index

    def __repr__(self) -> str:
        return f"StatefulList(items={self.items!r}, selected_index={self.selected_index!r})"


def to_datetime(timestamp_secs: int) -> str:
    """Format a UNIX timestamp (UTC) as ``dd/mm/yy, HH:MM``."""
    moment = datetime.fromtimestamp(timestamp_secs, tz=timezone.utc)
    return moment.strftime("%d/%m/%y, %H:%M")