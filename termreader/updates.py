"""Selection state for the updates tab.

The context passed in provides ``updates_entry_count()``.
"""

from __future__ import annotations

from typing import Any


class UpdatesData:
    """The selected entry in the list of updates."""

    def __init__(self, ctx: Any) -> None:
        self.selected_entry: int | None = 0 if ctx.updates_entry_count() else None

    def select_next_entry(self, ctx: Any) -> None:
        count = ctx.updates_entry_count()
        if count == 0:
            self.selected_entry = None
        elif self.selected_entry is None:
            self.selected_entry = 0
        else:
            self.selected_entry = (self.selected_entry + 1) % count

    def select_prev_entry(self, ctx: Any) -> None:
        count = ctx.updates_entry_count()
        if self.selected_entry is None or self.selected_entry == 0:
            if count != 0:
                self.selected_entry = count - 1
        else:
            self.selected_entry -= 1