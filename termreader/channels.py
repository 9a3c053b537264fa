"""Background requests and the queue their results come back through."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable


class BookInfoDetails(Enum):
    """How a fetched book should be shown once it arrives."""

    SOURCE_NO_OPTIONS = auto()
    SOURCE_WITH_OPTIONS = auto()
    HISTORY_WITH_OPTIONS = auto()


def _unwrap(value: Any, error: BaseException | None) -> Any:
    if error is not None:
        raise error
    return value


@dataclass(frozen=True, kw_only=True)
class _Outcome:
    value: Any = None
    error: BaseException | None = None


@dataclass(frozen=True, kw_only=True)
class SearchResults(_Outcome):
    """The novels found by a search or a popular listing."""

    def unwrap(self) -> Any:
        """Return the novels found, or raise the error the search failed with."""
        return _unwrap(self.value, self.error)


@dataclass(frozen=True, kw_only=True)
class BookInfo(_Outcome):
    """A novel's details, with how they are to be displayed."""

    details: BookInfoDetails

    def unwrap(self) -> Any:
        """Return the novel, or raise the error the request failed with."""
        return _unwrap(self.value, self.error)


@dataclass(frozen=True, kw_only=True)
class ChapterLoaded(_Outcome):
    """A chapter's text for a book, with its chapter number."""

    book_id: Any
    chapter_no: int

    def unwrap(self) -> Any:
        """Return the chapter, or raise the error the request failed with."""
        return _unwrap(self.value, self.error)


RequestData = SearchResults | BookInfo | ChapterLoaded


class ChannelData:
    """A queue of finished requests plus a flag for one in flight."""

    def __init__(self) -> None:
        self._queue: queue.Queue[RequestData] = queue.Queue()
        self.loading = False

    def submit(
        self, work: Callable[[], Any], wrap: Callable[..., RequestData]
    ) -> threading.Thread:
        """Run ``work`` on a thread and queue ``wrap(value=...)`` or ``wrap(error=...)``."""
        self.loading = True

        def run() -> None:
            try:
                result = work()
            except Exception as exc:  # the failure travels to the receiver
                self.send(wrap(error=exc))
            else:
                self.send(wrap(value=result))

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread

    def send(self, data: RequestData) -> None:
        self._queue.put(data)

    def receive(self, timeout: float | None = None) -> RequestData | None:
        """Wait for the next result; None if ``timeout`` runs out first."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None