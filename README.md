# termreader

The state and navigation layer of a terminal novel reader. It holds the
application state behind the screens (library, sources, history, updates and
the reader itself), moves between screens, runs blocking requests in
background threads, and lays chapter text out into lines for a terminal of a
given width and height.

## Installation

```
pip install termreader
```

For running the tests:

```
pip install "termreader[test]"
pytest
```

## What is inside

- `termreader.lists`: `StatefulList`, a list with an optional selected index
  that wraps around on `next()` and `previous()`; `to_datetime()` formats a
  UNIX timestamp as `dd/mm/yy, HH:MM` in UTC.
- `termreader.reader`: `GlobalReader.from_text()` splits chapter text into
  words and newlines; `ReaderContents.display_lines()` produces the lines shown
  on screen; `GlobalReader.scroll_down()` and `scroll_up()` move one line at a
  time; `progress()` returns a `ChapterProgress`.
- `termreader.config`: `ConfigData`, the colour styles of the interface
  (`Style`, `Color`), saved to and loaded from `config.json` in a directory.
  A file that cannot be parsed raises `ConfigError`; a missing file gives the
  defaults.
- `termreader.channels`: `ChannelData.submit()` runs a function on a thread and
  queues its result (or the exception it raised) as a `SearchResults`,
  `BookInfo` or `ChapterLoaded`; `receive()` takes the next one, and
  `unwrap()` returns the value or re-raises the error.
- `termreader.buffer`, `termreader.history`, `termreader.library`,
  `termreader.source_state`, `termreader.updates`, `termreader.reader_data`:
  the per-tab selection state and the temporary buffer.
- `termreader.app_state`: `AppState` and `Screen`, the whole interface state,
  with screen history for going back.
- `termreader.navigation`: the steps taken before entering a screen, such as
  opening a book view and creating, deleting, renaming or reordering library
  categories. Failures raise `EntryError`, `BookError` or `SourceError`.
- `termreader.reading`: starting background requests for chapters, book
  details and searches, moving between chapters, and history and library
  updates.
- `termreader.paths`: `get_data_dir()` finds where data and logs are kept
  (overridable with the `TERMREADER_TERM_DATA` environment variable), and
  `initialize_logging()` writes a fresh log file there, at the level named by
  `TERMREADER_TERM_LOGLEVEL` (debug by default).

## The context object

Most state classes and navigation functions take a `ctx` argument: the store
of books, categories, history, updates and sources. This package does not
provide one. It is duck-typed, and the module docstrings of
`termreader.history`, `termreader.library`, `termreader.source_state`,
`termreader.updates`, `termreader.app_state`, `termreader.navigation` and
`termreader.reading` list the methods each expects.

## What this package does not do

- It draws nothing on the terminal and reads no keys: there is no screen
  rendering, no input handling and no main loop.
- It has no command to run.
- It stores no books and fetches nothing from the web itself; book storage
  and sources come from the context object supplied by the caller.

## Example

```python
from termreader.reader import GlobalReader

reader = GlobalReader.from_text("The first line of the chapter.\nThe second line.")
lines = reader.contents.display_lines(reader.state, 20, 5)
for line in lines:
    print(line)

reader.scroll_down(20, 5)
print(reader.progress())
```

```python
from termreader.lists import StatefulList

tabs = StatefulList(["Library", "Updates", "Sources", "History", "Settings"])
tabs.next()
print(tabs.selected())  # Updates
```