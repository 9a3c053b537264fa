from dataclasses import dataclass, field

import pytest

from termreader.source_state import NOVEL_OPTIONS, SOURCE_OPTIONS, PreviewField, SourceData


@dataclass
class FakeContext:
    sources: list = field(default_factory=list)

    def source_info(self):
        return self.sources


CTX = FakeContext([("src-a", "Alpha"), ("src-b", "Beta"), ("src-c", "Gamma")])


def test_defaults():
    data = SourceData()
    assert data.selected_source_id(CTX) == "src-a"
    assert data.source_options.items == list(SOURCE_OPTIONS)
    assert data.novel_options.selected() == "Start from beginning"
    assert data.novel_preview_selected_field is PreviewField.CHAPTERS


def test_select_prev_wraps():
    data = SourceData()
    data.select_prev(CTX)
    assert data.selected_source_id(CTX) == "src-c"
    data.select_next(CTX)
    assert data.selected_source_id(CTX) == "src-a"


def test_select_next_cycles():
    data = SourceData()
    for _ in CTX.sources:
        data.select_next(CTX)
    assert data.selected_source_id(CTX) == "src-a"


def test_swap_and_reset_options():
    data = SourceData()
    data.swap_library_options()
    assert "Remove from library" in data.novel_options.items
    assert "Add to library" not in data.novel_options.items
    data.swap_library_options()
    assert data.novel_options.items == list(NOVEL_OPTIONS)
    data.swap_library_options()
    data.reset_novel_options()
    assert data.novel_options.items == list(NOVEL_OPTIONS)


@pytest.mark.parametrize("name", ["SUMMARY", "CHAPTERS", "OPTIONS"])
def test_opts_cycle_inverse(name):
    start = PreviewField[name]
    forward = PreviewField.next_opts(start)
    assert PreviewField.prev_opts(forward) is start
    twice = PreviewField.next_opts(forward)
    assert PreviewField.next_opts(twice) is start


def test_next_opts_order():
    assert PreviewField.SUMMARY.next_opts() is PreviewField.OPTIONS
    assert PreviewField.CHAPTERS.next_opts() is PreviewField.SUMMARY


def test_no_opts_toggles():
    assert PreviewField.SUMMARY.next_no_opts() is PreviewField.CHAPTERS
    assert PreviewField.CHAPTERS.prev_no_opts() is PreviewField.SUMMARY


def test_no_opts_rejects_options():
    with pytest.raises(ValueError):
        PreviewField.OPTIONS.next_no_opts()
    with pytest.raises(ValueError):
        PreviewField.OPTIONS.prev_no_opts()