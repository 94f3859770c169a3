from __future__ import annotations

from docoutline.outline.pages import PageState, is_page_break, split_lines, track_pages


def _pages(text: str) -> list[int]:
    return [page for _, _, page in track_pages(split_lines(text))]


def test_pageless_text_stays_on_first_page() -> None:
    assert set(_pages("Intro\nbody\n\nmore body\nend")) == {1}


def test_digit_footer_after_blank_line_advances_counter() -> None:
    text = "Intro\n\n1\nBody\n\n2\nMore"
    # The first footer lifts the counter to 1, which is still page 1.
    assert _pages(text) == [1, 1, 1, 1, 1, 2, 2]


def test_form_feed_marks_a_page_boundary() -> None:
    assert _pages("\fA\n\fB\n\fC") == [1, 2, 3]


def test_split_lines_keeps_form_feeds() -> None:
    assert split_lines("a\fb\nc") == ["a\fb", "c"]
    assert split_lines("") == []
    assert split_lines(None) == []


def test_digit_line_requires_blank_predecessor() -> None:
    assert not is_page_break(None, "5")
    assert not is_page_break("body text", "5")
    assert is_page_break("   ", " 5 ")
    assert not is_page_break("", "1" * 50)
    assert not is_page_break("", "5a")


def test_page_state_is_a_fresh_value_per_step() -> None:
    start = PageState()
    advanced = start.advance("", "3")
    assert start == PageState(page_count=0, current_page=1)
    assert advanced == PageState(page_count=1, current_page=1)
    assert advanced.advance("", "4").current_page == 2


def test_non_ascii_digit_lines_are_not_footers() -> None:
    assert not is_page_break("", "٣")
    assert not is_page_break("", "१२")
    assert is_page_break("", "3")


def test_form_feed_glued_to_page_number_counts_once() -> None:
    # "\f1" opens page one; the footer rule must not fire a second time.
    assert _pages("\f1\nINTRODUCTION\n\f2\nMETHODS USED\n") == [1, 1, 2, 2, 2]
