"""Best-effort page numbering for a single left-to-right line scan."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

FORM_FEED = "\f"
_PAGE_NUMBER_RE = re.compile(r"^\d+$", re.ASCII)
_FOOTER_MAX_LENGTH = 50


def split_lines(text: str | None) -> List[str]:
    """Split *text* on newlines only.

    ``str.splitlines`` also breaks on form feeds, which would hide the page
    markers from :meth:`PageState.advance`.
    """

    if not text:
        return []
    return text.split("\n")


def is_page_break(previous: str | None, line: str) -> bool:
    """Return ``True`` when *line* looks like the start of a new page."""

    if FORM_FEED in line:
        return True
    if previous is None or previous.strip():
        return False
    stripped = line.strip()
    return len(stripped) < _FOOTER_MAX_LENGTH and bool(_PAGE_NUMBER_RE.match(stripped))


@dataclass(frozen=True, slots=True)
class PageState:
    """Page counter owned by exactly one document scan."""

    page_count: int = 0
    current_page: int = 1

    def advance(self, previous: str | None, line: str) -> "PageState":
        count = self.page_count + 1 if is_page_break(previous, line) else self.page_count
        return PageState(page_count=count, current_page=max(1, count))


def track_pages(lines: Sequence[str]) -> Iterator[Tuple[int, str, int]]:
    """Yield ``(index, raw_line, current_page)`` for every line in *lines*."""

    state = PageState()
    previous: str | None = None
    for index, line in enumerate(lines):
        state = state.advance(previous, line)
        yield index, line, state.current_page
        previous = line


__all__ = ["FORM_FEED", "PageState", "is_page_break", "split_lines", "track_pages"]
