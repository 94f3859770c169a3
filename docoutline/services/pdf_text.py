"""PyMuPDF-backed text extraction feeding the outline engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import fitz  # PyMuPDF

from ..outline.pages import FORM_FEED

LOGGER = logging.getLogger(__name__)


class ExtractionError(RuntimeError):
    """Raised when a document's bytes cannot be turned into text."""

    def __init__(self, reason: str, *, source: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.reason}: {self.source}"
        return self.reason


def join_pages(pages: Iterable[str]) -> str:
    """Join page texts, prefixing every page with a form feed.

    The form feed is glued to the first line of the page rather than given a
    line of its own, so it never reads as a blank line. The first page carries
    one as well, so the page tracker reports page ``n`` for the n-th page.
    """

    return "".join(f"{FORM_FEED}{text}" for text in pages)


def _open(source: Path | bytes, label: str) -> fitz.Document:
    try:
        if isinstance(source, (bytes, bytearray)):
            return fitz.open(stream=bytes(source), filetype="pdf")
        return fitz.open(str(source))
    except (RuntimeError, ValueError, OSError) as exc:
        raise ExtractionError("unreadable", source=label) from exc


def extract_pdf_text(source: Path | str | bytes, *, name: str | None = None) -> str:
    """Return the text of every page in *source* as a single string."""

    if isinstance(source, (bytes, bytearray)):
        label = name or "<upload>"
        if not source:
            raise ExtractionError("unreadable", source=label)
    else:
        source = Path(source)
        label = name or str(source)
        if not source.is_file():
            raise ExtractionError("not_found", source=label)

    doc = _open(source, label)
    with doc:
        if doc.needs_pass:
            raise ExtractionError("encrypted", source=label)
        if doc.page_count == 0:
            raise ExtractionError("unreadable", source=label)
        try:
            pages = [page.get_text("text") for page in doc]
        except (RuntimeError, ValueError) as exc:
            raise ExtractionError("unreadable", source=label) from exc
    LOGGER.debug("[pdf] Extracted %d pages from %s", len(pages), label)
    return join_pages(pages)


__all__ = ["ExtractionError", "extract_pdf_text", "join_pages"]
