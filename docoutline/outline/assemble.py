"""Assemble the final document structure from classified candidates."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from .classify import classify_lines
from .fallback import segment_paragraphs
from .models import DocumentStructure, HeadingCandidate
from .pages import split_lines
from .profiles import BATCH_PROFILE, Profile, get_profile

LOGGER = logging.getLogger(__name__)

UNTITLED = "Untitled"
_PDF_SUFFIX = ".pdf"
_SEPARATOR_RE = re.compile(r"[_-]")


def derive_title(identifier: str | None) -> str:
    """Return a display title for the document named *identifier*.

    ``"Annual-Report_2024.pdf"`` becomes ``"Annual Report 2024"``. When the
    cleaned name is empty the raw identifier is returned instead, and
    ``"Untitled"`` when even that is blank.
    """

    raw = str(identifier or "")
    name = raw[: -len(_PDF_SUFFIX)] if raw.endswith(_PDF_SUFFIX) else raw
    title = _SEPARATOR_RE.sub(" ", name).strip()
    if title:
        return title
    return raw.strip() or UNTITLED


def assemble_outline(
    title: str, candidates: Sequence[HeadingCandidate], profile: Profile
) -> DocumentStructure:
    """Cap *candidates* to the profile limit, keeping reading order."""

    if len(candidates) > profile.outline_cap:
        LOGGER.debug(
            "[outline] Truncating %d candidates to %d (%s profile)",
            len(candidates),
            profile.outline_cap,
            profile.name,
        )
    return DocumentStructure(title=title, outline=tuple(candidates[: profile.outline_cap]))


def extract_outline(
    identifier: str | None,
    text: str | None,
    profile: Profile | str = BATCH_PROFILE,
) -> DocumentStructure:
    """Return the title and heading outline for one document's extracted text."""

    active = get_profile(profile)
    candidates = classify_lines(split_lines(text))
    if not candidates:
        candidates = segment_paragraphs(text, active)
        LOGGER.debug(
            "[outline] No rule matched in %r; fallback produced %d headings",
            identifier,
            len(candidates),
        )
    return assemble_outline(derive_title(identifier), candidates, active)


__all__ = ["UNTITLED", "assemble_outline", "derive_title", "extract_outline"]
