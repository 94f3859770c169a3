"""Paragraph-based pseudo headings used when no rule matches."""

from __future__ import annotations

import re
from typing import List, Optional

from .models import HeadingCandidate, HeadingLevel
from .profiles import Profile

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def split_paragraphs(text: str | None, min_length: int) -> List[str]:
    """Return paragraphs of *text* whose trimmed length exceeds *min_length*."""

    if not text:
        return []
    return [
        paragraph
        for paragraph in _PARAGRAPH_SPLIT_RE.split(text)
        if len(paragraph.strip()) > min_length
    ]


def _heading_text(first_line: str, profile: Profile) -> Optional[str]:
    if not 0 < len(first_line) < profile.fallback_first_line_max:
        return None
    if profile.fallback_reject_length is not None and len(first_line) >= profile.fallback_reject_length:
        return None
    if profile.fallback_reject_trailing_period and first_line.endswith("."):
        return None
    limit = profile.fallback_truncate_length
    if limit is not None and len(first_line) > limit:
        return first_line[:limit] + profile.fallback_ellipsis
    return first_line


def _level(index: int, profile: Profile) -> HeadingLevel:
    if profile.fallback_h1_positions is None or index < profile.fallback_h1_positions:
        return HeadingLevel.H1
    return HeadingLevel.H2


def segment_paragraphs(text: str | None, profile: Profile) -> List[HeadingCandidate]:
    """Derive pseudo headings from paragraph first lines.

    Pages are estimated from the paragraph position alone; the line based
    page tracker is never consulted here.
    """

    paragraphs = split_paragraphs(text, profile.fallback_min_paragraph_length)
    candidates: List[HeadingCandidate] = []
    for index, paragraph in enumerate(paragraphs[: profile.fallback_paragraph_count]):
        first_line = paragraph.split("\n", 1)[0].strip()
        heading = _heading_text(first_line, profile)
        if heading is None:
            continue
        candidates.append(
            HeadingCandidate(
                level=_level(index, profile),
                text=heading,
                page=index // profile.fallback_paragraphs_per_page + 1,
            )
        )
    return candidates


__all__ = ["segment_paragraphs", "split_paragraphs"]
