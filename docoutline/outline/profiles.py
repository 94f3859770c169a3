"""Threshold profiles shared by the batch driver and the upload API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class Profile:
    """Numeric thresholds governing fallback segmentation and capping.

    Both profiles run the same classification rules; only the limits below
    differ. ``fallback_reject_length`` and ``fallback_truncate_length`` are
    mutually exclusive ways of handling long paragraph first lines: the batch
    profile drops them, the interactive profile shortens them.
    """

    name: str
    outline_cap: int
    fallback_min_paragraph_length: int
    fallback_paragraph_count: int
    fallback_first_line_max: int = 80
    fallback_reject_length: Optional[int] = None
    fallback_reject_trailing_period: bool = False
    fallback_truncate_length: Optional[int] = None
    fallback_ellipsis: str = "..."
    # ``None`` means every fallback heading is H1.
    fallback_h1_positions: Optional[int] = None
    fallback_paragraphs_per_page: int = 1


BATCH_PROFILE = Profile(
    name="batch",
    outline_cap=50,
    fallback_min_paragraph_length=20,
    fallback_paragraph_count=10,
    fallback_reject_length=60,
    fallback_reject_trailing_period=True,
    fallback_h1_positions=3,
    fallback_paragraphs_per_page=3,
)

INTERACTIVE_PROFILE = Profile(
    name="interactive",
    outline_cap=20,
    fallback_min_paragraph_length=50,
    fallback_paragraph_count=5,
    fallback_truncate_length=50,
)

PROFILES: Dict[str, Profile] = {
    BATCH_PROFILE.name: BATCH_PROFILE,
    INTERACTIVE_PROFILE.name: INTERACTIVE_PROFILE,
}


def get_profile(name: str | Profile) -> Profile:
    """Return the profile registered under *name*."""

    if isinstance(name, Profile):
        return name
    key = str(name or "").strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        raise ValueError("unknown_profile") from None


__all__ = ["Profile", "BATCH_PROFILE", "INTERACTIVE_PROFILE", "PROFILES", "get_profile"]
