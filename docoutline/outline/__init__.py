"""Heading outline engine: page tracking, rule classification, fallback, assembly."""

from .assemble import assemble_outline, derive_title, extract_outline
from .classify import HEADING_RULES, classify_line, classify_lines
from .fallback import segment_paragraphs
from .models import DocumentStructure, HeadingCandidate, HeadingLevel
from .pages import PageState, track_pages
from .profiles import BATCH_PROFILE, INTERACTIVE_PROFILE, PROFILES, Profile, get_profile

__all__ = [
    "BATCH_PROFILE",
    "DocumentStructure",
    "HEADING_RULES",
    "HeadingCandidate",
    "HeadingLevel",
    "INTERACTIVE_PROFILE",
    "PROFILES",
    "PageState",
    "Profile",
    "assemble_outline",
    "classify_line",
    "classify_lines",
    "derive_title",
    "extract_outline",
    "get_profile",
    "segment_paragraphs",
    "track_pages",
]
