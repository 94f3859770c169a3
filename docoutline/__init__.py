"""Heading outline extraction for text decoded from PDF documents."""

from .outline import (
    BATCH_PROFILE,
    INTERACTIVE_PROFILE,
    DocumentStructure,
    HeadingCandidate,
    HeadingLevel,
    extract_outline,
)

__all__ = [
    "BATCH_PROFILE",
    "INTERACTIVE_PROFILE",
    "DocumentStructure",
    "HeadingCandidate",
    "HeadingLevel",
    "extract_outline",
]
