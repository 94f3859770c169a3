"""Pattern rules that turn trimmed lines into heading candidates."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, Tuple

from .models import HeadingCandidate, HeadingLevel
from .pages import track_pages

_MIN_EXCLUSIVE_LENGTH = 3
_MAX_EXCLUSIVE_LENGTH = 100

# Digits are ASCII only; other scripts never form numbered headings.
_NUMBERED_RE = re.compile(r"^(?P<number>\d+\.(?:\d+\.)*\d*)\s+(?P<title>\S.*)$", re.ASCII)
_DIGIT_GROUP_RE = re.compile(r"\d+", re.ASCII)
_ALL_CAPS_RE = re.compile(r"[A-Z\s]+")
_DIGIT_RE = re.compile(r"\d", re.ASCII)
_CHAPTER_RE = re.compile(r"^(?:chapter|section|part)\s+\d+", re.IGNORECASE | re.ASCII)
_TITLE_CASE_RE = re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]*)*$")

RuleResult = Optional[Tuple[HeadingLevel, str]]
Rule = Callable[[str, Optional[str]], RuleResult]


def _numbered(line: str, next_line: Optional[str]) -> RuleResult:
    match = _NUMBERED_RE.match(line)
    if not match:
        return None
    depth = len(_DIGIT_GROUP_RE.findall(match.group("number")))
    return HeadingLevel.from_depth(depth), match.group("title").strip()


def _all_caps(line: str, next_line: Optional[str]) -> RuleResult:
    if line.upper() != line or len(line) <= 5 or _DIGIT_RE.search(line):
        return None
    if not _ALL_CAPS_RE.fullmatch(line):
        return None
    return HeadingLevel.H1, line


def _chapter(line: str, next_line: Optional[str]) -> RuleResult:
    if not _CHAPTER_RE.match(line):
        return None
    return HeadingLevel.H1, line


def _title_case(line: str, next_line: Optional[str]) -> RuleResult:
    if len(line) <= 10 or not _TITLE_CASE_RE.match(line):
        return None
    # Only a line standing alone before a blank line (or end of text) counts.
    if next_line is not None and next_line.strip():
        return None
    return HeadingLevel.H2, line


# First match wins; a numbered line that is also upper case stays numbered.
HEADING_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("numbered", _numbered),
    ("all_caps", _all_caps),
    ("chapter", _chapter),
    ("title_case", _title_case),
)


def is_eligible(line: str) -> bool:
    return _MIN_EXCLUSIVE_LENGTH < len(line) < _MAX_EXCLUSIVE_LENGTH


def classify_line(
    line: str, next_line: Optional[str] = None
) -> Optional[Tuple[str, HeadingLevel, str]]:
    """Return ``(rule_name, level, text)`` for the first rule matching *line*."""

    stripped = line.strip()
    if not is_eligible(stripped):
        return None
    for name, rule in HEADING_RULES:
        result = rule(stripped, next_line)
        if result is not None:
            level, text = result
            return name, level, text
    return None


def classify_lines(lines: Sequence[str]) -> List[HeadingCandidate]:
    """Return heading candidates for *lines* in document order."""

    candidates: List[HeadingCandidate] = []
    total = len(lines)
    for index, raw_line, page in track_pages(lines):
        next_line = lines[index + 1] if index + 1 < total else None
        match = classify_line(raw_line, next_line)
        if match is None:
            continue
        _, level, text = match
        candidates.append(HeadingCandidate(level=level, text=text, page=page))
    return candidates


__all__ = ["HEADING_RULES", "classify_line", "classify_lines", "is_eligible"]
