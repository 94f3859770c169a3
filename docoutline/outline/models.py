"""Data models produced by the outline engine."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class HeadingLevel(str, Enum):
    """Hierarchy level attached to each heading candidate."""

    H1 = "H1"
    H2 = "H2"
    H3 = "H3"

    @classmethod
    def from_depth(cls, depth: int) -> "HeadingLevel":
        if depth <= 1:
            return cls.H1
        if depth == 2:
            return cls.H2
        return cls.H3


@dataclass(frozen=True, slots=True)
class HeadingCandidate:
    """A single line classified as a heading, in reading order."""

    level: HeadingLevel
    text: str
    page: int

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level.value, "text": self.text, "page": self.page}


@dataclass(frozen=True, slots=True)
class DocumentStructure:
    """Result returned by :func:`docoutline.outline.extract_outline`."""

    title: str
    outline: Tuple[HeadingCandidate, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "outline": [item.to_dict() for item in self.outline],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


__all__ = ["HeadingLevel", "HeadingCandidate", "DocumentStructure"]
