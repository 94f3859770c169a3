"""Pydantic models for the outline HTTP API."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .outline.models import DocumentStructure

ProfileName = Literal["batch", "interactive"]


class OutlineItem(BaseModel):
    """Single heading as serialised on the wire."""

    level: Literal["H1", "H2", "H3"]
    text: str
    page: int = Field(ge=1)


class OutlineData(BaseModel):
    """Title plus ordered outline, mirroring the batch JSON artifact."""

    title: str
    outline: List[OutlineItem] = Field(default_factory=list)

    @classmethod
    def from_structure(cls, structure: DocumentStructure) -> "OutlineData":
        return cls.model_validate(structure.to_dict())


class OutlineResponse(BaseModel):
    """Stable response envelope returned by the API."""

    ok: bool
    data: Optional[OutlineData] = None
    error: Optional[str] = None


class OutlineTextRequest(BaseModel):
    """Run the engine on text that was already extracted by the caller."""

    name: str
    text: str = ""
    profile: Optional[ProfileName] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("name must be provided")
        return value


__all__ = [
    "OutlineData",
    "OutlineItem",
    "OutlineResponse",
    "OutlineTextRequest",
    "ProfileName",
]
