"""FastAPI router exposing interactive outline extraction."""

from __future__ import annotations

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from ..config import Settings, get_settings
from ..outline import extract_outline, get_profile
from ..schemas import OutlineData, OutlineResponse, OutlineTextRequest, ProfileName
from ..services.pdf_text import ExtractionError, extract_pdf_text
from ..utils.logging import configure_logging

LOGGER = configure_logging().getChild("api")

router = APIRouter(prefix="/api", tags=["outline"])


def _is_pdf(upload: UploadFile) -> bool:
    if upload.content_type == "application/pdf":
        return True
    return (upload.filename or "").lower().endswith(".pdf")


@router.get("/health")
def health() -> dict:
    return {"ok": True}


@router.post("/outline", response_model=OutlineResponse)
async def outline_upload(
    file: UploadFile = File(...),
    profile: Optional[ProfileName] = Query(None),
    settings: Settings = Depends(get_settings),
) -> OutlineResponse:
    """Extract the outline of an uploaded PDF."""

    if not _is_pdf(file):
        raise HTTPException(status_code=415, detail="not_pdf")
    payload = await file.read(settings.max_upload_size + 1)
    if len(payload) > settings.max_upload_size:
        raise HTTPException(status_code=413, detail="too_large")

    name = file.filename or "document.pdf"
    try:
        text = await asyncio.to_thread(extract_pdf_text, payload, name=name)
    except ExtractionError as exc:
        LOGGER.warning("[api] Extraction failed for %s: %s", name, exc)
        raise HTTPException(status_code=422, detail=exc.reason) from exc

    structure = extract_outline(name, text, get_profile(profile or settings.api_profile))
    LOGGER.info("[api] Extracted %d headings from %s", len(structure.outline), name)
    return OutlineResponse(ok=True, data=OutlineData.from_structure(structure))


@router.post("/outline/text", response_model=OutlineResponse)
def outline_text(
    payload: OutlineTextRequest,
    settings: Settings = Depends(get_settings),
) -> OutlineResponse:
    """Run the engine on caller-supplied text."""

    structure = extract_outline(
        payload.name, payload.text, get_profile(payload.profile or settings.api_profile)
    )
    return OutlineResponse(ok=True, data=OutlineData.from_structure(structure))


__all__ = ["router"]
