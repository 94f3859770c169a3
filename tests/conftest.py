"""Test configuration for docoutline."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Generator, Sequence

import fitz  # PyMuPDF
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docoutline.config import reset_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Provide isolated configuration for each test."""

    monkeypatch.setenv("INPUT_DIR", str(tmp_path / "input"))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    for name in ("OUTLINE_PROFILE", "API_PROFILE", "MAX_UPLOAD_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Return a test client for the FastAPI application."""

    from docoutline.app import app

    with TestClient(app) as test_client:
        yield test_client


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    """Return PDF bytes with one page per entry, one text line per string."""

    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        y = 72
        for line in lines:
            page.insert_text((72, y), line, fontsize=12, fontname="helv")
            y += 20
    try:
        return doc.tobytes()
    finally:
        doc.close()


@pytest.fixture
def pdf_bytes() -> Callable[[Sequence[Sequence[str]]], bytes]:
    return build_pdf


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, pages: Sequence[Sequence[str]], directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(build_pdf(pages))
        return path

    return _make
