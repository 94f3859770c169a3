"""FastAPI application for interactive outline extraction."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers.outline import router as outline_router

app = FastAPI(title="PDF Document Structure Extractor", version="1.0.0")

app.include_router(outline_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
