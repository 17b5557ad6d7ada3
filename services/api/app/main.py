"""FastAPI application — Pasteboard Pro API.

Replaces the browser modal: one-shot processing, pasteboard sessions
driven by the session state machine, and prompt management.
"""

from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import __version__
from src.rewrite.processor import TextProcessor
from .deps import close_processor, get_processor
from .routers import process, sessions, prompts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_processor()


app = FastAPI(
    title="Pasteboard Pro API",
    version=__version__,
    description="Rephrase, summarize or tweetify pasted text with Claude",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
ALLOWED_ORIGINS = os.environ.get(
    "CORS_ORIGINS",
    "http://localhost:5173,http://localhost:8080",
).split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in ALLOWED_ORIGINS],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(process.router, prefix="/v1", tags=["process"])
app.include_router(sessions.router, prefix="/v1", tags=["sessions"])
app.include_router(prompts.router, prefix="/v1", tags=["prompts"])


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------
@app.get("/health")
async def health(processor: TextProcessor = Depends(get_processor)):
    return {
        "status": "ok",
        "version": __version__,
        "provider": processor.provider_name,
    }


@app.get("/")
async def root():
    return {"message": "Pasteboard Pro API", "docs": "/docs"}
