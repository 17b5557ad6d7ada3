"""One-shot processing endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from core.actions import list_actions
from core.providers.base import ProcessingError
from shared.schemas.process import ActionInfo, ProcessRequest, ProcessResponse
from src.rewrite.processor import TextProcessor

from ..deps import get_processor
from ..errors import empty_input_error, error_responses, processing_http_error

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/actions", response_model=list[ActionInfo])
async def get_actions():
    """List the supported actions with their labels and shortcut hints."""
    return list_actions()


@router.post("/process", response_model=ProcessResponse, responses=error_responses(502))
async def process_text(
    body: ProcessRequest,
    processor: TextProcessor = Depends(get_processor),
):
    """Process ``text`` with ``action`` and return the rewritten text."""
    if not body.text.strip():
        raise empty_input_error()

    t0 = time.time()
    try:
        output = await processor.process(body.action, body.text)
    except ProcessingError as e:
        raise processing_http_error(e)

    return ProcessResponse(
        action=body.action,
        text=body.text,
        output=output,
        provider=processor.provider_name,
        model=processor.provider.model,
        latency_ms=int((time.time() - t0) * 1000),
    )
