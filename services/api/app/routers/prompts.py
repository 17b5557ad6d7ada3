"""Prompt management endpoints.

Overrides apply to the process-wide registry used by the API's processor.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from core.actions import ActionKind
from shared.schemas.sessions import PromptUpdate
from src.rewrite.prompts import default_registry

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/prompts")
async def list_prompts():
    """List all prompts with their current content."""
    return [e.to_dict() for e in default_registry().list_entries()]


@router.get("/prompts/{action}")
async def get_prompt(action: ActionKind):
    return default_registry().entry(action).to_dict()


@router.put("/prompts/{action}")
async def update_prompt(action: ActionKind, body: PromptUpdate):
    """Override the template for one action. It must contain ``{text}``."""
    registry = default_registry()
    try:
        registry.set(action, body.content)
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_PROMPT", "message": str(e)})
    return registry.entry(action).to_dict()


@router.delete("/prompts/{action}")
async def reset_prompt(action: ActionKind):
    """Reset one action's prompt to its default."""
    registry = default_registry()
    registry.reset(action)
    logger.info("Prompt for %s reset to default", action.value)
    return registry.entry(action).to_dict()
