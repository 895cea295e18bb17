"""
AI Prompt API Routes

Empathetic writing prompts generated from the caller's recent entries.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.api.dependencies import get_current_user, get_prompt_service
from app.api.models import MessageResponse, PromptGenerateRequest
from app.features.database import AiPrompt
from app.features.identity import AuthenticatedUser
from app.features.journaling import PromptService

router = APIRouter(prefix="/api/ai/prompts", tags=["Prompts"])
logger = logging.getLogger("MindJournal.API.Prompts")


@router.post("/generate", response_model=AiPrompt)
async def generate_prompt(
    context: Optional[str] = Query(None, description="Extra context for the prompt"),
    body: Optional[PromptGenerateRequest] = Body(None),
    user: AuthenticatedUser = Depends(get_current_user),
    prompts: PromptService = Depends(get_prompt_service),
) -> AiPrompt:
    """Always creates a fresh prompt. Context may come as a query param or JSON body."""
    return await prompts.generate(user.id, context or (body.context if body else None))


@router.get("/current", response_model=AiPrompt)
async def current_prompt(
    user: AuthenticatedUser = Depends(get_current_user),
    prompts: PromptService = Depends(get_prompt_service),
) -> AiPrompt:
    return await prompts.current(user.id)


@router.post("/{prompt_id}/use", response_model=MessageResponse)
def use_prompt(
    prompt_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    prompts: PromptService = Depends(get_prompt_service),
) -> MessageResponse:
    prompts.mark_used(user.id, prompt_id)
    return MessageResponse(message="Prompt marked as used")
