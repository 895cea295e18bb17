"""
Insights API Routes

Generated observations across the caller's recent entries.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_insight_service
from app.api.models import MessageResponse
from app.features.database import Insight
from app.features.identity import AuthenticatedUser
from app.features.journaling import InsightService

router = APIRouter(prefix="/api/insights", tags=["Insights"])
logger = logging.getLogger("MindJournal.API.Insights")


@router.get("", response_model=List[Insight])
def list_insights(
    user: AuthenticatedUser = Depends(get_current_user),
    insights: InsightService = Depends(get_insight_service),
) -> List[Insight]:
    return insights.list_recent(user.id)


@router.post("/generate", response_model=List[Insight])
async def generate_insights(
    user: AuthenticatedUser = Depends(get_current_user),
    insights: InsightService = Depends(get_insight_service),
) -> List[Insight]:
    """Analyse the last 20 entries. Fewer than three entries yields an empty list."""
    return await insights.generate(user.id)


@router.post("/{insight_id}/view", response_model=MessageResponse)
def view_insight(
    insight_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    insights: InsightService = Depends(get_insight_service),
) -> MessageResponse:
    insights.mark_viewed(user.id, insight_id)
    return MessageResponse(message="Insight marked as viewed")
