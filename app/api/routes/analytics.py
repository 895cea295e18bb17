"""
Analytics API Routes

Statistics, mood trends and theme frequencies over active entries.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_analytics_service, get_current_user
from app.api.models import MoodTrendPoint, ThemeShare, UserStats
from app.features.analytics import AnalyticsService
from app.features.identity import AuthenticatedUser
from app.shared.constants import DEFAULT_ANALYTICS_DAYS

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])
logger = logging.getLogger("MindJournal.API.Analytics")


@router.get("/stats", response_model=UserStats)
def get_stats(
    user: AuthenticatedUser = Depends(get_current_user),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> UserStats:
    return UserStats(**analytics.get_user_stats(user.id))


@router.get("/mood-trends", response_model=List[MoodTrendPoint])
def get_mood_trends(
    days: int = Query(DEFAULT_ANALYTICS_DAYS, ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> List[MoodTrendPoint]:
    return [MoodTrendPoint(**row) for row in analytics.get_mood_trends(user.id, days)]


@router.get("/themes", response_model=List[ThemeShare])
def get_themes(
    days: int = Query(DEFAULT_ANALYTICS_DAYS, ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> List[ThemeShare]:
    return [ThemeShare(**row) for row in analytics.get_theme_analysis(user.id, days)]
