"""
Analytics feature module.

- Entry statistics (totals, streak, average mood, weekly insights)
- Mood trends over a trailing window
- Theme frequency ranking
"""

from app.features.analytics.aggregations import (
    average_mood,
    current_streak,
    mood_score,
    mood_trend,
    theme_distribution,
)
from app.features.analytics.service import AnalyticsService

__all__ = [
    "AnalyticsService",
    "average_mood",
    "current_streak",
    "mood_score",
    "mood_trend",
    "theme_distribution",
]
