"""Analytics over a user's active journal entries."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from app.features.analytics import aggregations
from app.features.database import DatabaseClient
from app.shared.constants import DEFAULT_ANALYTICS_DAYS, WEEKLY_INSIGHT_WINDOW_DAYS

logger = logging.getLogger("MindJournal.Analytics")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnalyticsService:
    """Reads rows from the store and hands them to the pure aggregations."""

    def __init__(self, db: DatabaseClient, clock: Optional[Callable[[], datetime]] = None):
        self.db = db
        self.clock = clock or _utc_now

    def get_user_stats(self, user_id: str) -> Dict:
        now = self.clock()

        total_entries = self.db.entries.count_active(user_id)
        moods = self.db.entries.list_moods(user_id)
        created_at = self.db.entries.list_created_at(user_id)
        weekly_insights = self.db.insights.count_since(
            user_id, now - timedelta(days=WEEKLY_INSIGHT_WINDOW_DAYS)
        )

        stats = {
            "total_entries": total_entries,
            "current_streak": aggregations.current_streak(created_at, now.date()),
            "average_mood": aggregations.average_mood(moods),
            "weekly_insights": weekly_insights,
        }
        logger.debug("Computed stats", extra={"user_id": user_id, **stats})
        return stats

    def get_mood_trends(self, user_id: str, days: int = DEFAULT_ANALYTICS_DAYS) -> List[Dict]:
        since = self.clock() - timedelta(days=days)
        rows = self.db.entries.list_since(user_id, since, columns="created_at, mood")
        return aggregations.mood_trend(rows)

    def get_theme_analysis(self, user_id: str, days: int = DEFAULT_ANALYTICS_DAYS) -> List[Dict]:
        since = self.clock() - timedelta(days=days)
        rows = self.db.entries.list_since(user_id, since, columns="themes")
        return aggregations.theme_distribution(row.get("themes") for row in rows)
