"""
Insights Repository - generated observations about a user's entries.
"""

import logging
from datetime import datetime
from typing import Dict, List

from app.features.database.models import Insight
from app.features.database.repositories.base import SupabaseRepository, to_payload
from app.shared.constants import DEFAULT_INSIGHT_LIMIT

logger = logging.getLogger("MindJournal.Database.Insights")


class InsightsRepository(SupabaseRepository):
    """Repository for insight operations."""

    table_name = "insights"

    def create(self, insight_data: Dict) -> Insight:
        result = self.execute("create", self.table().insert(to_payload(insight_data)))
        insight = Insight.model_validate(result.data[0])
        logger.info(f"Insight created: {insight.id} ({insight.type})")
        return insight

    def list_recent(self, user_id: str, limit: int = DEFAULT_INSIGHT_LIMIT) -> List[Insight]:
        result = self.execute(
            "list_recent",
            self.table().select("*").eq("user_id", user_id)
            .order("created_at", desc=True).limit(limit),
        )
        return [Insight.model_validate(row) for row in result.data or []]

    def mark_viewed(self, insight_id: str, user_id: str) -> bool:
        result = self.execute(
            "mark_viewed",
            self.table().update({"viewed": True}).eq("id", insight_id).eq("user_id", user_id),
        )
        return bool(result.data)

    def count_since(self, user_id: str, since: datetime) -> int:
        result = self.execute(
            "count_since",
            self.table().select("id", count="exact").eq("user_id", user_id)
            .gte("created_at", since.isoformat()),
        )
        if result.count is not None:
            return result.count
        return len(result.data or [])
