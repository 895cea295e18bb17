"""Insight lifecycle: generate from recent entries, list, mark viewed."""

import logging
from typing import List

from app.features.database import DatabaseClient, Insight
from app.features.enrichment import EnrichmentService
from app.shared.constants import DEFAULT_INSIGHT_LIMIT, INSIGHT_SOURCE_ENTRIES
from app.shared.errors import NotFoundError

logger = logging.getLogger("MindJournal.Insights")


class InsightService:
    def __init__(self, db: DatabaseClient, enrichment: EnrichmentService):
        self.db = db
        self.enrichment = enrichment

    def list_recent(self, user_id: str, limit: int = DEFAULT_INSIGHT_LIMIT) -> List[Insight]:
        return self.db.insights.list_recent(user_id, limit)

    async def generate(self, user_id: str) -> List[Insight]:
        """
        Analyse the last entries and store whatever insights come back.

        The stored period runs from the oldest to the newest analysed entry.
        """
        entries = self.db.entries.list_active(user_id, INSIGHT_SOURCE_ENTRIES)
        generated = await self.enrichment.insights(entries)
        if not generated:
            return []

        period_start = entries[-1].created_at
        period_end = entries[0].created_at

        created = [
            self.db.insights.create({
                "user_id": user_id,
                "type": item.type,
                "title": item.title,
                "description": item.description,
                "confidence": item.confidence,
                "data": item.data,
                "period_start": period_start,
                "period_end": period_end,
            })
            for item in generated
        ]
        logger.info("Insights generated", extra={"count": len(created), "source_entries": len(entries)})
        return created

    def mark_viewed(self, user_id: str, insight_id: str) -> None:
        if not self.db.insights.mark_viewed(insight_id, user_id):
            raise NotFoundError("insight", insight_id)
