"""
Journal entry orchestration.

Writes run enrichment before persisting; enrichment cannot fail a write.
Reads are plain, user-scoped store calls.
"""

import logging
from typing import List, Optional

from app.core.logging_utils import sanitize_for_logging
from app.features.database import DatabaseClient, JournalEntry
from app.features.enrichment import EnrichmentService
from app.features.journaling.models import JournalEntryCreate, JournalEntryUpdate, count_words
from app.shared.constants import DEFAULT_ENTRY_LIMIT
from app.shared.errors import NotFoundError

logger = logging.getLogger("MindJournal.Journal")


class JournalService:
    def __init__(self, db: DatabaseClient, enrichment: EnrichmentService):
        self.db = db
        self.enrichment = enrichment

    async def create_entry(self, user_id: str, payload: JournalEntryCreate) -> JournalEntry:
        enrichment = await self.enrichment.enrich(payload.content)

        entry = self.db.entries.create({
            **payload.model_dump(),
            "user_id": user_id,
            "word_count": count_words(payload.content),
            "sentiment_score": enrichment.sentiment.rating,
            "sentiment_confidence": enrichment.sentiment.confidence,
            "themes": enrichment.themes,
        })
        logger.info(
            "Journal entry saved",
            extra={
                "entry_id": entry.id,
                "word_count": entry.word_count,
                "themes": sanitize_for_logging(entry.themes),
            },
        )
        return entry

    def list_entries(self, user_id: str, limit: int = DEFAULT_ENTRY_LIMIT) -> List[JournalEntry]:
        return self.db.entries.list_active(user_id, limit)

    def get_entry(self, user_id: str, entry_id: str) -> JournalEntry:
        entry = self.db.entries.get(entry_id, user_id)
        if entry is None:
            raise NotFoundError("entry", entry_id)
        return entry

    async def update_entry(self, user_id: str, entry_id: str, payload: JournalEntryUpdate) -> JournalEntry:
        # Ownership first, so a foreign id never costs an oracle call
        self.get_entry(user_id, entry_id)

        updates = payload.model_dump(exclude_unset=True)
        if updates.get("content"):
            enrichment = await self.enrichment.enrich(updates["content"])
            updates.update(
                word_count=count_words(updates["content"]),
                sentiment_score=enrichment.sentiment.rating,
                sentiment_confidence=enrichment.sentiment.confidence,
                themes=enrichment.themes,
            )

        entry = self.db.entries.update(entry_id, user_id, updates)
        if entry is None:
            raise NotFoundError("entry", entry_id)
        return entry

    def archive_entry(self, user_id: str, entry_id: str) -> None:
        if not self.db.entries.soft_delete(entry_id, user_id):
            raise NotFoundError("entry", entry_id)

    def search(self, user_id: str, query: str, themes: Optional[List[str]] = None) -> List[JournalEntry]:
        results = self.db.entries.search(user_id, query, themes)
        logger.debug(
            "Search finished",
            extra={"query": sanitize_for_logging(query, 40), "themes": themes or [], "hits": len(results)},
        )
        return results
