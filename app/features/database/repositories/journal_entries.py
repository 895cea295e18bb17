"""
Journal Entries Repository - entry data access.

Every query is filtered by ``user_id``; archived rows are hidden from
everything except a direct ``get``.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from app.features.database.models import JournalEntry
from app.features.database.repositories.base import SupabaseRepository, to_payload, utc_now
from app.shared.constants import DEFAULT_ENTRY_LIMIT

logger = logging.getLogger("MindJournal.Database.JournalEntries")


def escape_like(text: str) -> str:
    """Make ``%`` and ``_`` match literally in an ILIKE pattern."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class JournalEntriesRepository(SupabaseRepository):
    """Repository for journal entry operations."""

    table_name = "journal_entries"

    def _active(self, user_id: str, columns: str = "*", count: Optional[str] = None):
        return self.table().select(columns, count=count).eq(
            "user_id", user_id
        ).eq("is_archived", False)

    def create(self, entry_data: Dict) -> JournalEntry:
        """Insert a new entry and return the stored row."""
        result = self.execute("create", self.table().insert(to_payload(entry_data)))
        entry = JournalEntry.model_validate(result.data[0])
        logger.info(f"Journal entry created: {entry.id}")
        return entry

    def list_active(self, user_id: str, limit: int = DEFAULT_ENTRY_LIMIT) -> List[JournalEntry]:
        """Non-archived entries, newest first."""
        result = self.execute(
            "list_active",
            self._active(user_id).order("created_at", desc=True).limit(limit),
        )
        return [JournalEntry.model_validate(row) for row in result.data or []]

    def get(self, entry_id: str, user_id: str) -> Optional[JournalEntry]:
        """Get an entry by id, only if it belongs to ``user_id``."""
        result = self.execute(
            "get",
            self.table().select("*").eq("id", entry_id).eq("user_id", user_id).limit(1),
        )
        return JournalEntry.model_validate(result.data[0]) if result.data else None

    def update(self, entry_id: str, user_id: str, updates: Dict) -> Optional[JournalEntry]:
        """Merge ``updates`` into the entry; None when it is not the user's."""
        payload = to_payload({**updates, "updated_at": utc_now()})
        result = self.execute(
            "update",
            self.table().update(payload).eq("id", entry_id).eq("user_id", user_id),
        )
        if not result.data:
            return None
        logger.info(f"Updated journal entry {entry_id}")
        return JournalEntry.model_validate(result.data[0])

    def soft_delete(self, entry_id: str, user_id: str) -> bool:
        """Archive an entry. Returns whether a row was affected."""
        payload = to_payload({"is_archived": True, "updated_at": utc_now()})
        result = self.execute(
            "soft_delete",
            self.table().update(payload).eq("id", entry_id).eq("user_id", user_id),
        )
        archived = bool(result.data)
        if archived:
            logger.info(f"Archived journal entry {entry_id}")
        return archived

    def search(self, user_id: str, query: str, themes: Optional[List[str]] = None) -> List[JournalEntry]:
        """
        Case-insensitive literal substring search on content.

        With ``themes``, only entries sharing at least one theme are kept.
        """
        builder = self._active(user_id).ilike("content", f"%{escape_like(query)}%")
        if themes:
            builder = builder.overlaps("themes", themes)
        result = self.execute("search", builder.order("created_at", desc=True))
        return [JournalEntry.model_validate(row) for row in result.data or []]

    # =========================================================================
    # ANALYTICS READS
    # =========================================================================

    def count_active(self, user_id: str) -> int:
        result = self.execute("count_active", self._active(user_id, "id", count="exact"))
        if result.count is not None:
            return result.count
        return len(result.data or [])

    def list_moods(self, user_id: str) -> List[str]:
        """Moods of active entries that have one."""
        result = self.execute(
            "list_moods",
            self._active(user_id, "mood").not_.is_("mood", "null"),
        )
        return [row["mood"] for row in result.data or []]

    def list_created_at(self, user_id: str) -> List[str]:
        """Creation timestamps of active entries, newest first."""
        result = self.execute(
            "list_created_at",
            self._active(user_id, "created_at").order("created_at", desc=True),
        )
        return [row["created_at"] for row in result.data or []]

    def list_since(self, user_id: str, since: datetime, columns: str = "*") -> List[Dict]:
        """Raw rows of active entries created at or after ``since``, oldest first."""
        result = self.execute(
            "list_since",
            self._active(user_id, columns).gte("created_at", since.isoformat()).order("created_at"),
        )
        return result.data or []
