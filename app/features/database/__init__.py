"""
Database Feature Module - Organized Data Access Layer

Provides access to the journaling tables in Supabase.

Usage:
    from app.features.database import DatabaseClient

    db = DatabaseClient(supabase)
    entry = db.entries.get(entry_id, user_id)
    insights = db.insights.list_recent(user_id)
"""

from app.features.database.client import DatabaseClient
from app.features.database.models import AiPrompt, Insight, JournalEntry, User

__all__ = [
    "DatabaseClient",
    "AiPrompt",
    "Insight",
    "JournalEntry",
    "User",
]
