"""
Database Client - Unified access to the journaling repositories.

A thin wrapper that hands one Supabase client to each repository.
"""

import logging

from app.features.database.repositories.insights import InsightsRepository
from app.features.database.repositories.journal_entries import JournalEntriesRepository
from app.features.database.repositories.prompts import PromptsRepository
from app.features.database.repositories.users import UsersRepository

logger = logging.getLogger("MindJournal.Database")


class DatabaseClient:
    """
    Database client providing access to all repositories.

    Usage:
        db = DatabaseClient(get_supabase())
        entries = db.entries.list_active(user_id)
        prompt = db.prompts.get_latest_unused(user_id)
    """

    def __init__(self, client):
        """Initialize repositories over the given Supabase client."""
        self._client = client

        self.users = UsersRepository(client)
        self.entries = JournalEntriesRepository(client)
        self.prompts = PromptsRepository(client)
        self.insights = InsightsRepository(client)

        logger.info("Database client initialized with all repositories")

    @property
    def client(self):
        """Direct access to Supabase client for advanced queries."""
        return self._client
