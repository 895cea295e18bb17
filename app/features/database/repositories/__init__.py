"""Database Repositories - Organized data access."""

from app.features.database.repositories.insights import InsightsRepository
from app.features.database.repositories.journal_entries import JournalEntriesRepository
from app.features.database.repositories.prompts import PromptsRepository
from app.features.database.repositories.users import UsersRepository

__all__ = [
    "InsightsRepository",
    "JournalEntriesRepository",
    "PromptsRepository",
    "UsersRepository",
]
