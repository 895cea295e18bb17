"""
Journal API Routes

CRUD and search over the caller's journal entries. Writes are enriched with
sentiment and themes before they are stored.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_user, get_journal_service
from app.api.models import MessageResponse
from app.features.database import JournalEntry
from app.features.identity import AuthenticatedUser
from app.features.journaling import JournalEntryCreate, JournalEntryUpdate, JournalService
from app.shared.constants import DEFAULT_ENTRY_LIMIT
from app.shared.errors import InvalidRequestError

router = APIRouter(prefix="/api/journal", tags=["Journal"])
logger = logging.getLogger("MindJournal.API.Journal")


def _parse_themes(themes: Optional[str]) -> Optional[List[str]]:
    if not themes:
        return None
    parsed = [theme.strip() for theme in themes.split(",") if theme.strip()]
    return parsed or None


@router.post("/entries", response_model=JournalEntry)
async def create_entry(
    payload: JournalEntryCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> JournalEntry:
    return await journal.create_entry(user.id, payload)


@router.get("/entries", response_model=List[JournalEntry])
def list_entries(
    limit: int = Query(DEFAULT_ENTRY_LIMIT, ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> List[JournalEntry]:
    return journal.list_entries(user.id, limit)


@router.get("/entries/{entry_id}", response_model=JournalEntry)
def get_entry(
    entry_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> JournalEntry:
    return journal.get_entry(user.id, entry_id)


@router.put("/entries/{entry_id}", response_model=JournalEntry)
async def update_entry(
    entry_id: str,
    payload: JournalEntryUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> JournalEntry:
    return await journal.update_entry(user.id, entry_id, payload)


@router.delete("/entries/{entry_id}", response_model=MessageResponse)
def delete_entry(
    entry_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> MessageResponse:
    """Archive an entry. Entries are never hard-deleted."""
    journal.archive_entry(user.id, entry_id)
    return MessageResponse(message="Entry archived successfully")


@router.get("/search", response_model=List[JournalEntry])
def search_entries(
    q: Optional[str] = Query(None, description="Text to look for in entry content"),
    themes: Optional[str] = Query(None, description="Comma-separated themes to intersect with"),
    user: AuthenticatedUser = Depends(get_current_user),
    journal: JournalService = Depends(get_journal_service),
) -> List[JournalEntry]:
    if not q:
        raise InvalidRequestError("Query parameter is required", details={"field": "q"})
    return journal.search(user.id, q, _parse_themes(themes))
