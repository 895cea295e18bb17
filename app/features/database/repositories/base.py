"""Shared plumbing for the Supabase repositories."""

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict

from app.shared.errors import StorageError

logger = logging.getLogger("MindJournal.Database")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Make a dict JSON-ready for PostgREST (datetimes become ISO strings)."""
    payload = {}
    for key, value in data.items():
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        payload[key] = value
    return payload


class SupabaseRepository:
    """Base repository: holds the client and turns failures into StorageError."""

    table_name: str = ""

    def __init__(self, client):
        """Initialize with Supabase client."""
        self.client = client

    def table(self):
        return self.client.table(self.table_name)

    def execute(self, operation: str, query):
        try:
            return query.execute()
        except Exception as e:
            logger.error(f"Error during {self.table_name}.{operation}: {e}")
            raise StorageError(f"{self.table_name}.{operation}", e) from e
