"""
Users Repository - local copy of identity-provider profiles.
"""

import logging
from typing import Dict, Optional

from app.features.database.models import User
from app.features.database.repositories.base import SupabaseRepository, to_payload, utc_now

logger = logging.getLogger("MindJournal.Database.Users")


class UsersRepository(SupabaseRepository):
    """Repository for user profile operations."""

    table_name = "users"

    def get(self, user_id: str) -> Optional[User]:
        result = self.execute("get", self.table().select("*").eq("id", user_id).limit(1))
        return User.model_validate(result.data[0]) if result.data else None

    def upsert(self, user_data: Dict) -> User:
        """Insert the profile or refresh it when the id already exists."""
        payload = to_payload({**user_data, "updated_at": utc_now()})
        result = self.execute("upsert", self.table().upsert(payload, on_conflict="id"))
        return User.model_validate(result.data[0])
