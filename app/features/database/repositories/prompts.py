"""
Prompts Repository - generated writing prompts.
"""

import logging
from typing import Dict, Optional

from app.features.database.models import AiPrompt
from app.features.database.repositories.base import SupabaseRepository, to_payload

logger = logging.getLogger("MindJournal.Database.Prompts")


class PromptsRepository(SupabaseRepository):
    """Repository for AI prompt operations."""

    table_name = "ai_prompts"

    def create(self, prompt_data: Dict) -> AiPrompt:
        result = self.execute("create", self.table().insert(to_payload(prompt_data)))
        prompt = AiPrompt.model_validate(result.data[0])
        logger.info(f"Prompt created: {prompt.id}")
        return prompt

    def get_latest_unused(self, user_id: str) -> Optional[AiPrompt]:
        """Most recent prompt the user has not used yet."""
        result = self.execute(
            "get_latest_unused",
            self.table().select("*").eq("user_id", user_id).eq("used", False)
            .order("created_at", desc=True).limit(1),
        )
        return AiPrompt.model_validate(result.data[0]) if result.data else None

    def mark_used(self, prompt_id: str, user_id: str) -> bool:
        result = self.execute(
            "mark_used",
            self.table().update({"used": True}).eq("id", prompt_id).eq("user_id", user_id),
        )
        return bool(result.data)
