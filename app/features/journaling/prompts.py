"""Writing prompt lifecycle: generate, serve the current one, mark used."""

import logging
from typing import Optional

from app.features.database import AiPrompt, DatabaseClient
from app.features.enrichment import EnrichmentService
from app.shared.constants import PROMPT_CONTEXT_ENTRIES
from app.shared.errors import NotFoundError

logger = logging.getLogger("MindJournal.Prompts")


class PromptService:
    def __init__(self, db: DatabaseClient, enrichment: EnrichmentService):
        self.db = db
        self.enrichment = enrichment

    async def generate(self, user_id: str, context: Optional[str] = None) -> AiPrompt:
        """Create a new prompt from the user's most recent entries."""
        recent_entries = self.db.entries.list_active(user_id, PROMPT_CONTEXT_ENTRIES)
        generated = await self.enrichment.empathic_prompt(recent_entries, context)

        prompt = self.db.prompts.create({
            "user_id": user_id,
            "prompt": generated.prompt,
            "context": generated.context,
        })
        logger.info("Prompt generated", extra={"prompt_id": prompt.id, "source_entries": len(recent_entries)})
        return prompt

    async def current(self, user_id: str) -> AiPrompt:
        """Latest unused prompt, creating one when none is waiting."""
        prompt = self.db.prompts.get_latest_unused(user_id)
        if prompt is not None:
            return prompt
        return await self.generate(user_id)

    def mark_used(self, user_id: str, prompt_id: str) -> None:
        if not self.db.prompts.mark_used(prompt_id, user_id):
            raise NotFoundError("prompt", prompt_id)
