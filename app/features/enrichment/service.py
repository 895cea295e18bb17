"""
Enrichment policy: which defaults stand in when the oracle fails.

The oracle reports failures as values; this service decides that an entry
is still saved with a neutral sentiment and no themes, that the user still
gets a prompt, and that a failed insight run simply yields nothing.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from app.features.database.models import JournalEntry
from app.features.enrichment.oracle import EnrichmentOracle
from app.features.enrichment.result import (
    EnrichmentResult,
    GeneratedInsight,
    GeneratedPrompt,
    Sentiment,
)

logger = logging.getLogger("MindJournal.Enrichment")

NEUTRAL_SENTIMENT = Sentiment(rating=3, confidence=0.5)
FALLBACK_PROMPT = GeneratedPrompt(
    prompt="How did you show kindness to yourself or others today?",
    context="Default empathetic prompt",
)


@dataclass(frozen=True)
class Enrichment:
    sentiment: Sentiment
    themes: List[str] = field(default_factory=list)


def _settle(result: EnrichmentResult, default):
    if not result.ok:
        logger.warning(
            "Enrichment %s failed, using default: %s",
            result.failure.operation,
            result.failure.reason,
        )
    return result.unwrap_or(default)


class EnrichmentService:
    def __init__(self, oracle: EnrichmentOracle):
        self.oracle = oracle

    async def enrich(self, text: str) -> Enrichment:
        """Score sentiment and extract themes concurrently; never fails."""
        sentiment_result, themes_result = await asyncio.gather(
            self.oracle.analyze_sentiment(text),
            self.oracle.extract_themes(text),
        )
        return Enrichment(
            sentiment=_settle(sentiment_result, NEUTRAL_SENTIMENT),
            themes=list(_settle(themes_result, [])),
        )

    async def empathic_prompt(
        self,
        recent_entries: Sequence[JournalEntry],
        context: Optional[str] = None,
    ) -> GeneratedPrompt:
        result = await self.oracle.generate_empathic_prompt(recent_entries, context)
        return _settle(result, FALLBACK_PROMPT)

    async def insights(self, entries: Sequence[JournalEntry]) -> List[GeneratedInsight]:
        result = await self.oracle.generate_insights(entries)
        return list(_settle(result, []))
