"""Claude-backed enrichment: sentiment, themes, writing prompts, insights."""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Dict, List, Optional, Protocol, Sequence

from anthropic import AsyncAnthropic

from app.core.config import settings
from app.core.logging_utils import log_llm_usage
from app.core.tracing import get_tracer
from app.features.database.models import JournalEntry
from app.features.enrichment import prompts
from app.features.enrichment.result import (
    EnrichmentResult,
    GeneratedInsight,
    GeneratedPrompt,
    Sentiment,
)
from app.shared.constants import MAX_INSIGHTS_PER_RUN, MAX_THEMES_PER_ENTRY, MIN_ENTRIES_FOR_INSIGHTS
from app.shared.numbers import clamp, round_half_up

logger = logging.getLogger("MindJournal.Enrichment.Oracle")
tracer = get_tracer(__name__)

# Used when the model answers but leaves a field out
PARTIAL_PROMPT_TEXT = "What's one thing you learned about yourself today?"
PARTIAL_PROMPT_CONTEXT = "General reflection prompt"


class EnrichmentOracle(Protocol):
    """What the journaling services need from a language model."""

    async def analyze_sentiment(self, text: str) -> EnrichmentResult[Sentiment]: ...

    async def extract_themes(self, text: str) -> EnrichmentResult[List[str]]: ...

    async def generate_empathic_prompt(
        self,
        recent_entries: Sequence[JournalEntry],
        context: Optional[str] = None,
    ) -> EnrichmentResult[GeneratedPrompt]: ...

    async def generate_insights(
        self, entries: Sequence[JournalEntry]
    ) -> EnrichmentResult[List[GeneratedInsight]]: ...


def parse_json_object(text: str) -> Dict[str, Any]:
    """Pull the JSON object out of a model reply, tolerating code fences and chatter."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = re.sub(r"^```(?:json)?\n?", "", cleaned)
        cleaned = re.sub(r"\n?```$", "", cleaned)

    json_match = re.search(r"\{[\s\S]*\}", cleaned)
    data = json.loads(json_match.group() if json_match else cleaned)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_sentiment(data: Dict[str, Any]) -> Sentiment:
    rating = data.get("rating")
    confidence = data.get("confidence")
    if not _is_number(rating) or not _is_number(confidence):
        raise ValueError(f"Sentiment reply missing numeric fields: {data!r}")
    return Sentiment(
        rating=int(clamp(round_half_up(float(rating)), 1, 5)),
        confidence=clamp(float(confidence), 0.0, 1.0),
    )


def parse_themes(data: Dict[str, Any]) -> List[str]:
    themes = data.get("themes") or []
    if not isinstance(themes, list):
        raise ValueError(f"Themes reply is not a list: {themes!r}")
    cleaned = [t.strip() for t in themes if isinstance(t, str) and t.strip()]
    return cleaned[:MAX_THEMES_PER_ENTRY]


def parse_prompt(data: Dict[str, Any]) -> GeneratedPrompt:
    return GeneratedPrompt(
        prompt=data.get("prompt") or PARTIAL_PROMPT_TEXT,
        context=data.get("context") or PARTIAL_PROMPT_CONTEXT,
    )


def parse_insights(data: Dict[str, Any]) -> List[GeneratedInsight]:
    raw = data.get("insights") or []
    if not isinstance(raw, list):
        raise ValueError(f"Insights reply is not a list: {raw!r}")

    insights = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("title") or not item.get("description"):
            logger.debug("Skipping malformed insight: %r", item)
            continue
        confidence = item.get("confidence")
        insights.append(
            GeneratedInsight(
                type=str(item.get("type") or "pattern"),
                title=str(item["title"]),
                description=str(item["description"]),
                confidence=clamp(float(confidence), 0.0, 1.0) if _is_number(confidence) else None,
                data=item.get("data"),
            )
        )
    return insights[:MAX_INSIGHTS_PER_RUN]


class ClaudeEnrichmentOracle:
    """Enrichment oracle over the Anthropic Messages API, with model fallback."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        models: Optional[Sequence[str]] = None,
        client: Optional[AsyncAnthropic] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        self.client = client or AsyncAnthropic(api_key=api_key or settings.ANTHROPIC_API_KEY)
        self.model_candidates = [m for m in (models or settings.CLAUDE_MODEL_OPTIONS) if m]
        self.max_tokens = max_tokens or settings.ENRICHMENT_MAX_TOKENS

        logger.info(
            "Claude enrichment oracle initialized with models: %s",
            ", ".join(self.model_candidates),
        )

    async def analyze_sentiment(self, text: str) -> EnrichmentResult[Sentiment]:
        return await self._run("analyze_sentiment", prompts.SENTIMENT_SYSTEM, text, parse_sentiment)

    async def extract_themes(self, text: str) -> EnrichmentResult[List[str]]:
        return await self._run("extract_themes", prompts.THEMES_SYSTEM, text, parse_themes)

    async def generate_empathic_prompt(
        self,
        recent_entries: Sequence[JournalEntry],
        context: Optional[str] = None,
    ) -> EnrichmentResult[GeneratedPrompt]:
        return await self._run(
            "generate_empathic_prompt",
            prompts.EMPATHIC_PROMPT_SYSTEM,
            prompts.build_prompt_request(recent_entries, context),
            parse_prompt,
        )

    async def generate_insights(
        self, entries: Sequence[JournalEntry]
    ) -> EnrichmentResult[List[GeneratedInsight]]:
        if len(entries) < MIN_ENTRIES_FOR_INSIGHTS:
            logger.info("Only %d entries, skipping insight generation", len(entries))
            return EnrichmentResult.success([])

        return await self._run(
            "generate_insights",
            prompts.INSIGHTS_SYSTEM,
            prompts.build_insights_request(entries),
            parse_insights,
        )

    async def _run(self, operation: str, system: str, user_content: str, parse) -> EnrichmentResult:
        with tracer.start_as_current_span(f"enrichment.{operation}") as span:
            last_error: Optional[Exception] = None

            for model_name in self.model_candidates:
                try:
                    result_text = await self._invoke_model(system, user_content, model_name, operation)
                    value = parse(parse_json_object(result_text))
                    span.set_attribute("enrichment.model", model_name)
                    return EnrichmentResult.success(value)
                except (json.JSONDecodeError, ValueError) as exc:
                    logger.error("Model %s returned an unusable %s reply: %s", model_name, operation, exc)
                    last_error = exc
                except Exception as exc:  # pylint: disable=broad-except
                    logger.warning("Model %s failed during %s: %s", model_name, operation, exc)
                    last_error = exc

            reason = str(last_error) if last_error else "no models configured"
            span.set_attribute("enrichment.failed", True)
            return EnrichmentResult.failed(operation, reason)

    async def _invoke_model(self, system: str, user_content: str, model_name: str, operation: str) -> str:
        """Send one request to Claude and return the raw text output."""
        started = time.monotonic()
        response = await self.client.messages.create(
            model=model_name,
            max_tokens=self.max_tokens,
            system=system,
            messages=[{"role": "user", "content": user_content}],
        )

        usage = getattr(response, "usage", None)
        if usage is not None:
            log_llm_usage(
                model=model_name,
                operation=operation,
                input_tokens=getattr(usage, "input_tokens", 0) or 0,
                output_tokens=getattr(usage, "output_tokens", 0) or 0,
                duration_ms=int((time.monotonic() - started) * 1000),
            )

        if not response.content:
            raise ValueError(f"Model {model_name} returned empty content")

        block = response.content[0]
        return (block.text if hasattr(block, "text") else str(block)).strip()
