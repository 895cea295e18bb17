"""
Prompt templates for the enrichment oracle.

Each template asks for a single JSON object so the reply can be parsed
without tool use.
"""

from typing import Optional, Sequence

from app.features.database.models import JournalEntry
from app.shared.constants import MAX_INSIGHTS_PER_RUN, MAX_THEMES_PER_ENTRY, PROMPT_CONTEXT_ENTRIES

SENTIMENT_SYSTEM = (
    "You are a sentiment analysis expert. Analyze the sentiment of the journal entry and "
    "provide a rating from 1 to 5 (1 = very negative, 2 = negative, 3 = neutral, "
    "4 = positive, 5 = very positive) and a confidence score between 0 and 1. "
    'Respond ONLY with JSON in this format: {"rating": number, "confidence": number}'
)

THEMES_SYSTEM = (
    "You are a text analysis expert. Extract the main themes from this journal entry. "
    "Focus on life categories like work, family, health, relationships, personal growth, "
    f"stress, gratitude, exercise, creativity, etc. Return up to {MAX_THEMES_PER_ENTRY} most "
    "relevant themes as short lowercase labels. "
    'Respond ONLY with JSON in this format: {"themes": ["theme1", "theme2"]}'
)

EMPATHIC_PROMPT_SYSTEM = """You are an empathetic journaling companion. Based on the user's recent journal entries, generate a thoughtful, personalized writing prompt that encourages reflection and self-discovery. The prompt should be:
- Empathetic and non-judgmental
- Specific to their recent experiences or patterns
- Encouraging of deeper reflection
- About 1-2 sentences long
- Focused on growth and self-awareness

Respond ONLY with JSON in this format: {"prompt": "your prompt here", "context": "brief explanation of what inspired this prompt"}"""

INSIGHTS_SYSTEM = f"""You are a personal insights analyst. Analyze the journal entries and identify meaningful patterns, correlations, or trends that could help the user understand themselves better. Look for:
- Mood patterns related to activities, times, or situations
- Recurring themes or concerns
- Growth or positive changes
- Correlations between different aspects of life

Generate up to {MAX_INSIGHTS_PER_RUN} insights. Each insight should be encouraging and constructive. Respond ONLY with JSON in this format:
{{"insights": [{{"type": "pattern|correlation|trend", "title": "brief title", "description": "helpful description", "confidence": 0.8}}]}}"""


def build_prompt_request(recent_entries: Sequence[JournalEntry], context: Optional[str] = None) -> str:
    """User message for prompt generation: a few recent entries plus free-form context."""
    lines = [
        f"{entry.mood or 'neutral'}: {entry.content[:200]}"
        for entry in recent_entries[:PROMPT_CONTEXT_ENTRIES]
    ]
    entries_text = "\n\n".join(lines)
    return f"Recent journal entries:\n{entries_text}\n\nAdditional context: {context or 'None'}"


def build_insights_request(entries: Sequence[JournalEntry]) -> str:
    lines = []
    for entry in entries:
        day = entry.created_at.strftime("%a %b %d %Y") if entry.created_at else "Unknown"
        lines.append(
            f"Date: {day}, Mood: {entry.mood or 'not specified'}, Content: {entry.content[:300]}"
        )
    return "Journal entries to analyze:\n" + "\n\n".join(lines)
