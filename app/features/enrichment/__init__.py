"""
Enrichment feature module.

Language-model assistance for journal entries:
- Sentiment scoring and theme extraction on every entry write
- Empathetic writing prompts
- Insights across recent entries
"""

from app.features.enrichment.oracle import ClaudeEnrichmentOracle, EnrichmentOracle
from app.features.enrichment.result import (
    EnrichmentFailure,
    EnrichmentResult,
    GeneratedInsight,
    GeneratedPrompt,
    Sentiment,
)
from app.features.enrichment.service import (
    FALLBACK_PROMPT,
    NEUTRAL_SENTIMENT,
    Enrichment,
    EnrichmentService,
)

__all__ = [
    "ClaudeEnrichmentOracle",
    "EnrichmentOracle",
    "EnrichmentFailure",
    "EnrichmentResult",
    "GeneratedInsight",
    "GeneratedPrompt",
    "Sentiment",
    "FALLBACK_PROMPT",
    "NEUTRAL_SENTIMENT",
    "Enrichment",
    "EnrichmentService",
]
