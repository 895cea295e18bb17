import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _csv(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


def _model_options(primary: str, fallbacks: List[str]) -> List[str]:
    """Primary model first, then each fallback once."""
    options = [primary]
    for model in fallbacks:
        if model not in options:
            options.append(model)
    return options


DEFAULT_CLAUDE_PRIMARY = 'claude-haiku-4-5-20251001'
DEFAULT_CLAUDE_FALLBACKS = 'claude-sonnet-4-5-20250929'

_CLAUDE_PRIMARY = os.getenv('CLAUDE_MODEL_PRIMARY') or os.getenv('CLAUDE_MODEL', DEFAULT_CLAUDE_PRIMARY)
_CLAUDE_FALLBACKS = _csv('CLAUDE_MODEL_FALLBACKS', DEFAULT_CLAUDE_FALLBACKS)


class Config:
    """Environment-driven settings for the journaling service."""

    SERVICE_NAME = os.getenv('SERVICE_NAME', 'mindjournal-service')
    ENVIRONMENT = os.getenv('ENVIRONMENT', 'production')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Supabase: journal storage and bearer-token verification
    SUPABASE_URL = os.getenv('SUPABASE_URL')
    SUPABASE_KEY = os.getenv('SUPABASE_KEY')

    # Claude: sentiment, themes, prompts, insights
    ANTHROPIC_API_KEY = os.getenv('ANTHROPIC_API_KEY') or os.getenv('CLAUDE_API_KEY')
    CLAUDE_MODEL_PRIMARY = _CLAUDE_PRIMARY
    CLAUDE_MODEL_FALLBACKS = _CLAUDE_FALLBACKS
    CLAUDE_MODEL_OPTIONS = _model_options(_CLAUDE_PRIMARY, _CLAUDE_FALLBACKS)
    ENRICHMENT_MAX_TOKENS = int(os.getenv('ENRICHMENT_MAX_TOKENS', '1000'))

    CORS_ALLOW_ORIGINS = _csv('CORS_ALLOW_ORIGINS', '*')


settings = Config()
