# Shared constants and utilities
from .constants import (
    MOOD_SCORES,
    VALID_MOODS,
    DEFAULT_MOOD_SCORE,
)
from .numbers import round_half_up, clamp

__all__ = [
    "MOOD_SCORES",
    "VALID_MOODS",
    "DEFAULT_MOOD_SCORE",
    "round_half_up",
    "clamp",
]
