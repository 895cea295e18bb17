"""
Shared constants for the journaling service.
"""

# Moods a user may attach to an entry, mapped to the 1-10 scale used by analytics
MOOD_SCORES = {
    "happy": 9,
    "content": 7,
    "neutral": 5,
    "sad": 3,
    "stressed": 2,
}
VALID_MOODS = tuple(MOOD_SCORES)
DEFAULT_MOOD_SCORE = 5

# Listing / window defaults
DEFAULT_ENTRY_LIMIT = 50
DEFAULT_INSIGHT_LIMIT = 10
DEFAULT_ANALYTICS_DAYS = 7
WEEKLY_INSIGHT_WINDOW_DAYS = 7
MAX_THEME_ROWS = 10

# Enrichment windows
PROMPT_CONTEXT_ENTRIES = 5
INSIGHT_SOURCE_ENTRIES = 20
MIN_ENTRIES_FOR_INSIGHTS = 3
MAX_THEMES_PER_ENTRY = 5
MAX_INSIGHTS_PER_RUN = 3
