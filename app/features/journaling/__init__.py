"""
Journaling feature module.

- Entry writes with sentiment/theme enrichment, reads and search
- Writing prompt lifecycle
- Insight lifecycle
"""

from app.features.journaling.insights import InsightService
from app.features.journaling.models import JournalEntryCreate, JournalEntryUpdate, count_words
from app.features.journaling.prompts import PromptService
from app.features.journaling.service import JournalService

__all__ = [
    "InsightService",
    "JournalEntryCreate",
    "JournalEntryUpdate",
    "JournalService",
    "PromptService",
    "count_words",
]
