"""Payloads accepted when writing journal entries."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Mood = Literal["happy", "content", "neutral", "sad", "stressed"]


def count_words(content: str) -> int:
    """Whitespace-separated tokens in the trimmed text."""
    return len(content.split())


class _EntryPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("content", check_fields=False)
    @classmethod
    def _content_not_blank(cls, value):
        if value is None or not value.strip():
            raise ValueError("Content must not be empty")
        return value


class JournalEntryCreate(_EntryPayload):
    title: Optional[str] = Field(default=None, max_length=200)
    content: str
    mood: Optional[Mood] = None
    tags: list[str] = Field(default_factory=list)


class JournalEntryUpdate(_EntryPayload):
    """Partial update; only fields present in the request are applied."""

    title: Optional[str] = Field(default=None, max_length=200)
    content: Optional[str] = None
    mood: Optional[Mood] = None
    tags: Optional[list[str]] = None
