"""
Persisted records as returned by the repositories.

Rows come out of Supabase in snake_case; the API speaks camelCase, so every
model accepts field names on input and serializes with camelCase aliases.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class User(RecordModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JournalEntry(RecordModel):
    id: str
    user_id: str
    title: Optional[str] = None
    content: str
    mood: Optional[str] = None
    sentiment_score: Optional[float] = None
    sentiment_confidence: Optional[float] = None
    themes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    word_count: int = 0
    is_archived: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("themes", "tags", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @field_validator("word_count", mode="before")
    @classmethod
    def _null_count(cls, value):
        return value or 0

    @field_validator("is_archived", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return bool(value)


class AiPrompt(RecordModel):
    id: str
    user_id: str
    prompt: str
    context: Optional[str] = None
    used: bool = False
    created_at: datetime

    @field_validator("used", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return bool(value)


class Insight(RecordModel):
    id: str
    user_id: str
    type: str
    title: str
    description: str
    data: Optional[Any] = None
    confidence: Optional[float] = None
    period_start: Optional[datetime] = None
    period_end: Optional[datetime] = None
    viewed: bool = False
    created_at: datetime

    @field_validator("viewed", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return bool(value)
