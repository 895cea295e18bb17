from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(ApiModel):
    message: str


class PromptGenerateRequest(ApiModel):
    context: Optional[str] = None

# =========================================================================
# ANALYTICS MODELS
# =========================================================================

class UserStats(ApiModel):
    total_entries: int
    current_streak: int
    average_mood: float
    weekly_insights: int

class MoodTrendPoint(ApiModel):
    date: str  # YYYY-MM-DD
    mood: int

class ThemeShare(ApiModel):
    theme: str
    count: int
    percentage: int
