"""
Pure aggregation functions behind the analytics endpoints.

Nothing here touches storage or the clock; callers pass rows and "today".
Calendar days are UTC dates.
"""

from collections import Counter
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Union

from app.shared.constants import DEFAULT_MOOD_SCORE, MAX_THEME_ROWS, MOOD_SCORES
from app.shared.numbers import round_half_up

Timestamp = Union[str, datetime]


def mood_score(mood: Optional[str]) -> int:
    """Map a mood label onto the 1-10 analytics scale (unknown -> 5)."""
    return MOOD_SCORES.get(mood or "", DEFAULT_MOOD_SCORE)


def as_utc(value: Timestamp) -> datetime:
    """Parse a PostgREST timestamp (or pass a datetime through) as aware UTC."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def average_mood(moods: Iterable[Optional[str]]) -> float:
    """Mean mood score over entries that have a mood, one decimal; 5 when none do."""
    scores = [mood_score(mood) for mood in moods if mood]
    if not scores:
        return float(DEFAULT_MOOD_SCORE)
    return round_half_up(sum(scores) / len(scores), 1)


def current_streak(created_at: Iterable[Timestamp], today: date) -> int:
    """
    Consecutive calendar days with an entry, counting back from today.

    Several entries on one day count once. A day without entries ends the
    streak, and so does having no entry today.
    """
    days = sorted({as_utc(ts).date() for ts in created_at}, reverse=True)

    streak = 0
    for offset, day in enumerate(days):
        if (today - day).days != offset:
            break
        streak += 1
    return streak


def mood_trend(rows: Iterable[Dict]) -> List[Dict]:
    """
    One point per entry with a mood, in the order given.

    Same-day entries produce separate points.
    """
    return [
        {"date": as_utc(row["created_at"]).date().isoformat(), "mood": mood_score(row["mood"])}
        for row in rows
        if row.get("mood")
    ]


def theme_distribution(theme_lists: Iterable[Optional[List[str]]], top: int = MAX_THEME_ROWS) -> List[Dict]:
    """
    Theme frequencies across entries, most frequent first.

    Percentages are of all theme occurrences, rounded to whole numbers, so
    the rows may add up to slightly more or less than 100. Ties keep the
    order in which themes were first seen.
    """
    counts: Counter = Counter()
    for themes in theme_lists:
        counts.update(themes or [])

    total = sum(counts.values())
    if not total:
        return []

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        {"theme": theme, "count": count, "percentage": int(round_half_up(count / total * 100))}
        for theme, count in ranked[:top]
    ]
