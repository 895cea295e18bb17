"""
Values exchanged with the enrichment oracle.

The oracle never raises: every call returns an ``EnrichmentResult`` that
either holds a value or an ``EnrichmentFailure``. What to do on failure is
the caller's decision (see ``EnrichmentService``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Sentiment:
    rating: int          # 1 (very negative) .. 5 (very positive)
    confidence: float    # 0 .. 1


@dataclass(frozen=True)
class GeneratedPrompt:
    prompt: str
    context: str


@dataclass(frozen=True)
class GeneratedInsight:
    type: str
    title: str
    description: str
    confidence: Optional[float] = None
    data: Optional[Any] = None


@dataclass(frozen=True)
class EnrichmentFailure:
    operation: str
    reason: str


@dataclass(frozen=True)
class EnrichmentResult(Generic[T]):
    value: Optional[T] = None
    failure: Optional[EnrichmentFailure] = field(default=None)

    @classmethod
    def success(cls, value: T) -> "EnrichmentResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, operation: str, reason: str) -> "EnrichmentResult[T]":
        return cls(failure=EnrichmentFailure(operation=operation, reason=reason))

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap_or(self, default: T) -> T:
        return self.value if self.ok else default
