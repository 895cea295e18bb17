from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.database import get_supabase
from app.features.analytics import AnalyticsService
from app.features.database import DatabaseClient
from app.features.enrichment import ClaudeEnrichmentOracle, EnrichmentOracle, EnrichmentService
from app.features.identity import AuthenticatedUser, IdentityProvider, SupabaseIdentityProvider
from app.features.journaling import InsightService, JournalService, PromptService
from app.shared.errors import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def get_database() -> DatabaseClient:
    """Provide a singleton database client for request handlers."""
    return DatabaseClient(get_supabase())


@lru_cache(maxsize=1)
def get_oracle() -> EnrichmentOracle:
    """Provide a singleton Claude enrichment oracle."""
    return ClaudeEnrichmentOracle()


@lru_cache(maxsize=1)
def get_identity_provider() -> IdentityProvider:
    return SupabaseIdentityProvider(get_supabase())


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> AuthenticatedUser:
    """Resolve the caller from the Authorization header or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    return identity.verify(credentials.credentials)


def get_enrichment_service(oracle: EnrichmentOracle = Depends(get_oracle)) -> EnrichmentService:
    return EnrichmentService(oracle)


def get_journal_service(
    db: DatabaseClient = Depends(get_database),
    enrichment: EnrichmentService = Depends(get_enrichment_service),
) -> JournalService:
    return JournalService(db, enrichment)


def get_prompt_service(
    db: DatabaseClient = Depends(get_database),
    enrichment: EnrichmentService = Depends(get_enrichment_service),
) -> PromptService:
    return PromptService(db, enrichment)


def get_insight_service(
    db: DatabaseClient = Depends(get_database),
    enrichment: EnrichmentService = Depends(get_enrichment_service),
) -> InsightService:
    return InsightService(db, enrichment)


def get_analytics_service(db: DatabaseClient = Depends(get_database)) -> AnalyticsService:
    return AnalyticsService(db)
