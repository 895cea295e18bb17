from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Liveness endpoint for monitoring. Does not touch Supabase or Claude."""
    return {"status": "healthy", "service": settings.SERVICE_NAME}
