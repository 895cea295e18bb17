from fastapi import APIRouter

from app.api.routes import analytics, auth, health, insights, journal, prompts


router = APIRouter()

router.include_router(auth.router)
router.include_router(journal.router)
router.include_router(prompts.router)
router.include_router(analytics.router)
router.include_router(insights.router)
router.include_router(health.router)
