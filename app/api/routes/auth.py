"""
Auth API Routes

The identity provider owns sessions; this route only reports who the
caller is and keeps the local profile row in step with the token claims.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_database
from app.features.database import DatabaseClient, User
from app.features.identity import AuthenticatedUser

router = APIRouter(prefix="/api/auth", tags=["Auth"])
logger = logging.getLogger("MindJournal.API.Auth")


@router.get("/user", response_model=User)
def get_user(
    user: AuthenticatedUser = Depends(get_current_user),
    db: DatabaseClient = Depends(get_database),
) -> User:
    """Return the caller's profile, upserting it from the token claims."""
    return db.users.upsert(user.profile())
