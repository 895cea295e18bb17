"""
Identity verification.

Sessions belong to Supabase Auth; the service only checks the bearer token
and reads the user's id and profile claims.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from supabase import AuthApiError

from app.shared.errors import AuthenticationError

logger = logging.getLogger("MindJournal.Identity")


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    def profile(self) -> Dict:
        """Columns for the local users table."""
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "profile_image_url": self.profile_image_url,
        }


class IdentityProvider(Protocol):
    def verify(self, token: str) -> AuthenticatedUser: ...


class SupabaseIdentityProvider:
    """Validates access tokens with Supabase Auth."""

    def __init__(self, client):
        self.client = client

    def verify(self, token: str) -> AuthenticatedUser:
        try:
            response = self.client.auth.get_user(token)
        except AuthApiError as e:
            logger.info(f"Rejected access token: {e}")
            raise AuthenticationError("Invalid or expired session") from e

        user = getattr(response, "user", None) if response else None
        if user is None:
            raise AuthenticationError("Invalid or expired session")

        metadata = getattr(user, "user_metadata", None) or {}
        first_name = metadata.get("first_name") or metadata.get("given_name")
        last_name = metadata.get("last_name") or metadata.get("family_name")
        if not first_name and metadata.get("full_name"):
            first_name, _, rest = metadata["full_name"].partition(" ")
            last_name = last_name or rest or None

        return AuthenticatedUser(
            id=str(user.id),
            email=getattr(user, "email", None),
            first_name=first_name,
            last_name=last_name,
            profile_image_url=metadata.get("avatar_url") or metadata.get("picture"),
        )
