"""Identity feature module: bearer-token verification against Supabase Auth."""

from app.features.identity.provider import (
    AuthenticatedUser,
    IdentityProvider,
    SupabaseIdentityProvider,
)

__all__ = [
    "AuthenticatedUser",
    "IdentityProvider",
    "SupabaseIdentityProvider",
]
