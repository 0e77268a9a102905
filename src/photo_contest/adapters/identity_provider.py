"""Identity lookup against the authentication provider."""

import logging
from dataclasses import dataclass
from typing import Protocol

from supabase import AuthError, Client

from photo_contest.domain.profiles import Identity

_logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface for resolving a session token to an identity."""

    def current_identity(self, token: str) -> Identity | None:
        """Return the identity behind a token, or None when it is not valid."""


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth."""

    client: Client

    def current_identity(self, token: str) -> Identity | None:
        """Validate an access token with Supabase Auth."""
        try:
            response = self.client.auth.get_user(token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return Identity(id=str(response.user.id), email=response.user.email)
