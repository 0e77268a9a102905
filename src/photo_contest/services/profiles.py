"""Mapping of authenticated identities to member profiles."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from photo_contest.domain.profiles import CallerContext, Identity, Profile
from photo_contest.errors import (
    AuthenticationError,
    AuthorizationError,
    ProfileNotFoundError,
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for member profiles."""

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile registered with an email, if present."""

    def get_profiles(self, profile_ids: list[UUID]) -> list[Profile]:
        """Return the profiles with the given ids."""

    def create_profile(self, payload: dict[str, object]) -> Profile:
        """Create a profile row and return it."""

    def update_profile(self, profile_id: UUID, payload: dict[str, object]) -> Profile:
        """Patch a profile row and return it."""

    def set_experience(self, profile_id: UUID, xp: int, level: int) -> None:
        """Store a new experience total and level."""

    def list_top_by_xp(self, limit: int) -> list[Profile]:
        """Return profiles ordered by experience, highest first."""


@dataclass
class ProfileService:
    """Resolve callers to profiles and check their privileges."""

    repository: ProfileRepository

    def caller_context(self, identity: Identity | None) -> CallerContext:
        """Resolve the identity of a request once into a caller context."""
        if identity is None or not identity.email:
            return CallerContext(identity=identity, profile=None)
        return CallerContext(
            identity=identity, profile=self.repository.get_by_email(identity.email)
        )

    def resolve(self, caller: CallerContext) -> Profile:
        """Return the caller's profile, failing when there is none."""
        if caller.identity is None:
            raise AuthenticationError("Not authenticated")
        if caller.profile is None:
            raise ProfileNotFoundError("User profile not found")
        return caller.profile

    def require_admin(self, caller: CallerContext) -> Profile:
        """Return the caller's profile when it carries the admin flag."""
        if caller.identity is None or caller.profile is None:
            raise AuthorizationError("Admin access required")
        if not caller.profile.is_admin:
            raise AuthorizationError("Admin access required")
        return caller.profile

    def ensure_profile(
        self,
        identity: Identity | None,
        name: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> Profile:
        """Return the identity's profile, creating it on first interaction."""
        if identity is None:
            raise AuthenticationError("Not authenticated")
        if not identity.email:
            raise AuthenticationError("Authenticated identity has no email")
        existing = self.repository.get_by_email(identity.email)
        if existing:
            return existing

        profile = self.repository.create_profile(
            {
                "auth_user_id": identity.id,
                "email": identity.email,
                "name": name,
                "first_name": first_name,
                "last_name": last_name,
                "xp": 0,
                "level": 1,
                "is_admin": False,
                "joined_at": datetime.now(tz=UTC).isoformat(),
            }
        )
        _logger.info("Created profile %s for identity %s", profile.id, identity.id)
        return profile

    def update_profile(
        self,
        caller: CallerContext,
        name: str | None = None,
        bio: str | None = None,
        profile_picture: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> Profile:
        """Apply self-service edits to the caller's profile.

        Also completes a profile created before the member gave a full name.
        """
        profile = self.resolve(caller)
        updates: dict[str, object] = {}
        if name is not None:
            updates["name"] = name
        if first_name is not None:
            updates["first_name"] = first_name
        if last_name is not None:
            updates["last_name"] = last_name
        if bio is not None:
            updates["bio"] = bio
        if profile_picture is not None:
            updates["profile_picture"] = profile_picture
        if not updates:
            return profile
        return self.repository.update_profile(profile.id, updates)
