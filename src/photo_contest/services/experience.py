"""Experience ledger: the only place experience totals change."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_contest.domain.experience import (
    ExperienceGrant,
    ExperienceTransaction,
    level_for_xp,
)
from photo_contest.errors import NotFoundError
from photo_contest.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


class ExperienceRepository(Protocol):
    """Persistence interface for experience transactions."""

    def create_transaction(
        self, profile_id: UUID, amount: int, reason: str, related_id: str | None
    ) -> ExperienceTransaction:
        """Append a transaction row and return it."""

    def list_transactions(
        self, profile_id: UUID, limit: int
    ) -> list[ExperienceTransaction]:
        """Return the latest transactions of a profile."""


@dataclass
class ExperienceLedger:
    """Apply experience grants and record them."""

    profile_repository: ProfileRepository
    transaction_repository: ExperienceRepository

    def grant(
        self,
        profile_id: UUID,
        amount: int,
        reason: str,
        related_id: str | None = None,
    ) -> ExperienceGrant:
        """Add (or remove) experience and recompute the level."""
        profile = self.profile_repository.get_profile(profile_id)
        if profile is None:
            raise NotFoundError("User not found")

        new_xp = max(0, profile.xp + amount)
        new_level = level_for_xp(new_xp)
        self.profile_repository.set_experience(profile_id, new_xp, new_level)
        self.transaction_repository.create_transaction(
            profile_id=profile_id,
            amount=amount,
            reason=reason,
            related_id=related_id,
        )
        _logger.info(
            "XP grant: profile=%s amount=%s reason=%s xp=%s level=%s",
            profile_id,
            amount,
            reason,
            new_xp,
            new_level,
        )
        return ExperienceGrant(new_xp=new_xp, new_level=new_level)

    def history(self, profile_id: UUID, limit: int = 20) -> list[ExperienceTransaction]:
        """Return recent ledger rows for a profile."""
        return self.transaction_repository.list_transactions(profile_id, limit)
