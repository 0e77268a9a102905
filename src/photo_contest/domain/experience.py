"""Experience points and leveling."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

XP_PER_LEVEL = 100
UPLOAD_XP = 10
RATING_XP = 5
CONTEST_ENTRY_MIN_XP = 10


def level_for_xp(xp: int) -> int:
    """Return the level reached with the given experience total."""
    return max(xp, 0) // XP_PER_LEVEL + 1


def contest_submission_xp(xp_reward: int) -> int:
    """Return experience granted for entering a contest with the given reward."""
    if xp_reward > 0:
        return max(xp_reward // 10, CONTEST_ENTRY_MIN_XP)
    return CONTEST_ENTRY_MIN_XP


@dataclass(frozen=True)
class ExperienceTransaction:
    """Single audit row of the experience ledger."""

    id: UUID
    profile_id: UUID
    amount: int
    reason: str
    related_id: str | None
    created_at: datetime


@dataclass(frozen=True)
class ExperienceGrant:
    """Result of applying a grant to a profile."""

    new_xp: int
    new_level: int
