"""Domain models for contests."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from photo_contest.domain.photos import PhotoView


class ContestStatus(str, Enum):
    """Lifecycle state of a contest."""

    ACTIVE = "active"
    JUDGING = "judging"
    COMPLETED = "completed"


STATUS_TRANSITIONS: dict[ContestStatus, frozenset[ContestStatus]] = {
    ContestStatus.ACTIVE: frozenset({ContestStatus.JUDGING, ContestStatus.COMPLETED}),
    ContestStatus.JUDGING: frozenset({ContestStatus.COMPLETED}),
    ContestStatus.COMPLETED: frozenset(),
}


@dataclass(frozen=True)
class ContestFields:
    """Admin-supplied fields of a new contest."""

    name: str
    theme: str
    description: str
    deadline: datetime
    entry_limit: int
    is_minichallenge: bool
    xp_reward: int


@dataclass(frozen=True)
class Contest:
    """Stored contest record."""

    id: UUID
    name: str
    theme: str
    description: str
    deadline: datetime
    entry_limit: int
    created_by: UUID
    created_at: datetime
    status: ContestStatus
    is_minichallenge: bool
    xp_reward: int

    def accepts_entries_at(self, moment: datetime) -> bool:
        """Return True when the deadline has not passed at the given moment."""
        deadline = self.deadline
        if deadline.tzinfo is None:
            deadline = deadline.replace(tzinfo=UTC)
        return moment <= deadline


@dataclass(frozen=True)
class ContestSummary:
    """Contest annotated with its live entry count and creator."""

    contest: Contest
    entry_count: int
    creator_name: str


@dataclass(frozen=True)
class ContestDetails:
    """Contest with every submitted entry."""

    contest: Contest
    creator_name: str
    entries: list[PhotoView]
