"""Contest creation, status changes and listings."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_contest.adapters.storage_client import StorageClient
from photo_contest.domain.contests import (
    STATUS_TRANSITIONS,
    Contest,
    ContestDetails,
    ContestFields,
    ContestStatus,
    ContestSummary,
)
from photo_contest.domain.photos import PhotoFields
from photo_contest.domain.profiles import CallerContext
from photo_contest.errors import InvalidStatusTransitionError, NotFoundError
from photo_contest.services.photos import PhotoRepository, project_photos
from photo_contest.services.profiles import ProfileRepository, ProfileService
from photo_contest.services.submissions import SubmissionGuard

_logger = logging.getLogger(__name__)


class ContestRepository(Protocol):
    """Persistence interface for contests."""

    def create_contest(self, creator_id: UUID, fields: ContestFields) -> Contest:
        """Create an active contest and return it."""

    def get_contest(self, contest_id: UUID) -> Contest | None:
        """Return a contest by id, if present."""

    def list_contests(self, status: ContestStatus | None) -> list[Contest]:
        """Return contests, newest first, optionally filtered by status."""

    def update_status(self, contest_id: UUID, status: ContestStatus) -> None:
        """Store a new contest status."""


@dataclass
class ContestService:
    """Application service for the contest lifecycle."""

    repository: ContestRepository
    photo_repository: PhotoRepository
    profile_repository: ProfileRepository
    profile_service: ProfileService
    storage_client: StorageClient
    submission_guard: SubmissionGuard

    def create(self, caller: CallerContext, fields: ContestFields) -> UUID:
        """Create a contest on behalf of an admin."""
        admin = self.profile_service.require_admin(caller)
        contest = self.repository.create_contest(admin.id, fields)
        _logger.info("Contest %s created by %s", contest.id, admin.id)
        return contest.id

    def set_status(
        self, caller: CallerContext, contest_id: UUID, status: str
    ) -> UUID:
        """Move a contest along active -> judging -> completed."""
        self.profile_service.require_admin(caller)
        try:
            new_status = ContestStatus(status)
        except ValueError:
            raise InvalidStatusTransitionError(
                f"Unknown contest status: {status}"
            ) from None
        contest = self.repository.get_contest(contest_id)
        if contest is None:
            raise NotFoundError("Contest not found")
        if new_status is contest.status:
            return contest_id
        if new_status not in STATUS_TRANSITIONS[contest.status]:
            raise InvalidStatusTransitionError(
                f"Cannot move contest from {contest.status.value} "
                f"to {new_status.value}"
            )
        self.repository.update_status(contest_id, new_status)
        _logger.info(
            "Contest %s status %s -> %s",
            contest_id,
            contest.status.value,
            new_status.value,
        )
        return contest_id

    def submit_entry(
        self, contest_id: UUID, uploader_id: UUID, fields: PhotoFields
    ) -> UUID:
        """Submit a photo to a contest through the eligibility guard."""
        return self.submission_guard.submit(contest_id, uploader_id, fields)

    def list_contests(
        self, status: ContestStatus | str | None = None
    ) -> list[ContestSummary]:
        """Return contests with entry counts and creator names."""
        try:
            status_filter = ContestStatus(status) if status else None
        except ValueError:
            raise InvalidStatusTransitionError(
                f"Unknown contest status: {status}"
            ) from None
        contests = self.repository.list_contests(status_filter)
        names = self._creator_names(contests)
        return [
            ContestSummary(
                contest=contest,
                entry_count=self.photo_repository.count_contest_entries(contest.id),
                creator_name=names.get(contest.created_by, "Unknown"),
            )
            for contest in contests
        ]

    def get_details(self, contest_id: UUID) -> ContestDetails | None:
        """Return a contest with all of its entries, or None."""
        contest = self.repository.get_contest(contest_id)
        if contest is None:
            return None
        entries = self.photo_repository.list_photos(contest_id=contest_id)
        return ContestDetails(
            contest=contest,
            creator_name=self._creator_names([contest]).get(
                contest.created_by, "Unknown"
            ),
            entries=project_photos(
                entries, self.profile_repository, self.storage_client
            ),
        )

    def _creator_names(self, contests: list[Contest]) -> dict[UUID, str]:
        creator_ids = list({contest.created_by for contest in contests})
        if not creator_ids:
            return {}
        return {
            profile.id: profile.display_name
            for profile in self.profile_repository.get_profiles(creator_ids)
        }
