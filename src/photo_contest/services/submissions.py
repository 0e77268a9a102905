"""Contest eligibility checks for new entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from photo_contest.domain.contests import ContestStatus
from photo_contest.domain.experience import contest_submission_xp
from photo_contest.errors import (
    ContestClosedError,
    DeadlinePassedError,
    DuplicateEntryError,
    NotFoundError,
)

if TYPE_CHECKING:
    from uuid import UUID

    from photo_contest.domain.photos import PhotoFields
    from photo_contest.services.contests import ContestRepository
    from photo_contest.services.experience import ExperienceLedger
    from photo_contest.services.photos import PhotoRepository

_logger = logging.getLogger(__name__)


@dataclass
class SubmissionGuard:
    """Accept a photo into a contest only when the uploader is eligible."""

    contest_repository: ContestRepository
    photo_repository: PhotoRepository
    ledger: ExperienceLedger

    def submit(self, contest_id: UUID, uploader_id: UUID, fields: PhotoFields) -> UUID:
        """Store a contest entry and reward the uploader."""
        if self.photo_repository.find_contest_entry(contest_id, uploader_id):
            raise DuplicateEntryError(
                "You have already submitted a photo to this contest"
            )
        contest = self.contest_repository.get_contest(contest_id)
        if contest is None:
            raise NotFoundError("Contest not found")
        if contest.status is not ContestStatus.ACTIVE:
            raise ContestClosedError(
                "This contest is not currently accepting submissions"
            )
        if not contest.accepts_entries_at(datetime.now(tz=UTC)):
            raise DeadlinePassedError(
                "The submission deadline for this contest has passed"
            )

        photo = self.photo_repository.create_photo(
            uploader_id, fields, contest_id=contest_id
        )
        self.ledger.grant(
            uploader_id,
            contest_submission_xp(contest.xp_reward),
            "Contest submission",
            str(photo.id),
        )
        _logger.info(
            "Contest %s entry %s submitted by %s", contest_id, photo.id, uploader_id
        )
        return photo.id
