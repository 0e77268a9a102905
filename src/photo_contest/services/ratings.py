"""Photo rating and rating aggregation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from photo_contest.domain.experience import RATING_XP
from photo_contest.domain.ratings import (
    MAX_SCORE,
    MIN_SCORE,
    PhotoRatings,
    Rating,
    RatingAverages,
    RatingScores,
    RatingSummary,
)
from photo_contest.errors import (
    DuplicateRatingError,
    InvalidRatingError,
    NotFoundError,
    SelfRatingError,
)

if TYPE_CHECKING:
    from uuid import UUID

    from photo_contest.services.experience import ExperienceLedger
    from photo_contest.services.photos import PhotoRepository

_logger = logging.getLogger(__name__)


class RatingRepository(Protocol):
    """Persistence interface for ratings."""

    def get_rating(self, photo_id: UUID, rater_id: UUID) -> Rating | None:
        """Return the rater's rating of a photo, if any."""

    def create_rating(
        self, photo_id: UUID, rater_id: UUID, scores: RatingScores
    ) -> Rating:
        """Create a rating row and return it."""

    def list_ratings(self, photo_id: UUID) -> list[Rating]:
        """Return every rating of a photo."""

    def delete_ratings(self, photo_id: UUID) -> None:
        """Delete every rating of a photo."""


@dataclass
class RatingService:
    """Record ratings and keep photo averages in sync."""

    repository: RatingRepository
    photo_repository: PhotoRepository
    ledger: ExperienceLedger

    def submit_rating(
        self, photo_id: UUID, rater_id: UUID, scores: RatingScores
    ) -> RatingSummary:
        """Rate a photo and return its recomputed aggregate."""
        _validate_scores(scores)
        if self.repository.get_rating(photo_id, rater_id):
            raise DuplicateRatingError("You have already rated this photo")
        photo = self.photo_repository.get_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")
        if photo.uploaded_by == rater_id:
            raise SelfRatingError("You cannot rate your own photo")

        self.repository.create_rating(photo_id, rater_id, scores)

        # Mean over every stored rating, not an incremental update.
        ratings = self.repository.list_ratings(photo_id)
        average_rating = sum(rating.overall for rating in ratings) / len(ratings)
        self.photo_repository.update_rating_stats(
            photo_id, average_rating, len(ratings)
        )
        self.ledger.grant(rater_id, RATING_XP, "Rating a photo", str(photo_id))
        _logger.info(
            "Photo %s rated by %s: average=%.3f total=%s",
            photo_id,
            rater_id,
            average_rating,
            len(ratings),
        )
        return RatingSummary(average_rating=average_rating, total_ratings=len(ratings))

    def get_photo_ratings(
        self, photo_id: UUID, caller_id: UUID | None = None
    ) -> PhotoRatings:
        """Return per-criterion averages and the caller's own rating."""
        ratings = self.repository.list_ratings(photo_id)
        caller_rating = None
        if caller_id is not None:
            caller_rating = next(
                (rating for rating in ratings if rating.rater_id == caller_id), None
            )
        return PhotoRatings(
            averages=RatingAverages(
                creativity=_mean([rating.creativity for rating in ratings]),
                technical=_mean([rating.technical for rating in ratings]),
                emotional=_mean([rating.emotional for rating in ratings]),
                overall=_mean([rating.overall for rating in ratings]),
            ),
            total_ratings=len(ratings),
            caller_rating=caller_rating,
        )


def _validate_scores(scores: RatingScores) -> None:
    for criterion in ("creativity", "technical", "emotional"):
        value = getattr(scores, criterion)
        if not MIN_SCORE <= value <= MAX_SCORE:
            raise InvalidRatingError(
                f"{criterion.capitalize()} score must be between "
                f"{MIN_SCORE} and {MAX_SCORE}"
            )


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)
