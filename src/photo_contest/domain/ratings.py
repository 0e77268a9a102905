"""Domain models for photo ratings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class RatingScores:
    """Three-criterion score given by a rater."""

    creativity: float
    technical: float
    emotional: float

    @property
    def overall(self) -> float:
        return (self.creativity + self.technical + self.emotional) / 3


@dataclass(frozen=True)
class Rating:
    """Stored rating row."""

    id: UUID
    photo_id: UUID
    rater_id: UUID
    creativity: float
    technical: float
    emotional: float
    overall: float
    rated_at: datetime


@dataclass(frozen=True)
class RatingSummary:
    """Photo aggregate after a rating was recorded."""

    average_rating: float
    total_ratings: int


@dataclass(frozen=True)
class RatingAverages:
    """Per-criterion averages over all ratings of a photo."""

    creativity: float
    technical: float
    emotional: float
    overall: float


@dataclass(frozen=True)
class PhotoRatings:
    """Rating breakdown of a photo, including the caller's own rating."""

    averages: RatingAverages
    total_ratings: int
    caller_rating: Rating | None
