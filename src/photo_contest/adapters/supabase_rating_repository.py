"""Supabase-backed rating repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.ratings import Rating, RatingScores
from photo_contest.services.ratings import RatingRepository


@dataclass
class SupabaseRatingRepository(RatingRepository):
    """Supabase implementation for rating persistence."""

    client: Client

    def get_rating(self, photo_id: UUID, rater_id: UUID) -> Rating | None:
        """Return the rater's rating of a photo, if any."""
        response = (
            self.client.table("ratings")
            .select("*")
            .eq("photo_id", str(photo_id))
            .eq("rater_id", str(rater_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_rating(response.data[0])

    def create_rating(
        self, photo_id: UUID, rater_id: UUID, scores: RatingScores
    ) -> Rating:
        """Create a rating row and return it."""
        response = (
            self.client.table("ratings")
            .insert(
                {
                    "photo_id": str(photo_id),
                    "rater_id": str(rater_id),
                    "creativity": scores.creativity,
                    "technical": scores.technical,
                    "emotional": scores.emotional,
                    "overall": scores.overall,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create rating")
        return _parse_rating(response.data[0])

    def list_ratings(self, photo_id: UUID) -> list[Rating]:
        """Return every rating of a photo."""
        response = (
            self.client.table("ratings")
            .select("*")
            .eq("photo_id", str(photo_id))
            .execute()
        )
        return [_parse_rating(row) for row in response.data or []]

    def delete_ratings(self, photo_id: UUID) -> None:
        """Delete every rating of a photo."""
        self.client.table("ratings").delete().eq("photo_id", str(photo_id)).execute()


def _parse_rating(row: dict[str, object]) -> Rating:
    rated_raw = row.get("rated_at")
    rated_at = (
        datetime.fromisoformat(rated_raw)
        if isinstance(rated_raw, str) and rated_raw
        else datetime.min
    )
    return Rating(
        id=UUID(str(row["id"])),
        photo_id=UUID(str(row["photo_id"])),
        rater_id=UUID(str(row["rater_id"])),
        creativity=float(row.get("creativity", 0.0)),
        technical=float(row.get("technical", 0.0)),
        emotional=float(row.get("emotional", 0.0)),
        overall=float(row.get("overall", 0.0)),
        rated_at=rated_at,
    )
