"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.photos import Photo, PhotoFields
from photo_contest.services.photos import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def create_photo(
        self, owner_id: UUID, fields: PhotoFields, contest_id: UUID | None
    ) -> Photo:
        """Create a photo row and return it."""
        response = (
            self.client.table("photos")
            .insert(
                {
                    "title": fields.title,
                    "description": fields.description,
                    "image_ref": fields.image_ref,
                    "category": fields.category,
                    "tags": list(fields.tags),
                    "uploaded_by": str(owner_id),
                    "contest_id": str(contest_id) if contest_id else None,
                    "total_ratings": 0,
                    "is_public": fields.is_public,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create photo")
        return _parse_photo(response.data[0])

    def get_photo(self, photo_id: UUID) -> Photo | None:
        """Return a photo by id, if present."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("id", str(photo_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def find_contest_entry(self, contest_id: UUID, owner_id: UUID) -> Photo | None:
        """Return the owner's entry in a contest, if any."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("contest_id", str(contest_id))
            .eq("uploaded_by", str(owner_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def list_photos(
        self,
        *,
        category: str | None = None,
        contest_id: UUID | None = None,
        owner_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[Photo]:
        """Return photos matching one filter, most recent first."""
        query = self.client.table("photos").select("*")
        if category:
            query = query.eq("category", category)
        elif contest_id:
            query = query.eq("contest_id", str(contest_id))
        elif owner_id:
            query = query.eq("uploaded_by", str(owner_id))
        query = query.order("uploaded_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_photo(row) for row in response.data or []]

    def count_contest_entries(self, contest_id: UUID) -> int:
        """Return the number of photos submitted to a contest."""
        response = (
            self.client.table("photos")
            .select("id")
            .eq("contest_id", str(contest_id))
            .execute()
        )
        return len(response.data or [])

    def list_top_rated(self, limit: int) -> list[Photo]:
        """Return rated public photos, best average first."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("is_public", True)
            .not_.is_("average_rating", "null")
            .order("average_rating", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def list_public_by_owner(self, owner_id: UUID) -> list[Photo]:
        """Return an owner's public photos."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("uploaded_by", str(owner_id))
            .eq("is_public", True)
            .order("uploaded_at", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def update_rating_stats(
        self, photo_id: UUID, average_rating: float, total_ratings: int
    ) -> None:
        """Store the rating aggregate of a photo."""
        self.client.table("photos").update(
            {"average_rating": average_rating, "total_ratings": total_ratings}
        ).eq("id", str(photo_id)).execute()

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo row."""
        self.client.table("photos").delete().eq("id", str(photo_id)).execute()


def _parse_photo(row: dict[str, object]) -> Photo:
    uploaded_raw = row.get("uploaded_at")
    uploaded_at = (
        datetime.fromisoformat(uploaded_raw)
        if isinstance(uploaded_raw, str) and uploaded_raw
        else datetime.min
    )
    contest_raw = row.get("contest_id")
    average_raw = row.get("average_rating")
    return Photo(
        id=UUID(str(row["id"])),
        title=str(row.get("title", "")),
        description=str(row.get("description", "")),
        image_ref=str(row.get("image_ref", "")),
        category=str(row.get("category", "")),
        tags=list(row.get("tags") or []),
        uploaded_by=UUID(str(row["uploaded_by"])),
        uploaded_at=uploaded_at,
        contest_id=UUID(str(contest_raw)) if contest_raw else None,
        average_rating=float(average_raw) if average_raw is not None else None,
        total_ratings=int(row.get("total_ratings") or 0),
        is_public=bool(row.get("is_public", True)),
    )
