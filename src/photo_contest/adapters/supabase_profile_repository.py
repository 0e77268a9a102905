"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.profiles import Profile
from photo_contest.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(profile_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile registered with an email, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def get_profiles(self, profile_ids: list[UUID]) -> list[Profile]:
        """Return the profiles with the given ids."""
        response = (
            self.client.table("profiles")
            .select("*")
            .in_("id", [str(profile_id) for profile_id in profile_ids])
            .execute()
        )
        return [_parse_profile(row) for row in response.data or []]

    def create_profile(self, payload: dict[str, object]) -> Profile:
        """Create a profile row and return it."""
        response = self.client.table("profiles").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_profile(response.data[0])

    def update_profile(self, profile_id: UUID, payload: dict[str, object]) -> Profile:
        """Patch a profile row and return it."""
        response = (
            self.client.table("profiles")
            .update(payload)
            .eq("id", str(profile_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile")
        return _parse_profile(response.data[0])

    def set_experience(self, profile_id: UUID, xp: int, level: int) -> None:
        """Store a new experience total and level."""
        self.client.table("profiles").update({"xp": xp, "level": level}).eq(
            "id", str(profile_id)
        ).execute()

    def list_top_by_xp(self, limit: int) -> list[Profile]:
        """Return profiles ordered by experience, highest first."""
        response = (
            self.client.table("profiles")
            .select("*")
            .order("xp", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_profile(row) for row in response.data or []]


def _parse_profile(row: dict[str, object]) -> Profile:
    joined_raw = row.get("joined_at")
    joined_at = (
        datetime.fromisoformat(joined_raw)
        if isinstance(joined_raw, str) and joined_raw
        else None
    )
    return Profile(
        id=UUID(str(row["id"])),
        auth_user_id=row.get("auth_user_id"),
        email=str(row.get("email", "")),
        name=row.get("name"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        bio=row.get("bio"),
        profile_picture=row.get("profile_picture"),
        xp=int(row.get("xp") or 0),
        level=int(row.get("level") or 1),
        is_admin=bool(row.get("is_admin") or False),
        joined_at=joined_at,
    )
