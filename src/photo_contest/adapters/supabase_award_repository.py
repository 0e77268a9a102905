"""Supabase repository for member awards."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.profiles import Award
from photo_contest.services.community import AwardRepository


@dataclass
class SupabaseAwardRepository(AwardRepository):
    """Supabase implementation for award queries."""

    client: Client

    def list_awards(self, profile_id: UUID) -> list[Award]:
        """Return the awards of a profile, newest first."""
        response = (
            self.client.table("awards")
            .select("*")
            .eq("profile_id", str(profile_id))
            .order("awarded_at", desc=True)
            .execute()
        )
        awards = []
        for row in response.data or []:
            contest_raw = row.get("contest_id")
            awards.append(
                Award(
                    id=UUID(str(row["id"])),
                    profile_id=UUID(str(row["profile_id"])),
                    type=str(row.get("type", "badge")),
                    name=str(row.get("name", "")),
                    description=str(row.get("description", "")),
                    icon=str(row.get("icon", "")),
                    awarded_at=datetime.fromisoformat(str(row["awarded_at"])),
                    contest_id=UUID(str(contest_raw)) if contest_raw else None,
                )
            )
        return awards
