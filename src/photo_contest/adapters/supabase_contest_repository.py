"""Supabase-backed contest repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.contests import Contest, ContestFields, ContestStatus
from photo_contest.services.contests import ContestRepository


@dataclass
class SupabaseContestRepository(ContestRepository):
    """Supabase implementation for contest persistence."""

    client: Client

    def create_contest(self, creator_id: UUID, fields: ContestFields) -> Contest:
        """Create an active contest and return it."""
        response = (
            self.client.table("contests")
            .insert(
                {
                    "name": fields.name,
                    "theme": fields.theme,
                    "description": fields.description,
                    "deadline": fields.deadline.isoformat(),
                    "entry_limit": fields.entry_limit,
                    "created_by": str(creator_id),
                    "status": ContestStatus.ACTIVE.value,
                    "is_minichallenge": fields.is_minichallenge,
                    "xp_reward": fields.xp_reward,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create contest")
        return _parse_contest(response.data[0])

    def get_contest(self, contest_id: UUID) -> Contest | None:
        """Return a contest by id, if present."""
        response = (
            self.client.table("contests")
            .select("*")
            .eq("id", str(contest_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_contest(response.data[0])

    def list_contests(self, status: ContestStatus | None) -> list[Contest]:
        """Return contests, newest first, optionally filtered by status."""
        query = self.client.table("contests").select("*")
        if status is not None:
            query = query.eq("status", status.value)
        response = query.order("created_at", desc=True).execute()
        return [_parse_contest(row) for row in response.data or []]

    def update_status(self, contest_id: UUID, status: ContestStatus) -> None:
        """Store a new contest status."""
        self.client.table("contests").update({"status": status.value}).eq(
            "id", str(contest_id)
        ).execute()


def _parse_contest(row: dict[str, object]) -> Contest:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min
    )
    return Contest(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        theme=str(row.get("theme", "")),
        description=str(row.get("description", "")),
        deadline=datetime.fromisoformat(str(row["deadline"])),
        entry_limit=int(row.get("entry_limit") or 0),
        created_by=UUID(str(row["created_by"])),
        created_at=created_at,
        status=ContestStatus(row.get("status", ContestStatus.ACTIVE.value)),
        is_minichallenge=bool(row.get("is_minichallenge") or False),
        xp_reward=int(row.get("xp_reward") or 0),
    )
