"""Supabase repository for the experience ledger."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_contest.domain.experience import ExperienceTransaction
from photo_contest.services.experience import ExperienceRepository


@dataclass
class SupabaseExperienceRepository(ExperienceRepository):
    """Supabase-backed experience transaction log."""

    client: Client

    def create_transaction(
        self, profile_id: UUID, amount: int, reason: str, related_id: str | None
    ) -> ExperienceTransaction:
        """Append a transaction row and return it."""
        response = (
            self.client.table("xp_transactions")
            .insert(
                {
                    "profile_id": str(profile_id),
                    "amount": amount,
                    "reason": reason,
                    "related_id": related_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to record XP transaction")
        return _parse_transaction(response.data[0])

    def list_transactions(
        self, profile_id: UUID, limit: int
    ) -> list[ExperienceTransaction]:
        """Return the latest transactions of a profile."""
        response = (
            self.client.table("xp_transactions")
            .select("*")
            .eq("profile_id", str(profile_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_transaction(row) for row in response.data or []]


def _parse_transaction(row: dict[str, object]) -> ExperienceTransaction:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min
    )
    return ExperienceTransaction(
        id=UUID(str(row["id"])),
        profile_id=UUID(str(row["profile_id"])),
        amount=int(row.get("amount", 0)),
        reason=str(row.get("reason", "")),
        related_id=row.get("related_id"),
        created_at=created_at,
    )
