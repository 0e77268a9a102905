"""Public member pages and the experience leaderboard."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_contest.adapters.storage_client import StorageClient
from photo_contest.domain.profiles import Award, Profile, UserProfilePage
from photo_contest.services.photos import PhotoRepository, project_photos
from photo_contest.services.profiles import ProfileRepository

TOP_PHOTOS = 3


class AwardRepository(Protocol):
    """Persistence interface for member awards."""

    def list_awards(self, profile_id: UUID) -> list[Award]:
        """Return the awards of a profile."""


@dataclass
class CommunityService:
    """Read models shown to every visitor."""

    profile_repository: ProfileRepository
    photo_repository: PhotoRepository
    award_repository: AwardRepository
    storage_client: StorageClient
    leaderboard_size: int = 20

    def get_user_profile(self, profile_id: UUID) -> UserProfilePage | None:
        """Return a member's public page, or None for unknown ids."""
        profile = self.profile_repository.get_profile(profile_id)
        if profile is None:
            return None

        photos = project_photos(
            self.photo_repository.list_public_by_owner(profile_id),
            self.profile_repository,
            self.storage_client,
        )
        rated = [view for view in photos if view.photo.average_rating is not None]
        top_photos = sorted(
            rated, key=lambda view: view.photo.average_rating or 0.0, reverse=True
        )[:TOP_PHOTOS]
        picture_url = (
            self.storage_client.resolve_url(profile.profile_picture)
            if profile.profile_picture
            else None
        )
        return UserProfilePage(
            profile=profile,
            profile_picture_url=picture_url,
            photos=photos,
            awards=self.award_repository.list_awards(profile_id),
            top_photos=top_photos,
        )

    def get_leaderboard(self) -> list[Profile]:
        """Return the members with the most experience."""
        return self.profile_repository.list_top_by_xp(self.leaderboard_size)
