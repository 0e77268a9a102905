"""Domain models for members and their profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from photo_contest.domain.photos import PhotoView


@dataclass(frozen=True)
class Identity:
    """Authenticated principal issued by the auth provider."""

    id: str
    email: str | None


@dataclass(frozen=True)
class Profile:
    """Application-level member record."""

    id: UUID
    auth_user_id: str | None
    email: str
    name: str | None
    first_name: str | None
    last_name: str | None
    bio: str | None
    profile_picture: str | None
    xp: int
    level: int
    is_admin: bool
    joined_at: datetime | None

    @property
    def display_name(self) -> str:
        """Name shown next to photos and contests."""
        return self.name or "Anonymous"


@dataclass(frozen=True)
class Award:
    """Trophy, medal or badge granted to a member."""

    id: UUID
    profile_id: UUID
    type: str
    name: str
    description: str
    icon: str
    awarded_at: datetime
    contest_id: UUID | None = None


@dataclass(frozen=True)
class CallerContext:
    """Identity and resolved profile of the current request."""

    identity: Identity | None
    profile: Profile | None

    @property
    def profile_id(self) -> UUID | None:
        return self.profile.id if self.profile else None


@dataclass(frozen=True)
class UserProfilePage:
    """Public profile with photos, awards and best work."""

    profile: Profile
    profile_picture_url: str | None
    photos: list[PhotoView]
    awards: list[Award]
    top_photos: list[PhotoView]

    @property
    def photo_count(self) -> int:
        return len(self.photos)
