"""Photo upload, listing and deletion."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_contest.adapters.storage_client import StorageClient
from photo_contest.domain.experience import UPLOAD_XP
from photo_contest.domain.photos import Photo, PhotoFields, PhotoView, UploadHandle
from photo_contest.errors import NotFoundError, OwnershipError
from photo_contest.services.experience import ExperienceLedger
from photo_contest.services.profiles import ProfileRepository
from photo_contest.services.ratings import RatingRepository

_logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
DEFAULT_TOP_RATED = 10


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def create_photo(
        self, owner_id: UUID, fields: PhotoFields, contest_id: UUID | None
    ) -> Photo:
        """Create a photo row and return it."""

    def get_photo(self, photo_id: UUID) -> Photo | None:
        """Return a photo by id, if present."""

    def find_contest_entry(self, contest_id: UUID, owner_id: UUID) -> Photo | None:
        """Return the owner's entry in a contest, if any."""

    def list_photos(
        self,
        *,
        category: str | None = None,
        contest_id: UUID | None = None,
        owner_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[Photo]:
        """Return photos matching one filter, most recent first."""

    def count_contest_entries(self, contest_id: UUID) -> int:
        """Return the number of photos submitted to a contest."""

    def list_top_rated(self, limit: int) -> list[Photo]:
        """Return rated public photos, best average first."""

    def list_public_by_owner(self, owner_id: UUID) -> list[Photo]:
        """Return an owner's public photos."""

    def update_rating_stats(
        self, photo_id: UUID, average_rating: float, total_ratings: int
    ) -> None:
        """Store the rating aggregate of a photo."""

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo row."""


def project_photos(
    photos: list[Photo],
    profile_repository: ProfileRepository,
    storage_client: StorageClient,
) -> list[PhotoView]:
    """Annotate photos with their image URL and uploader name."""
    owner_ids = list({photo.uploaded_by for photo in photos})
    profiles = profile_repository.get_profiles(owner_ids) if owner_ids else []
    names = {profile.id: profile.display_name for profile in profiles}
    return [
        PhotoView(
            photo=photo,
            image_url=storage_client.resolve_url(photo.image_ref),
            uploader_name=names.get(photo.uploaded_by, "Unknown"),
        )
        for photo in photos
    ]


@dataclass
class PhotoService:
    """Application service for the photo lifecycle."""

    repository: PhotoRepository
    rating_repository: RatingRepository
    profile_repository: ProfileRepository
    storage_client: StorageClient
    ledger: ExperienceLedger

    def issue_upload_handle(self) -> UploadHandle:
        """Return a storage handle for the first phase of an upload."""
        return self.storage_client.issue_upload_handle()

    def upload(self, owner_id: UUID, fields: PhotoFields) -> UUID:
        """Store a photo outside any contest and reward the uploader."""
        photo = self.repository.create_photo(owner_id, fields, contest_id=None)
        self.ledger.grant(owner_id, UPLOAD_XP, "Photo upload", str(photo.id))
        return photo.id

    def list_photos(  # noqa: PLR0913
        self,
        category: str | None = None,
        contest_id: UUID | None = None,
        owner_id: UUID | None = None,
        limit: int | None = None,
        caller_id: UUID | None = None,
    ) -> list[PhotoView]:
        """List photos by category, contest or owner, newest first."""
        page_size = limit or DEFAULT_PAGE_SIZE
        if category:
            photos = self.repository.list_photos(category=category, limit=page_size)
        elif contest_id:
            photos = self.repository.list_photos(contest_id=contest_id, limit=page_size)
        elif owner_id:
            photos = self.repository.list_photos(owner_id=owner_id, limit=page_size)
        else:
            photos = self.repository.list_photos(limit=page_size)
        visible = [photo for photo in photos if _is_visible(photo, caller_id)]
        return self._project(visible)

    def top_rated(self, limit: int | None = None) -> list[PhotoView]:
        """Return the best rated public photos."""
        photos = self.repository.list_top_rated(limit or DEFAULT_TOP_RATED)
        return self._project([photo for photo in photos if photo.is_public])

    def delete(self, photo_id: UUID, caller_id: UUID) -> bool:
        """Delete an owned photo with its ratings and take back the upload XP."""
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")
        if photo.uploaded_by != caller_id:
            raise OwnershipError("You can only delete your own photos")

        self.rating_repository.delete_ratings(photo_id)
        self.repository.delete_photo(photo_id)
        self.ledger.grant(photo.uploaded_by, -UPLOAD_XP, "Photo deleted", str(photo_id))
        _logger.info("Deleted photo %s of profile %s", photo_id, caller_id)
        return True

    def _project(self, photos: list[Photo]) -> list[PhotoView]:
        return project_photos(photos, self.profile_repository, self.storage_client)


def _is_visible(photo: Photo, caller_id: UUID | None) -> bool:
    return photo.is_public or (caller_id is not None and photo.uploaded_by == caller_id)
