"""Domain models for photos."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PhotoFields:
    """Member-supplied fields of a new photo."""

    title: str
    description: str
    image_ref: str
    category: str
    is_public: bool = True
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Photo:
    """Stored photo record."""

    id: UUID
    title: str
    description: str
    image_ref: str
    category: str
    tags: list[str]
    uploaded_by: UUID
    uploaded_at: datetime
    contest_id: UUID | None
    average_rating: float | None
    total_ratings: int
    is_public: bool


@dataclass(frozen=True)
class PhotoView:
    """Photo projected for display with its image URL and uploader."""

    photo: Photo
    image_url: str | None
    uploader_name: str


@dataclass(frozen=True)
class UploadHandle:
    """Signed destination the client pushes image bytes to."""

    upload_url: str
    path: str
    token: str | None = None
