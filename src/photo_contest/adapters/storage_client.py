"""Object storage adapter for photo images."""

from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from supabase import Client

from photo_contest.domain.photos import UploadHandle


class StorageClient(Protocol):
    """Interface for the binary object store."""

    def issue_upload_handle(self) -> UploadHandle:
        """Return a signed destination for a direct client upload."""

    def resolve_url(self, ref: str) -> str | None:
        """Return a URL the client can fetch a stored object from."""


@dataclass
class SupabaseStorageClient(StorageClient):
    """Storage client backed by a Supabase Storage bucket."""

    client: Client
    bucket: str
    signed_url_ttl_seconds: int = 3600

    def issue_upload_handle(self) -> UploadHandle:
        """Create a signed upload URL for a fresh object path."""
        path = f"uploads/{uuid4()}"
        response = self.client.storage.from_(self.bucket).create_signed_upload_url(
            path
        )
        upload_url = response.get("signed_url") or response.get("signedUrl")
        if not upload_url:
            raise RuntimeError("Failed to create signed upload URL")
        return UploadHandle(
            upload_url=str(upload_url),
            path=str(response.get("path") or path),
            token=response.get("token"),
        )

    def resolve_url(self, ref: str) -> str | None:
        """Return a time-limited signed URL for an object path."""
        if not ref:
            return None
        response = self.client.storage.from_(self.bucket).create_signed_url(
            ref, self.signed_url_ttl_seconds
        )
        url = response.get("signedURL") or response.get("signedUrl")
        return str(url) if url else None
