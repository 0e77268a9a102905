"""Photo and rating endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from photo_contest.api.dependencies import get_caller, get_container, require_profile
from photo_contest.api.schemas import PhotoRequest, RatePhotoRequest
from photo_contest.api.serializers import (
    serialize_photo_ratings,
    serialize_photo_view,
)
from photo_contest.containers import AppContainer
from photo_contest.domain.photos import PhotoFields
from photo_contest.domain.profiles import CallerContext, Profile
from photo_contest.domain.ratings import RatingScores

router = APIRouter(prefix="/photos", tags=["photos"])


@router.post("/upload-url")
async def upload_url(
    _profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Issue a signed destination for image bytes."""
    handle = container.photo_service.issue_upload_handle()
    return {"upload_url": handle.upload_url, "path": handle.path, "token": handle.token}


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_photo(
    payload: PhotoRequest,
    profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Attach metadata to an uploaded image."""
    photo_id = container.photo_service.upload(
        profile.id,
        PhotoFields(
            title=payload.title,
            description=payload.description,
            image_ref=payload.image_ref,
            category=payload.category,
            is_public=payload.is_public,
            tags=payload.tags,
        ),
    )
    return {"id": str(photo_id)}


@router.get("")
async def list_photos(  # noqa: PLR0913
    category: str | None = None,
    contest_id: UUID | None = None,
    owner_id: UUID | None = None,
    limit: int | None = Query(default=None, ge=1),
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return photos by category, contest or owner."""
    views = container.photo_service.list_photos(
        category=category,
        contest_id=contest_id,
        owner_id=owner_id,
        limit=limit,
        caller_id=caller.profile_id,
    )
    return {"photos": [serialize_photo_view(view) for view in views]}


@router.get("/top-rated")
async def top_rated(
    limit: int | None = Query(default=None, ge=1),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the best rated public photos."""
    views = container.photo_service.top_rated(limit)
    return {"photos": [serialize_photo_view(view) for view in views]}


@router.delete("/{photo_id}")
async def delete_photo(
    photo_id: UUID,
    profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete one of the caller's photos."""
    return {"deleted": container.photo_service.delete(photo_id, profile.id)}


@router.post("/{photo_id}/ratings")
async def rate_photo(
    photo_id: UUID,
    payload: RatePhotoRequest,
    profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rate another member's photo."""
    summary = container.rating_service.submit_rating(
        photo_id,
        profile.id,
        RatingScores(
            creativity=payload.creativity,
            technical=payload.technical,
            emotional=payload.emotional,
        ),
    )
    return {
        "average_rating": summary.average_rating,
        "total_ratings": summary.total_ratings,
    }


@router.get("/{photo_id}/ratings")
async def photo_ratings(
    photo_id: UUID,
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the rating breakdown of a photo."""
    ratings = container.rating_service.get_photo_ratings(
        photo_id, caller_id=caller.profile_id
    )
    return serialize_photo_ratings(ratings)
