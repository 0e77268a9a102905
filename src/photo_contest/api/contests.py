"""Contest endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from photo_contest.api.dependencies import get_caller, get_container, require_profile
from photo_contest.api.schemas import (
    CreateContestRequest,
    PhotoRequest,
    UpdateContestStatusRequest,
)
from photo_contest.api.serializers import (
    serialize_contest_details,
    serialize_contest_summary,
)
from photo_contest.containers import AppContainer
from photo_contest.domain.contests import ContestFields, ContestStatus
from photo_contest.domain.photos import PhotoFields
from photo_contest.domain.profiles import CallerContext, Profile

router = APIRouter(prefix="/contests", tags=["contests"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_contest(
    payload: CreateContestRequest,
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Create a contest; admins only."""
    contest_id = container.contest_service.create(
        caller,
        ContestFields(
            name=payload.name,
            theme=payload.theme,
            description=payload.description,
            deadline=payload.deadline,
            entry_limit=payload.entry_limit,
            is_minichallenge=payload.is_minichallenge,
            xp_reward=payload.xp_reward,
        ),
    )
    return {"id": str(contest_id)}


@router.get("")
async def list_contests(
    status_filter: ContestStatus | None = Query(default=None, alias="status"),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return contests with entry counts."""
    summaries = container.contest_service.list_contests(status_filter)
    return {"contests": [serialize_contest_summary(item) for item in summaries]}


@router.get("/{contest_id}")
async def contest_details(
    contest_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a contest with its entries."""
    details = container.contest_service.get_details(contest_id)
    if details is None:
        raise HTTPException(status_code=404, detail="Contest not found")
    return serialize_contest_details(details)


@router.patch("/{contest_id}/status")
async def update_contest_status(
    contest_id: UUID,
    payload: UpdateContestStatusRequest,
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Move a contest to its next status; admins only."""
    updated_id = container.contest_service.set_status(
        caller, contest_id, payload.status
    )
    return {"id": str(updated_id)}


@router.post("/{contest_id}/entries", status_code=status.HTTP_201_CREATED)
async def submit_entry(
    contest_id: UUID,
    payload: PhotoRequest,
    profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Submit a photo to a contest."""
    photo_id = container.contest_service.submit_entry(
        contest_id,
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
