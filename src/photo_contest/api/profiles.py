"""Profile, experience and leaderboard endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from photo_contest.api.dependencies import (
    get_caller,
    get_container,
    get_identity,
    require_admin,
    require_profile,
)
from photo_contest.api.schemas import (
    CreateProfileRequest,
    GrantXpRequest,
    UpdateProfileRequest,
)
from photo_contest.api.serializers import (
    serialize_profile,
    serialize_profile_page,
    serialize_transaction,
)
from photo_contest.containers import AppContainer
from photo_contest.domain.profiles import CallerContext, Identity, Profile

router = APIRouter(tags=["profiles"])


@router.post("/profiles")
async def create_profile(
    payload: CreateProfileRequest,
    identity: Identity | None = Depends(get_identity),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create the caller's profile on first sign-in."""
    profile = container.profile_service.ensure_profile(
        identity,
        name=payload.name,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return serialize_profile(profile)


@router.get("/profiles/me")
async def my_profile(profile: Profile = Depends(require_profile)) -> dict[str, object]:
    """Return the caller's own profile."""
    return serialize_profile(profile)


@router.patch("/profiles/me")
async def update_my_profile(
    payload: UpdateProfileRequest,
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Edit the caller's names, bio or picture."""
    profile = container.profile_service.update_profile(
        caller,
        name=payload.name,
        first_name=payload.first_name,
        last_name=payload.last_name,
        bio=payload.bio,
        profile_picture=payload.profile_picture,
    )
    return serialize_profile(profile)


@router.get("/profiles/me/xp")
async def my_xp_history(
    limit: int = Query(default=20, ge=1),
    profile: Profile = Depends(require_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's recent experience transactions."""
    transactions = container.experience_ledger.history(profile.id, limit)
    return {"transactions": [serialize_transaction(item) for item in transactions]}


@router.get("/profiles/{profile_id}")
async def user_profile(
    profile_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a member's public page."""
    page = container.community_service.get_user_profile(profile_id)
    if page is None:
        raise HTTPException(status_code=404, detail="User not found")
    return serialize_profile_page(page)


@router.post("/profiles/{profile_id}/xp", dependencies=[Depends(require_admin)])
async def grant_xp(
    profile_id: UUID,
    payload: GrantXpRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Adjust a member's experience; admins only."""
    grant = container.experience_ledger.grant(
        profile_id, payload.amount, payload.reason, payload.related_id
    )
    return {"new_xp": grant.new_xp, "new_level": grant.new_level}


@router.get("/leaderboard")
async def leaderboard(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the members with the most experience."""
    profiles = container.community_service.get_leaderboard()
    return {"profiles": [serialize_profile(profile) for profile in profiles]}
