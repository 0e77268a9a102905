"""Pydantic models for API request bodies."""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateProfileRequest(BaseModel):
    """Profile details captured on first sign-in."""

    name: str = Field(min_length=1)
    first_name: str | None = None
    last_name: str | None = None


class UpdateProfileRequest(BaseModel):
    """Self-service profile edits."""

    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    profile_picture: str | None = None


class PhotoRequest(BaseModel):
    """Photo metadata attached to an uploaded image."""

    title: str
    description: str = ""
    image_ref: str
    category: str
    is_public: bool = True
    tags: list[str] = Field(default_factory=list)


class RatePhotoRequest(BaseModel):
    """Three-criterion rating."""

    creativity: float
    technical: float
    emotional: float


class CreateContestRequest(BaseModel):
    """Contest definition submitted by an admin."""

    name: str
    theme: str
    description: str = ""
    deadline: datetime
    entry_limit: int = Field(default=0, ge=0)
    is_minichallenge: bool = False
    xp_reward: int = Field(default=0, ge=0)


class UpdateContestStatusRequest(BaseModel):
    """New contest status."""

    status: str


class GrantXpRequest(BaseModel):
    """Manual experience adjustment."""

    amount: int
    reason: str
    related_id: str | None = None
