"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from photo_contest.adapters.identity_provider import IdentityProvider
from photo_contest.adapters.storage_client import StorageClient
from photo_contest.config import Settings
from photo_contest.containers import AppContainer, assemble_container
from photo_contest.domain.contests import Contest, ContestFields, ContestStatus
from photo_contest.domain.experience import ExperienceTransaction
from photo_contest.domain.photos import Photo, PhotoFields, UploadHandle
from photo_contest.domain.profiles import Award, Identity, Profile
from photo_contest.domain.ratings import Rating, RatingScores
from photo_contest.services.community import AwardRepository
from photo_contest.services.contests import ContestRepository
from photo_contest.services.experience import ExperienceRepository
from photo_contest.services.photos import PhotoRepository
from photo_contest.services.profiles import ProfileRepository
from photo_contest.services.ratings import RatingRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def add(
        self,
        email: str,
        name: str | None = None,
        xp: int = 0,
        is_admin: bool = False,
    ) -> Profile:
        profile = Profile(
            id=uuid4(),
            auth_user_id=f"auth-{email}",
            email=email,
            name=name,
            first_name=None,
            last_name=None,
            bio=None,
            profile_picture=None,
            xp=xp,
            level=xp // 100 + 1,
            is_admin=is_admin,
            joined_at=datetime.now(tz=UTC),
        )
        self.profiles[profile.id] = profile
        return profile

    def get_profile(self, profile_id: UUID) -> Profile | None:
        return self.profiles.get(profile_id)

    def get_by_email(self, email: str) -> Profile | None:
        for profile in self.profiles.values():
            if profile.email == email:
                return profile
        return None

    def get_profiles(self, profile_ids: list[UUID]) -> list[Profile]:
        return [self.profiles[pid] for pid in profile_ids if pid in self.profiles]

    def create_profile(self, payload: dict[str, object]) -> Profile:
        profile = Profile(
            id=uuid4(),
            auth_user_id=payload.get("auth_user_id"),
            email=str(payload["email"]),
            name=payload.get("name"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            bio=None,
            profile_picture=None,
            xp=int(payload.get("xp", 0)),
            level=int(payload.get("level", 1)),
            is_admin=bool(payload.get("is_admin", False)),
            joined_at=datetime.now(tz=UTC),
        )
        self.profiles[profile.id] = profile
        return profile

    def update_profile(self, profile_id: UUID, payload: dict[str, object]) -> Profile:
        updated = replace(self.profiles[profile_id], **payload)
        self.profiles[profile_id] = updated
        return updated

    def set_experience(self, profile_id: UUID, xp: int, level: int) -> None:
        self.profiles[profile_id] = replace(
            self.profiles[profile_id], xp=xp, level=level
        )

    def list_top_by_xp(self, limit: int) -> list[Profile]:
        return sorted(self.profiles.values(), key=lambda p: p.xp, reverse=True)[
            :limit
        ]


@dataclass
class InMemoryExperienceRepository(ExperienceRepository):
    """In-memory experience ledger for tests."""

    transactions: list[ExperienceTransaction] = field(default_factory=list)

    def create_transaction(
        self, profile_id: UUID, amount: int, reason: str, related_id: str | None
    ) -> ExperienceTransaction:
        transaction = ExperienceTransaction(
            id=uuid4(),
            profile_id=profile_id,
            amount=amount,
            reason=reason,
            related_id=related_id,
            created_at=datetime.now(tz=UTC),
        )
        self.transactions.append(transaction)
        return transaction

    def list_transactions(
        self, profile_id: UUID, limit: int
    ) -> list[ExperienceTransaction]:
        rows = [t for t in self.transactions if t.profile_id == profile_id]
        return list(reversed(rows))[:limit]


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests; insertion order is upload order."""

    photos: dict[UUID, Photo] = field(default_factory=dict)

    def create_photo(
        self, owner_id: UUID, fields: PhotoFields, contest_id: UUID | None
    ) -> Photo:
        photo = Photo(
            id=uuid4(),
            title=fields.title,
            description=fields.description,
            image_ref=fields.image_ref,
            category=fields.category,
            tags=list(fields.tags),
            uploaded_by=owner_id,
            uploaded_at=datetime.now(tz=UTC),
            contest_id=contest_id,
            average_rating=None,
            total_ratings=0,
            is_public=fields.is_public,
        )
        self.photos[photo.id] = photo
        return photo

    def get_photo(self, photo_id: UUID) -> Photo | None:
        return self.photos.get(photo_id)

    def find_contest_entry(self, contest_id: UUID, owner_id: UUID) -> Photo | None:
        for photo in self.photos.values():
            if photo.contest_id == contest_id and photo.uploaded_by == owner_id:
                return photo
        return None

    def list_photos(
        self,
        *,
        category: str | None = None,
        contest_id: UUID | None = None,
        owner_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[Photo]:
        photos = list(reversed(self.photos.values()))
        if category:
            photos = [p for p in photos if p.category == category]
        elif contest_id:
            photos = [p for p in photos if p.contest_id == contest_id]
        elif owner_id:
            photos = [p for p in photos if p.uploaded_by == owner_id]
        return photos[:limit] if limit is not None else photos

    def count_contest_entries(self, contest_id: UUID) -> int:
        return sum(1 for p in self.photos.values() if p.contest_id == contest_id)

    def list_top_rated(self, limit: int) -> list[Photo]:
        rated = [
            p
            for p in self.photos.values()
            if p.is_public and p.average_rating is not None
        ]
        return sorted(rated, key=lambda p: p.average_rating, reverse=True)[:limit]

    def list_public_by_owner(self, owner_id: UUID) -> list[Photo]:
        return [
            p
            for p in reversed(self.photos.values())
            if p.uploaded_by == owner_id and p.is_public
        ]

    def update_rating_stats(
        self, photo_id: UUID, average_rating: float, total_ratings: int
    ) -> None:
        self.photos[photo_id] = replace(
            self.photos[photo_id],
            average_rating=average_rating,
            total_ratings=total_ratings,
        )

    def delete_photo(self, photo_id: UUID) -> None:
        self.photos.pop(photo_id, None)


@dataclass
class InMemoryRatingRepository(RatingRepository):
    """In-memory rating repository for tests."""

    ratings: list[Rating] = field(default_factory=list)

    def get_rating(self, photo_id: UUID, rater_id: UUID) -> Rating | None:
        for rating in self.ratings:
            if rating.photo_id == photo_id and rating.rater_id == rater_id:
                return rating
        return None

    def create_rating(
        self, photo_id: UUID, rater_id: UUID, scores: RatingScores
    ) -> Rating:
        rating = Rating(
            id=uuid4(),
            photo_id=photo_id,
            rater_id=rater_id,
            creativity=scores.creativity,
            technical=scores.technical,
            emotional=scores.emotional,
            overall=scores.overall,
            rated_at=datetime.now(tz=UTC),
        )
        self.ratings.append(rating)
        return rating

    def list_ratings(self, photo_id: UUID) -> list[Rating]:
        return [r for r in self.ratings if r.photo_id == photo_id]

    def delete_ratings(self, photo_id: UUID) -> None:
        self.ratings = [r for r in self.ratings if r.photo_id != photo_id]


@dataclass
class InMemoryContestRepository(ContestRepository):
    """In-memory contest repository for tests."""

    contests: dict[UUID, Contest] = field(default_factory=dict)

    def create_contest(self, creator_id: UUID, fields: ContestFields) -> Contest:
        contest = Contest(
            id=uuid4(),
            name=fields.name,
            theme=fields.theme,
            description=fields.description,
            deadline=fields.deadline,
            entry_limit=fields.entry_limit,
            created_by=creator_id,
            created_at=datetime.now(tz=UTC),
            status=ContestStatus.ACTIVE,
            is_minichallenge=fields.is_minichallenge,
            xp_reward=fields.xp_reward,
        )
        self.contests[contest.id] = contest
        return contest

    def get_contest(self, contest_id: UUID) -> Contest | None:
        return self.contests.get(contest_id)

    def list_contests(self, status: ContestStatus | None) -> list[Contest]:
        contests = list(reversed(self.contests.values()))
        if status is not None:
            contests = [c for c in contests if c.status is status]
        return contests

    def update_status(self, contest_id: UUID, status: ContestStatus) -> None:
        self.contests[contest_id] = replace(self.contests[contest_id], status=status)


@dataclass
class InMemoryAwardRepository(AwardRepository):
    """In-memory award repository for tests."""

    awards: list[Award] = field(default_factory=list)

    def list_awards(self, profile_id: UUID) -> list[Award]:
        return [a for a in self.awards if a.profile_id == profile_id]


@dataclass
class FakeStorageClient(StorageClient):
    """Fake storage that signs nothing."""

    issued: list[UploadHandle] = field(default_factory=list)

    def issue_upload_handle(self) -> UploadHandle:
        handle = UploadHandle(
            upload_url=f"https://storage.test/upload/{len(self.issued)}",
            path=f"uploads/{uuid4()}",
            token="upload-token",
        )
        self.issued.append(handle)
        return handle

    def resolve_url(self, ref: str) -> str | None:
        return f"https://storage.test/{ref}" if ref else None


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Maps bearer tokens to identities."""

    identities: dict[str, Identity] = field(default_factory=dict)

    def current_identity(self, token: str) -> Identity | None:
        return self.identities.get(token)


def make_photo_fields(title: str = "Sunset", **overrides: object) -> PhotoFields:
    values: dict[str, object] = {
        "title": title,
        "description": "Golden hour",
        "image_ref": f"uploads/{title.lower()}",
        "category": "landscape",
        "is_public": True,
    }
    values.update(overrides)
    return PhotoFields(**values)


def make_contest_fields(**overrides: object) -> ContestFields:
    values: dict[str, object] = {
        "name": "Blue Hour",
        "theme": "Twilight",
        "description": "City lights at dusk",
        "deadline": datetime.now(tz=UTC) + timedelta(hours=1),
        "entry_limit": 2,
        "is_minichallenge": False,
        "xp_reward": 50,
    }
    values.update(overrides)
    return ContestFields(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def rating_repository() -> InMemoryRatingRepository:
    return InMemoryRatingRepository()


@pytest.fixture
def contest_repository() -> InMemoryContestRepository:
    return InMemoryContestRepository()


@pytest.fixture
def experience_repository() -> InMemoryExperienceRepository:
    return InMemoryExperienceRepository()


@pytest.fixture
def award_repository() -> InMemoryAwardRepository:
    return InMemoryAwardRepository()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    identity_provider: FakeIdentityProvider,
    profile_repository: InMemoryProfileRepository,
    photo_repository: InMemoryPhotoRepository,
    rating_repository: InMemoryRatingRepository,
    contest_repository: InMemoryContestRepository,
    experience_repository: InMemoryExperienceRepository,
    award_repository: InMemoryAwardRepository,
) -> AppContainer:
    return assemble_container(
        settings=settings,
        identity_provider=identity_provider,
        storage_client=FakeStorageClient(),
        profile_repository=profile_repository,
        photo_repository=photo_repository,
        rating_repository=rating_repository,
        contest_repository=contest_repository,
        experience_repository=experience_repository,
        award_repository=award_repository,
    )
