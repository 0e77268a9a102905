"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_contest.adapters.identity_provider import (
    IdentityProvider,
    SupabaseIdentityProvider,
)
from photo_contest.adapters.storage_client import StorageClient, SupabaseStorageClient
from photo_contest.adapters.supabase_award_repository import SupabaseAwardRepository
from photo_contest.adapters.supabase_contest_repository import (
    SupabaseContestRepository,
)
from photo_contest.adapters.supabase_experience_repository import (
    SupabaseExperienceRepository,
)
from photo_contest.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_contest.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from photo_contest.adapters.supabase_rating_repository import (
    SupabaseRatingRepository,
)
from photo_contest.config import Settings
from photo_contest.services.community import AwardRepository, CommunityService
from photo_contest.services.contests import ContestRepository, ContestService
from photo_contest.services.experience import ExperienceLedger, ExperienceRepository
from photo_contest.services.photos import PhotoRepository, PhotoService
from photo_contest.services.profiles import ProfileRepository, ProfileService
from photo_contest.services.ratings import RatingRepository, RatingService
from photo_contest.services.submissions import SubmissionGuard


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    storage_client: StorageClient
    profile_service: ProfileService
    experience_ledger: ExperienceLedger
    rating_service: RatingService
    photo_service: PhotoService
    contest_service: ContestService
    community_service: CommunityService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    rating_repository = SupabaseRatingRepository(supabase_client)
    contest_repository = SupabaseContestRepository(supabase_client)
    experience_repository = SupabaseExperienceRepository(supabase_client)
    award_repository = SupabaseAwardRepository(supabase_client)
    identity_provider = SupabaseIdentityProvider(supabase_client)
    storage_client = SupabaseStorageClient(
        client=supabase_client,
        bucket=resolved_settings.storage_bucket,
        signed_url_ttl_seconds=resolved_settings.signed_url_ttl_seconds,
    )
    return assemble_container(
        settings=resolved_settings,
        identity_provider=identity_provider,
        storage_client=storage_client,
        profile_repository=profile_repository,
        photo_repository=photo_repository,
        rating_repository=rating_repository,
        contest_repository=contest_repository,
        experience_repository=experience_repository,
        award_repository=award_repository,
    )


def assemble_container(  # noqa: PLR0913
    *,
    settings: Settings,
    identity_provider: IdentityProvider,
    storage_client: StorageClient,
    profile_repository: ProfileRepository,
    photo_repository: PhotoRepository,
    rating_repository: RatingRepository,
    contest_repository: ContestRepository,
    experience_repository: ExperienceRepository,
    award_repository: AwardRepository,
) -> AppContainer:
    """Wire services on top of the given adapters."""
    profile_service = ProfileService(profile_repository)
    ledger = ExperienceLedger(
        profile_repository=profile_repository,
        transaction_repository=experience_repository,
    )
    rating_service = RatingService(
        repository=rating_repository,
        photo_repository=photo_repository,
        ledger=ledger,
    )
    photo_service = PhotoService(
        repository=photo_repository,
        rating_repository=rating_repository,
        profile_repository=profile_repository,
        storage_client=storage_client,
        ledger=ledger,
    )
    submission_guard = SubmissionGuard(
        contest_repository=contest_repository,
        photo_repository=photo_repository,
        ledger=ledger,
    )
    contest_service = ContestService(
        repository=contest_repository,
        photo_repository=photo_repository,
        profile_repository=profile_repository,
        profile_service=profile_service,
        storage_client=storage_client,
        submission_guard=submission_guard,
    )
    community_service = CommunityService(
        profile_repository=profile_repository,
        photo_repository=photo_repository,
        award_repository=award_repository,
        storage_client=storage_client,
        leaderboard_size=settings.leaderboard_size,
    )
    return AppContainer(
        settings=settings,
        identity_provider=identity_provider,
        storage_client=storage_client,
        profile_service=profile_service,
        experience_ledger=ledger,
        rating_service=rating_service,
        photo_service=photo_service,
        contest_service=contest_service,
        community_service=community_service,
    )
