"""JSON projections of domain objects."""

from photo_contest.domain.contests import Contest, ContestDetails, ContestSummary
from photo_contest.domain.experience import ExperienceTransaction
from photo_contest.domain.photos import PhotoView
from photo_contest.domain.profiles import Award, Profile, UserProfilePage
from photo_contest.domain.ratings import PhotoRatings, Rating


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "id": str(profile.id),
        "name": profile.display_name,
        "first_name": profile.first_name,
        "last_name": profile.last_name,
        "bio": profile.bio,
        "xp": profile.xp,
        "level": profile.level,
        "is_admin": profile.is_admin,
        "joined_at": profile.joined_at.isoformat() if profile.joined_at else None,
    }


def serialize_photo_view(view: PhotoView) -> dict[str, object]:
    photo = view.photo
    return {
        "id": str(photo.id),
        "title": photo.title,
        "description": photo.description,
        "category": photo.category,
        "tags": photo.tags,
        "image_url": view.image_url,
        "uploaded_by": str(photo.uploaded_by),
        "uploaded_at": photo.uploaded_at.isoformat(),
        "contest_id": str(photo.contest_id) if photo.contest_id else None,
        "average_rating": photo.average_rating,
        "total_ratings": photo.total_ratings,
        "is_public": photo.is_public,
        "user": {"id": str(photo.uploaded_by), "name": view.uploader_name},
    }


def serialize_contest(contest: Contest) -> dict[str, object]:
    return {
        "id": str(contest.id),
        "name": contest.name,
        "theme": contest.theme,
        "description": contest.description,
        "deadline": contest.deadline.isoformat(),
        "entry_limit": contest.entry_limit,
        "created_by": str(contest.created_by),
        "created_at": contest.created_at.isoformat(),
        "status": contest.status.value,
        "is_minichallenge": contest.is_minichallenge,
        "xp_reward": contest.xp_reward,
    }


def serialize_contest_summary(summary: ContestSummary) -> dict[str, object]:
    return {
        **serialize_contest(summary.contest),
        "entry_count": summary.entry_count,
        "creator": {"name": summary.creator_name},
    }


def serialize_contest_details(details: ContestDetails) -> dict[str, object]:
    return {
        **serialize_contest(details.contest),
        "creator": {"name": details.creator_name},
        "entries": [serialize_photo_view(entry) for entry in details.entries],
    }


def serialize_rating(rating: Rating) -> dict[str, object]:
    return {
        "id": str(rating.id),
        "photo_id": str(rating.photo_id),
        "rater_id": str(rating.rater_id),
        "creativity": rating.creativity,
        "technical": rating.technical,
        "emotional": rating.emotional,
        "overall": rating.overall,
        "rated_at": rating.rated_at.isoformat(),
    }


def serialize_photo_ratings(ratings: PhotoRatings) -> dict[str, object]:
    return {
        "averages": {
            "creativity": ratings.averages.creativity,
            "technical": ratings.averages.technical,
            "emotional": ratings.averages.emotional,
            "overall": ratings.averages.overall,
        },
        "total_ratings": ratings.total_ratings,
        "user_rating": serialize_rating(ratings.caller_rating)
        if ratings.caller_rating
        else None,
    }


def serialize_award(award: Award) -> dict[str, object]:
    return {
        "id": str(award.id),
        "type": award.type,
        "name": award.name,
        "description": award.description,
        "icon": award.icon,
        "awarded_at": award.awarded_at.isoformat(),
        "contest_id": str(award.contest_id) if award.contest_id else None,
    }


def serialize_profile_page(page: UserProfilePage) -> dict[str, object]:
    return {
        **serialize_profile(page.profile),
        "profile_picture": page.profile_picture_url,
        "photos": [serialize_photo_view(view) for view in page.photos],
        "awards": [serialize_award(award) for award in page.awards],
        "top_photos": [serialize_photo_view(view) for view in page.top_photos],
        "photo_count": page.photo_count,
    }


def serialize_transaction(transaction: ExperienceTransaction) -> dict[str, object]:
    return {
        "id": str(transaction.id),
        "amount": transaction.amount,
        "reason": transaction.reason,
        "related_id": transaction.related_id,
        "created_at": transaction.created_at.isoformat(),
    }
