"""Domain errors surfaced to API callers."""

from http import HTTPStatus


class PhotoContestError(Exception):
    """Base class for errors whose message is shown to the caller."""

    status_code: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationError(PhotoContestError):
    """No authenticated session."""

    status_code = HTTPStatus.UNAUTHORIZED


class AuthorizationError(PhotoContestError):
    """Session present but lacking the required privilege."""

    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(PhotoContestError):
    """Referenced entity does not exist."""

    status_code = HTTPStatus.NOT_FOUND


class ProfileNotFoundError(NotFoundError):
    """Authenticated identity has no application profile yet."""


class DuplicateEntryError(PhotoContestError):
    """A one-per-user constraint was violated."""

    status_code = HTTPStatus.CONFLICT


class DuplicateRatingError(DuplicateEntryError):
    """The rater already rated this photo."""


class SelfRatingError(PhotoContestError):
    """A member tried to rate their own photo."""

    status_code = HTTPStatus.FORBIDDEN


class InvalidRatingError(PhotoContestError):
    """A rating score is outside the allowed range."""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY


class ContestClosedError(PhotoContestError):
    """The contest is not accepting submissions."""

    status_code = HTTPStatus.CONFLICT


class DeadlinePassedError(PhotoContestError):
    """The contest submission deadline has passed."""

    status_code = HTTPStatus.CONFLICT


class InvalidStatusTransitionError(PhotoContestError):
    """The requested contest status change is not allowed."""

    status_code = HTTPStatus.CONFLICT


class OwnershipError(PhotoContestError):
    """The caller does not own the target entity."""

    status_code = HTTPStatus.FORBIDDEN
