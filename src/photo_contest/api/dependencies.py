"""Request-scoped dependencies resolving the caller."""

from fastapi import Depends, Header, Request

from photo_contest.containers import AppContainer
from photo_contest.domain.profiles import CallerContext, Identity, Profile


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_identity(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> Identity | None:
    """Return the identity behind the bearer token, if any."""
    token = _bearer_token(authorization)
    if token is None:
        return None
    return container.identity_provider.current_identity(token)


def get_caller(
    identity: Identity | None = Depends(get_identity),
    container: AppContainer = Depends(get_container),
) -> CallerContext:
    """Resolve the caller's profile once per request."""
    return container.profile_service.caller_context(identity)


def require_profile(
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> Profile:
    """Return the caller's profile or fail the request."""
    return container.profile_service.resolve(caller)


def require_admin(
    caller: CallerContext = Depends(get_caller),
    container: AppContainer = Depends(get_container),
) -> Profile:
    """Return the caller's profile when it belongs to an admin."""
    return container.profile_service.require_admin(caller)


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
