"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photo_contest.api.contests import router as contests_router
from photo_contest.api.photos import router as photos_router
from photo_contest.api.profiles import router as profiles_router
from photo_contest.app_logging import configure_logging
from photo_contest.config import parse_allowed_origins
from photo_contest.containers import AppContainer
from photo_contest.errors import PhotoContestError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Contest API")
    app.state.container = container

    allowed_origins = parse_allowed_origins(
        container.settings.cors_allowed_origins
    )
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(contests_router)
    app.include_router(photos_router)
    app.include_router(profiles_router)

    @app.exception_handler(PhotoContestError)
    async def handle_domain_error(
        request: Request, exc: PhotoContestError
    ) -> JSONResponse:
        logger.info(
            "Rejected %s %s: %s", request.method, request.url.path, exc.message
        )
        return JSONResponse(
            status_code=int(exc.status_code), content={"detail": exc.message}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
