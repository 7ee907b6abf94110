from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import structlog
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from provenance.resolver import VersionInfoResolver
from provenance.settings import VersionSettings
from server.handlers import version_info
from server.settings import ServerSettings
from shared.logging import setup_logging

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_app(
    settings: ServerSettings | None = None,
    version_settings: VersionSettings | None = None,
) -> Starlette:
    """Build the version server.

    Raises ManifestError when the package manifest is missing: the service
    must not start without a package version.
    """
    if settings is None:  # pragma: no cover
        settings = ServerSettings()
    if version_settings is None:  # pragma: no cover
        version_settings = VersionSettings()

    resolver = VersionInfoResolver(version_settings)

    routes = [
        Route(settings.version_path, version_info, methods=["GET"], name="version_info"),
        Route("/health", health, methods=["GET"], name="health"),
    ]

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:
        # Resolve eagerly so the first request usually finds a settled record.
        resolver.warm_up()
        yield
        await resolver.close()

    app = Starlette(routes=routes, lifespan=lifespan)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,  # type: ignore[arg-type]
            allow_origins=settings.cors_origins,
            allow_methods=["GET"],
        )

    app.state.settings = settings
    app.state.version_resolver = resolver

    logger.info("version server ready", version_path=settings.version_path)
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory server.app:get_app."""
    s = ServerSettings()
    setup_logging(log_dir=s.log_dir)
    return create_app(settings=s, version_settings=VersionSettings())
