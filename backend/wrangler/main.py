"""Wrangler Plugin API — FastAPI application entry point.

Invariants:
    - One catch-all ASGI route hands every request, any method, to PluginHTTPDispatcher
    - Collaborators are built once in create_app and injected; tests pass fakes
    - OpenAPI/docs routes disabled so no path bypasses the dispatcher's route table
    - Host client closed on shutdown via lifespan context manager

Design Decisions:
    - create_app factory plus module-level `app` for `uvicorn wrangler.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wrangler.api.dispatcher import PluginHTTPDispatcher
from wrangler.api.error_handlers import register_error_handlers
from wrangler.config import Settings, get_settings
from wrangler.core.host_protocols import (
    BundleProvider, ConfigurationProvider, DirectoryService, UserAuthorizer,
)
from wrangler.infrastructure.bundle import StaticBundle
from wrangler.infrastructure.configuration_store import ConfigurationStore
from wrangler.infrastructure.host_api_client import HostAPIClient
from wrangler.infrastructure.observability import setup_logging
from wrangler.services.user_authorizer import HostUserAuthorizer

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    config_provider: ConfigurationProvider | None = None,
    directory: DirectoryService | None = None,
    authorizer: UserAuthorizer | None = None,
    bundle: BundleProvider | None = None,
) -> FastAPI:
    """Build the plugin application, defaulting each collaborator from settings."""
    settings = settings or get_settings()
    host_client: HostAPIClient | None = None
    if directory is None:
        host_client = HostAPIClient(
            settings.host_url,
            token=settings.host_token,
            timeout_seconds=settings.host_timeout_seconds,
        )
        directory = host_client
    config_provider = config_provider or ConfigurationStore.from_settings(settings)
    authorizer = authorizer or HostUserAuthorizer(directory, config_provider)
    bundle = bundle or StaticBundle(settings.bundle_path)

    dispatcher = PluginHTTPDispatcher(
        config_provider, directory, authorizer, bundle,
        logger=logging.getLogger("wrangler.http"),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Wrangler plugin API started")
        yield
        if host_client is not None:
            await host_client.aclose()
        logger.info("Wrangler plugin API shutting down")

    app = FastAPI(
        title="Wrangler Plugin API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.dispatcher = dispatcher
    # ASGI endpoint with no method list: every method reaches the dispatcher
    app.add_route("/{full_path:path}", dispatcher, include_in_schema=False)

    register_error_handlers(app)
    return app


app = create_app()
