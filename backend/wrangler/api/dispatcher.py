"""Plugin HTTP Dispatcher — configuration gate, exact-path routing, and failure logging.

Invariants:
    - The configuration gate runs before routing, on every request, for every path
    - Paths are matched by exact string equality (no prefixes, no trailing-slash folding)
    - Unknown paths → 404 for any method
    - Every PluginError becomes a text/plain response AND one ERROR log record with
      status, category, error, host, request_uri, method and query
    - Logging never changes the response

Design Decisions:
    - Static dict route table over FastAPI routing: the 501 gate and the 404 boundary
      must apply uniformly, including to paths FastAPI would never route
    - Collaborators and the logger injected at construction; no module globals
"""

import logging
from collections.abc import Awaitable, Callable
from functools import partial

from fastapi import Request, Response
from starlette.types import Receive, Scope, Send

from wrangler.api.request_context import RequestContext
from wrangler.api.responses import GuardedJSONResponse, respond_error
from wrangler.api.routes.dynamic_channels import (
    ROUTE_DYNAMIC_CHANNELS, handle_dynamic_channels,
)
from wrangler.api.routes.profile_image import ROUTE_PROFILE_IMAGE, handle_profile_image
from wrangler.api.routes.settings import ROUTE_API_SETTINGS, handle_settings
from wrangler.core.errors import PluginError, RouteNotFoundError
from wrangler.core.host_protocols import (
    BundleProvider, ConfigurationProvider, DirectoryService, UserAuthorizer,
)

Handler = Callable[[RequestContext], Awaitable[Response]]


class PluginHTTPDispatcher:
    """Single entry point for every HTTP request the host forwards to the plugin."""

    def __init__(
        self,
        config_provider: ConfigurationProvider,
        directory: DirectoryService,
        authorizer: UserAuthorizer,
        bundle: BundleProvider,
        logger: logging.Logger | None = None,
    ):
        self._config_provider = config_provider
        self._directory = directory
        self._authorizer = authorizer
        self._bundle = bundle
        self._logger = logger or logging.getLogger(__name__)

        # Every route visible here; adding one means editing this dict
        self._routes: dict[str, Handler] = {
            ROUTE_API_SETTINGS: self._settings,
            ROUTE_PROFILE_IMAGE: self._profile_image,
            ROUTE_DYNAMIC_CHANNELS: self._dynamic_channels,
        }

    @property
    def routes(self) -> frozenset[str]:
        return frozenset(self._routes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point, mounted as the catch-all route for every method."""
        response = await self.serve(Request(scope, receive))
        await response(scope, receive, send)

    async def serve(self, request: Request) -> Response:
        ctx = RequestContext.from_request(request)
        try:
            response = await self._dispatch(ctx)
        except PluginError as exc:
            self.log_failure(ctx, exc)
            return respond_error(exc)

        if isinstance(response, GuardedJSONResponse):
            response.on_write_failure = partial(self.log_failure, ctx)
        return response

    async def _dispatch(self, ctx: RequestContext) -> Response:
        self._config_provider.current().is_valid()

        handler = self._routes.get(ctx.path)
        if handler is None:
            raise RouteNotFoundError(ctx.path)
        return await handler(ctx)

    def log_failure(self, ctx: RequestContext, exc: PluginError) -> None:
        self._logger.error(
            f"ERROR: status={exc.http_status} error={exc.log_text()}",
            extra={
                "status": exc.http_status,
                "error_code": exc.code,
                "category": exc.category.value,
                **ctx.log_extra(),
            },
        )

    # ─── Route adapters ─────────────────────────────────────────

    async def _settings(self, ctx: RequestContext) -> Response:
        return await handle_settings(ctx, self._config_provider, self._authorizer)

    async def _profile_image(self, ctx: RequestContext) -> Response:
        return await handle_profile_image(ctx, self._bundle)

    async def _dynamic_channels(self, ctx: RequestContext) -> Response:
        return await handle_dynamic_channels(ctx, self._directory)
