"""Settings Route — GET /api/v1/settings reports whether the web UI is enabled for the caller.

Invariants:
    - Only GET is accepted (405 otherwise)
    - Empty caller identity → 401
    - enable_web_ui is true iff the feature flag is on AND the user is authorized;
      neither condition failing is an error
"""

from fastapi import Response

from wrangler.api.request_context import RequestContext
from wrangler.api.responses import respond_json
from wrangler.core.authorization import is_web_ui_enabled
from wrangler.core.errors import MethodNotAllowedError, UnauthenticatedError
from wrangler.core.host_protocols import ConfigurationProvider, UserAuthorizer
from wrangler.schemas.autocomplete import SettingsResponse

ROUTE_API_SETTINGS = "/api/v1/settings"


async def handle_settings(
    ctx: RequestContext,
    config_provider: ConfigurationProvider,
    authorizer: UserAuthorizer,
) -> Response:
    if ctx.method != "GET":
        raise MethodNotAllowedError(ctx.method)
    if not ctx.user_id:
        raise UnauthenticatedError()

    config = config_provider.current()
    # Flag first: a disabled web UI never costs a host lookup
    authorized = config.enable_web_ui and await authorizer.is_authorized(ctx.user_id)
    return respond_json(
        SettingsResponse(enable_web_ui=is_web_ui_enabled(config, authorized)),
    )
