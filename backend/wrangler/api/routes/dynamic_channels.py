"""Dynamic Channels Route — /dynamic_channels feeds the slash-command channel autocomplete.

Invariants:
    - A missing identity header is queried as the empty user id, not rejected
    - Body is always a JSON array, `[]` when the user has no eligible channels
    - Any directory failure → 500 with no partial list
"""

from fastapi import Response

from wrangler.api.request_context import RequestContext
from wrangler.api.responses import respond_json
from wrangler.core.host_protocols import DirectoryService
from wrangler.services.channel_aggregation import collect_channel_items

ROUTE_DYNAMIC_CHANNELS = "/dynamic_channels"


async def handle_dynamic_channels(
    ctx: RequestContext, directory: DirectoryService,
) -> Response:
    items = await collect_channel_items(directory, ctx.user_id)
    return respond_json(items)
