"""Channel Aggregation — two-level team → channel fan-out for the dynamic autocomplete list.

Invariants:
    - Teams queried once, then channels queried one team at a time, in host order
    - Archived channels are excluded at the query (include_deleted=False)
    - First failure aborts the whole aggregation; no partial list is ever returned
    - No retry

Design Decisions:
    - Sequential awaits rather than asyncio.gather: request order and fail-fast
      semantics stay identical to the host's own plugin API
"""

import logging

from wrangler.core.autocomplete import build_channel_items
from wrangler.core.domain_types import TeamId, UserId
from wrangler.core.errors import HostAPIError, UpstreamQueryError
from wrangler.core.host_protocols import DirectoryService
from wrangler.schemas.autocomplete import AutocompleteListItem

logger = logging.getLogger(__name__)


async def collect_channel_items(
    directory: DirectoryService, user_id: UserId,
) -> list[AutocompleteListItem]:
    """Autocomplete items for every non-conversation channel across the user's teams.

    Raises UpstreamQueryError on the first failing directory query.
    """
    try:
        teams = await directory.get_teams_for_user(user_id)
    except HostAPIError as e:
        logger.error(
            f"failed to get teams for user: {e}", extra={"user_id": user_id},
        )
        raise UpstreamQueryError("failed to get teams for user", e)

    items: list[AutocompleteListItem] = []
    for team in teams:
        try:
            channels = await directory.get_channels_for_team_for_user(
                TeamId(team.id), user_id, include_deleted=False,
            )
        except HostAPIError as e:
            logger.error(
                f"failed to get channels for team for user: {e}",
                extra={"user_id": user_id, "team_id": team.id},
            )
            raise UpstreamQueryError("failed to get channels for team for user", e)
        items.extend(build_channel_items(team, channels))
    return items
