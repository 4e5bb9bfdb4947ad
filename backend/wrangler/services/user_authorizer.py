"""User Authorizer — looks a user up in the host directory and applies the authorization rules.

Invariants:
    - is_authorized() never raises: a failed lookup means "not authorized"
    - The configuration snapshot is read per call, so rule changes apply immediately
"""

import logging

from wrangler.core.authorization import is_authorized_user
from wrangler.core.domain_types import UserId
from wrangler.core.errors import HostAPIError
from wrangler.core.host_protocols import ConfigurationProvider, DirectoryService

logger = logging.getLogger(__name__)


class HostUserAuthorizer:
    """Implements UserAuthorizer on top of DirectoryService.get_user."""

    def __init__(
        self, directory: DirectoryService, config_provider: ConfigurationProvider,
    ):
        self._directory = directory
        self._config_provider = config_provider

    async def is_authorized(self, user_id: UserId) -> bool:
        try:
            user = await self._directory.get_user(user_id)
        except HostAPIError as e:
            logger.warning(
                f"Unable to look up user for authorization: {e}",
                extra={"user_id": user_id},
            )
            return False
        return is_authorized_user(user, self._config_provider.current())
