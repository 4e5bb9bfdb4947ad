"""Host API Client — directory lookups against the host's REST API over httpx.

Invariants:
    - Every call is a single request: no retry, no backoff
    - Non-2xx responses, transport errors and malformed payloads all raise HostAPIError
    - Ids are passed through verbatim in URL paths

Design Decisions:
    - Wrapper over raw httpx.AsyncClient: the directory protocol never sees httpx types
    - Transport is injectable so tests use httpx.MockTransport
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from wrangler.core.domain_types import TeamId, UserId
from wrangler.core.errors import HostAPIError
from wrangler.schemas.directory import Channel, Team, User

logger = logging.getLogger(__name__)

_TEAMS = TypeAdapter(list[Team])
_CHANNELS = TypeAdapter(list[Channel])


class HostAPIClient:
    """Implements DirectoryService against /api/v4 endpoints of the host."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def get_teams_for_user(self, user_id: UserId) -> list[Team]:
        payload = await self._get_json(f"/api/v4/users/{user_id}/teams")
        return self._parse(_TEAMS, payload, "teams")

    async def get_channels_for_team_for_user(
        self, team_id: TeamId, user_id: UserId, include_deleted: bool,
    ) -> list[Channel]:
        payload = await self._get_json(
            f"/api/v4/users/{user_id}/teams/{team_id}/channels",
            params={"include_deleted": "true" if include_deleted else "false"},
        )
        return self._parse(_CHANNELS, payload, "channels")

    async def get_user(self, user_id: UserId) -> User:
        payload = await self._get_json(f"/api/v4/users/{user_id}")
        try:
            return User.model_validate(payload)
        except ValidationError as e:
            raise HostAPIError(f"invalid user payload: {e.error_count()} error(s)")

    async def _get_json(self, path: str, params: dict | None = None):
        try:
            response = await self.client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Host API request to {path} failed: {e}")
            raise HostAPIError(f"request to {path} failed: {e}")

        if response.is_error:
            raise HostAPIError(
                f"request to {path} was rejected", response.status_code,
            )
        try:
            return response.json()
        except ValueError:
            raise HostAPIError(
                f"response from {path} is not JSON", response.status_code,
            )

    @staticmethod
    def _parse(adapter: TypeAdapter, payload, what: str):
        # The host answers `null` instead of `[]` for users without teams
        if payload is None:
            return []
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise HostAPIError(f"invalid {what} payload: {e.error_count()} error(s)")
