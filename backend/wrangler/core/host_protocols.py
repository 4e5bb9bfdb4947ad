"""Boundary Protocols — contracts between the plugin core and the host application.

Invariants:
    - Core and api layers NEVER import host adapters directly
    - All host IO is accessed through these Protocol types
    - Implementations are injected into create_app / PluginHTTPDispatcher

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass plain fakes
    - Directory methods are async because the adapter does network IO;
      configuration and bundle lookups are local and stay sync
"""

from pathlib import Path
from typing import Protocol

from wrangler.core.configuration import PluginConfiguration
from wrangler.core.domain_types import TeamId, UserId
from wrangler.schemas.directory import Channel, Team, User


class ConfigurationProvider(Protocol):
    """Source of the current plugin configuration snapshot."""
    def current(self) -> PluginConfiguration: ...


class DirectoryService(Protocol):
    """Host team/channel/user directory. Failures raise HostAPIError."""
    async def get_teams_for_user(self, user_id: UserId) -> list[Team]: ...
    async def get_channels_for_team_for_user(
        self, team_id: TeamId, user_id: UserId, include_deleted: bool,
    ) -> list[Channel]: ...
    async def get_user(self, user_id: UserId) -> User: ...


class UserAuthorizer(Protocol):
    """Answers whether a user id may use the web UI. Never raises."""
    async def is_authorized(self, user_id: UserId) -> bool: ...


class BundleProvider(Protocol):
    """Locates the installed plugin bundle. Failures raise BundlePathError."""
    def get_bundle_path(self) -> Path: ...
