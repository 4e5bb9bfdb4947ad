"""Directory Schemas — Pydantic models for team, channel and user payloads from the host.

Invariants:
    - Models are read-only views of host data; unknown host fields are ignored
    - Channel.is_group_or_direct() is the only classification rule used for filtering

Design Decisions:
    - Field names follow the host's snake_case JSON so payloads validate as-is
"""

from pydantic import BaseModel, ConfigDict

from wrangler.core.domain_types import (
    CONVERSATION_CHANNEL_TYPES, SYSTEM_ADMIN_ROLE, ChannelType,
)


class Team(BaseModel):
    """A team the user belongs to."""
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str = ""
    name: str = ""


class Channel(BaseModel):
    """A channel visible to the user within one team."""
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str = ""
    name: str = ""
    type: ChannelType = ChannelType.OPEN
    team_id: str = ""
    delete_at: int = 0

    def is_group_or_direct(self) -> bool:
        return self.type in CONVERSATION_CHANNEL_TYPES


class User(BaseModel):
    """The subset of a host user needed for authorization."""
    model_config = ConfigDict(frozen=True)

    id: str
    username: str = ""
    email: str = ""
    roles: str = ""

    def is_system_admin(self) -> bool:
        return SYSTEM_ADMIN_ROLE in self.roles.split()

    def email_domain(self) -> str:
        """Lower-cased text after the last '@', or '' when there is none."""
        _, sep, domain = self.email.rpartition("@")
        return domain.strip().lower() if sep else ""
