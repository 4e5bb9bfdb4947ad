"""Autocomplete Shaping — pure conversion of (team, channels) into dropdown items.

Invariants:
    - Direct and group conversations never produce an item
    - Output order is input order: team-major, then channel order within the team
    - hint = "— <channel display name>", help_text = "Team: <team display name>"
"""

from collections.abc import Iterable

from wrangler.schemas.autocomplete import AutocompleteListItem
from wrangler.schemas.directory import Channel, Team

HINT_PREFIX = "—"


def format_channel_hint(channel: Channel) -> str:
    return f"{HINT_PREFIX} {channel.display_name}"


def format_team_help_text(team: Team) -> str:
    return f"Team: {team.display_name}"


def build_channel_items(
    team: Team, channels: Iterable[Channel],
) -> list[AutocompleteListItem]:
    """Items for one team's channels, skipping direct/group conversations."""
    return [
        AutocompleteListItem(
            item=channel.id,
            hint=format_channel_hint(channel),
            help_text=format_team_help_text(team),
        )
        for channel in channels
        if not channel.is_group_or_direct()
    ]
