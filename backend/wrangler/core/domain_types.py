"""Domain Types — identifiers and enums shared across the plugin.

Invariants:
    - Host identifiers are opaque strings — never parsed, never reformatted
    - ChannelType values match the host's single-letter channel type codes

Design Decisions:
    - NewType over wrapper classes: ids pass straight through to the host API
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
TeamId = NewType("TeamId", str)
ChannelId = NewType("ChannelId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ChannelType(str, Enum):
    """Host channel classification."""
    OPEN = "O"
    PRIVATE = "P"
    DIRECT = "D"
    GROUP = "G"


CONVERSATION_CHANNEL_TYPES = frozenset({ChannelType.DIRECT, ChannelType.GROUP})

SYSTEM_ADMIN_ROLE = "system_admin"

# Header the host sets on every plugin request with the authenticated user id
USER_ID_HEADER = "Mattermost-User-Id"
