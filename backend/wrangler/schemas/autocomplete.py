"""Response Schemas — JSON bodies returned by the plugin routes.

Invariants:
    - AutocompleteListItem field names (item, hint, help_text) are consumed by the
      host's slash-command autocomplete UI and must not change
    - SettingsResponse carries a single boolean
"""

from pydantic import BaseModel


class AutocompleteListItem(BaseModel):
    """One selectable entry in a dynamic autocomplete dropdown."""
    item: str
    hint: str = ""
    help_text: str = ""


class SettingsResponse(BaseModel):
    """Web UI settings for the calling user."""
    enable_web_ui: bool
