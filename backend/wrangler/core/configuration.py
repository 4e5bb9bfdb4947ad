"""Plugin Configuration — the runtime settings every request reads.

Invariants:
    - PluginConfiguration is frozen; updates replace the whole object
    - is_valid() is evaluated per request, never cached as a flag
    - move_thread_max_count must parse as a non-negative integer

Design Decisions:
    - Validity raised as ConfigurationInvalidError so the dispatcher short-circuits
      with one exception type
    - allowed_email_domain stays a raw comma-separated string, as the host stores it
"""

from pydantic import BaseModel, ConfigDict

from wrangler.core.errors import ConfigurationInvalidError


class PluginConfiguration(BaseModel):
    """Snapshot of the plugin settings as delivered by the host."""

    model_config = ConfigDict(frozen=True)

    enable_web_ui: bool = False
    allowed_email_domain: str = ""
    move_thread_max_count: str = "100"

    def is_valid(self) -> None:
        """Raise ConfigurationInvalidError when the settings cannot be used."""
        try:
            max_count = int(self.move_thread_max_count.strip())
        except ValueError:
            raise ConfigurationInvalidError(
                "move_thread_max_count must be a valid number",
            )
        if max_count < 0:
            raise ConfigurationInvalidError(
                "move_thread_max_count must not be negative",
            )

    def allowed_email_domains(self) -> list[str]:
        """Normalized domains from the comma-separated setting."""
        return [
            domain.strip().lower()
            for domain in self.allowed_email_domain.split(",")
            if domain.strip()
        ]
