"""Configuration Store — thread-safe holder for the current PluginConfiguration.

Invariants:
    - current() always returns a complete snapshot, never a half-applied update
    - update() replaces the snapshot; it never validates (requests do that)
    - Snapshots are frozen, so readers need no lock once they hold one
"""

import logging
import threading

from wrangler.config import Settings
from wrangler.core.configuration import PluginConfiguration

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Implements ConfigurationProvider for the running application."""

    def __init__(self, initial: PluginConfiguration | None = None):
        self._lock = threading.RLock()
        self._configuration = initial or PluginConfiguration()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigurationStore":
        return cls(PluginConfiguration(
            enable_web_ui=settings.enable_web_ui,
            allowed_email_domain=settings.allowed_email_domain,
            move_thread_max_count=settings.move_thread_max_count,
        ))

    def current(self) -> PluginConfiguration:
        with self._lock:
            return self._configuration

    def update(self, configuration: PluginConfiguration) -> None:
        with self._lock:
            if configuration == self._configuration:
                logger.debug("Plugin configuration unchanged")
                return
            self._configuration = configuration
        logger.info("Plugin configuration updated")
