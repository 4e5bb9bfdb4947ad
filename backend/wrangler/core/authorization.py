"""Authorization Rules — pure decision of whether a host user may use the web UI.

Invariants:
    - System admins are always authorized
    - Otherwise the user's email domain must appear in allowed_email_domain
    - An empty allowed_email_domain authorizes nobody but system admins
"""

from wrangler.core.configuration import PluginConfiguration
from wrangler.schemas.directory import User


def is_authorized_user(user: User, config: PluginConfiguration) -> bool:
    if user.is_system_admin():
        return True
    domain = user.email_domain()
    if not domain:
        return False
    return domain in config.allowed_email_domains()


def is_web_ui_enabled(config: PluginConfiguration, authorized: bool) -> bool:
    """Both the feature flag and the user's authorization are required."""
    return config.enable_web_ui and authorized
