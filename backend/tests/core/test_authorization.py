"""Authorization Rules — tests for pure web UI authorization decisions.

Tests cover:
    - System admins always authorized
    - Email domain allow-list, case-insensitive
    - Empty allow-list and missing email deny
    - is_web_ui_enabled requires both flag and authorization
"""

import pytest

from wrangler.core.authorization import is_authorized_user, is_web_ui_enabled
from wrangler.core.configuration import PluginConfiguration
from wrangler.schemas.directory import User


def _user(email="", roles="system_user"):
    return User(id="u1", username="u1", email=email, roles=roles)


def test_system_admin_authorized_without_domains():
    user = _user(roles="system_user system_admin")
    assert is_authorized_user(user, PluginConfiguration())


def test_domain_in_allow_list_authorized():
    config = PluginConfiguration(allowed_email_domain="example.com,corp.io")
    assert is_authorized_user(_user("Alice@Corp.IO"), config)


def test_domain_not_in_allow_list_denied():
    config = PluginConfiguration(allowed_email_domain="example.com")
    assert not is_authorized_user(_user("alice@evil.com"), config)


def test_subdomain_is_not_parent_domain():
    config = PluginConfiguration(allowed_email_domain="example.com")
    assert not is_authorized_user(_user("alice@mail.example.com"), config)


def test_empty_allow_list_denies_regular_users():
    assert not is_authorized_user(_user("alice@example.com"), PluginConfiguration())


def test_missing_email_denied():
    config = PluginConfiguration(allowed_email_domain="example.com")
    assert not is_authorized_user(_user(""), config)


def test_role_substring_is_not_admin():
    assert not is_authorized_user(_user(roles="system_admin_lite"), PluginConfiguration())


@pytest.mark.parametrize(
    "flag,authorized,expected",
    [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
)
def test_web_ui_enabled_truth_table(flag, authorized, expected):
    config = PluginConfiguration(enable_web_ui=flag)
    assert is_web_ui_enabled(config, authorized) is expected
