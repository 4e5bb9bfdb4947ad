"""Plugin Configuration — validity check and email domain parsing.

Tests cover:
    - is_valid accepts numeric move_thread_max_count, rejects text and negatives
    - ConfigurationInvalidError maps to 501 with the fixed message
    - allowed_email_domains trims, lower-cases, and drops empty entries
    - Snapshots are immutable
"""

import pytest
from pydantic import ValidationError

from wrangler.core.configuration import PluginConfiguration
from wrangler.core.errors import ConfigurationInvalidError


@pytest.mark.parametrize("value", ["0", "100", " 25 "])
def test_is_valid_accepts_non_negative_numbers(value):
    assert PluginConfiguration(move_thread_max_count=value).is_valid() is None


@pytest.mark.parametrize("value", ["", "abc", "1.5", "-1"])
def test_is_valid_rejects_bad_max_count(value):
    with pytest.raises(ConfigurationInvalidError) as exc_info:
        PluginConfiguration(move_thread_max_count=value).is_valid()
    assert exc_info.value.http_status == 501
    assert exc_info.value.message == "This plugin is not configured"


def test_invalid_reason_only_in_log_text():
    with pytest.raises(ConfigurationInvalidError) as exc_info:
        PluginConfiguration(move_thread_max_count="abc").is_valid()
    err = exc_info.value
    assert "move_thread_max_count" not in err.to_plain_text()
    assert "move_thread_max_count" in err.log_text()


def test_default_configuration_is_valid():
    PluginConfiguration().is_valid()


def test_allowed_email_domains_normalized():
    config = PluginConfiguration(allowed_email_domain=" Example.com, ,corp.io ,")
    assert config.allowed_email_domains() == ["example.com", "corp.io"]


def test_configuration_is_frozen():
    config = PluginConfiguration()
    with pytest.raises(ValidationError):
        config.enable_web_ui = True
