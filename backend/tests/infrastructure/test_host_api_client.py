"""Host API Client — request shapes and error mapping over httpx.MockTransport.

Tests cover:
    - Endpoint paths, include_deleted query flag, bearer token
    - Payloads parsed into Team/Channel/User; null list → []
    - Non-2xx, transport errors and invalid payloads → HostAPIError
    - No retry on failure
"""

import httpx
import pytest

from wrangler.core.domain_types import ChannelType
from wrangler.core.errors import HostAPIError
from wrangler.infrastructure.host_api_client import HostAPIClient


def _client(handler, token="secret"):
    return HostAPIClient(
        "http://host.test/", token=token, transport=httpx.MockTransport(handler),
    )


async def test_get_teams_for_user():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {"id": "t1", "display_name": "Team A", "name": "team-a", "extra": 1},
        ])

    client = _client(handler)
    teams = await client.get_teams_for_user("u1")
    await client.aclose()

    assert [(t.id, t.display_name) for t in teams] == [("t1", "Team A")]
    assert seen[0].url.path == "/api/v4/users/u1/teams"
    assert seen[0].headers["authorization"] == "Bearer secret"


async def test_get_channels_passes_include_deleted_flag():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {"id": "c1", "display_name": "General", "type": "O", "team_id": "t1"},
            {"id": "c2", "display_name": "", "type": "D"},
        ])

    client = _client(handler)
    channels = await client.get_channels_for_team_for_user("t1", "u1", include_deleted=False)

    assert seen[0].url.path == "/api/v4/users/u1/teams/t1/channels"
    assert seen[0].url.params["include_deleted"] == "false"
    assert [c.type for c in channels] == [ChannelType.OPEN, ChannelType.DIRECT]
    assert channels[1].is_group_or_direct()


async def test_null_list_is_empty():
    client = _client(lambda request: httpx.Response(200, content=b"null"))
    assert await client.get_teams_for_user("u1") == []


async def test_get_user():
    client = _client(lambda request: httpx.Response(200, json={
        "id": "u1", "username": "alice", "email": "alice@example.com",
        "roles": "system_user",
    }))
    user = await client.get_user("u1")
    assert user.email_domain() == "example.com"
    assert not user.is_system_admin()


async def test_no_token_no_authorization_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    await _client(handler, token="").get_teams_for_user("u1")
    assert "authorization" not in seen[0].headers


async def test_error_status_raises_without_retry():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503, text="maintenance")

    with pytest.raises(HostAPIError) as exc_info:
        await _client(handler).get_teams_for_user("u1")
    assert exc_info.value.status_code == 503
    assert len(calls) == 1


async def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(HostAPIError):
        await _client(handler).get_channels_for_team_for_user("t1", "u1", False)


async def test_non_json_body_raises():
    client = _client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(HostAPIError):
        await client.get_teams_for_user("u1")


async def test_invalid_payload_raises():
    client = _client(lambda request: httpx.Response(200, json=[{"display_name": "no id"}]))
    with pytest.raises(HostAPIError):
        await client.get_teams_for_user("u1")


async def test_unknown_channel_type_raises():
    client = _client(lambda request: httpx.Response(200, json=[{"id": "c", "type": "X"}]))
    with pytest.raises(HostAPIError):
        await client.get_channels_for_team_for_user("t1", "u1", False)
