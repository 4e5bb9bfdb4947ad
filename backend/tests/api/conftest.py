"""API test fixtures — FastAPI app built with host fakes + async test client.

Invariants:
    - Every test gets fresh fakes; nothing is shared with the module-level app
    - profile.png is written into a tmp bundle directory
"""

import pytest
from httpx import ASGITransport, AsyncClient

from wrangler.core.configuration import PluginConfiguration
from wrangler.main import create_app
from tests.fakes import FakeAuthorizer, FakeBundle, FakeConfigProvider, FakeDirectory

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def config_provider():
    return FakeConfigProvider(PluginConfiguration(enable_web_ui=True))


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def authorizer():
    return FakeAuthorizer({"admin-user"})


@pytest.fixture
def bundle(tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "profile.png").write_bytes(PNG_BYTES)
    return FakeBundle(tmp_path)


@pytest.fixture
def app(config_provider, directory, authorizer, bundle):
    return create_app(
        config_provider=config_provider,
        directory=directory,
        authorizer=authorizer,
        bundle=bundle,
    )


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
