"""Shared fixtures: an app instance per test over a temp pages directory."""

import shutil

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from flatwiki.config import TEMPLATES_DIR, Settings
from flatwiki.main import create_app


@pytest.fixture()
def pages_dir(tmp_path):
    return tmp_path / "pages"


@pytest.fixture()
def templates_dir(tmp_path):
    """A private copy of the bundled templates that tests may break."""
    target = tmp_path / "templates"
    shutil.copytree(TEMPLATES_DIR, target)
    return target


@pytest.fixture()
def settings(pages_dir, templates_dir):
    return Settings(pages_dir=pages_dir, templates_dir=templates_dir)


@pytest.fixture()
def wiki_app(settings):
    return create_app(settings)


@pytest_asyncio.fixture()
async def client(wiki_app):
    """Async HTTP client wired to the app (no lifespan)."""
    transport = ASGITransport(app=wiki_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as c:
        yield c


@pytest_asyncio.fixture()
async def client_no_redirect(wiki_app):
    """Async HTTP client that does NOT follow redirects."""
    transport = ASGITransport(app=wiki_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=False,
    ) as c:
        yield c
