"""Test fixtures: a page store in a temporary directory and an ASGI client."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from flatwiki.main import app
from flatwiki.services.pages import PageStore, get_page_store


@pytest.fixture
def store(tmp_path):
    page_store = PageStore(tmp_path / "data")
    page_store.ensure_data_dir()

    app.dependency_overrides[get_page_store] = lambda: page_store

    yield page_store

    app.dependency_overrides.clear()


@pytest.fixture
async def client(store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def write_page(store: PageStore, title: str, text: str) -> None:
    """Helper: put a page file straight onto disk."""
    store.path_for(title).write_bytes(text.encode("utf-8"))
