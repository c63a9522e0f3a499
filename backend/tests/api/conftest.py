"""Fixtures for API tests: the app wired to a store over the in-memory service."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_session_store
from modules.session.store import SessionStore


@pytest.fixture
def make_client(fake_client):
    """
    Build a TestClient whose session store runs on the fake service.

    The lifespan is not entered, so no Supabase client is ever created.
    """

    def _make(started: bool = True):
        store = SessionStore(fake_client)
        if started:
            asyncio.run(store.start())
        app.dependency_overrides[get_session_store] = lambda: store
        return TestClient(app), store

    yield _make
    app.dependency_overrides.clear()
