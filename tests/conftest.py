"""
tests/conftest.py -- Shared test fixtures for AccountGate.

This module provides:
  - store:         fresh in-memory AccountStore for unit tests
  - api_client:    TestClient wired to a fresh shared-memory AccountStore
  - make_account:  helper that inserts an account with a known password

Design: the API fixture uses a named shared-memory SQLite URI (not plain
:memory:) because TestClient runs sync route handlers in a thread pool. Plain
:memory: DBs are per-connection and would present a blank schema to each
worker thread. A uuid in the name keeps every test's database separate.

DEBUG and BCRYPT_ROUNDS must be set before any auth/core import:
get_settings() is cached on first call, DEBUG=true lets it auto-generate
SECRET_KEY, and 4 rounds (bcrypt's minimum) keeps hashing fast.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Generator
from contextlib import asynccontextmanager

# CRITICAL: set before any auth/core import so get_settings() sees them.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.models import Account
from auth.passwords import hash_password
from auth.store import AccountStore

# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


def _shared_memory_url() -> str:
    return f"sqlite:///file:accounts_{uuid.uuid4().hex}?mode=memory&cache=shared&uri=true"


def _patch_lifespan(account_store: AccountStore):
    """Return a lifespan that installs the given store instead of opening the real DB."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.account_store = account_store
        yield

    return test_lifespan


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> Generator[AccountStore, None, None]:
    """In-memory AccountStore, empty, discarded after the test."""
    s = AccountStore("sqlite:///:memory:")
    yield s
    s.close()


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Return a helper that inserts an account whose plaintext password is known.

    Usage:
        account = make_account(store, email="a@x.com", password="123456")
    """

    def _make(s: AccountStore, name: str = "Test User", email: str = "user@example.com", password: str = "123456"):
        return s.insert(Account(name=name, email=email, password_hash=hash_password(password)))

    return _make


@pytest.fixture
def api_client() -> Generator[tuple[TestClient, AccountStore], None, None]:
    """Yield (client, store) for API integration tests.

    The TestClient uses the real FastAPI app with a patched lifespan so tests
    hit real route handlers, dependencies and exception handlers, but against
    an isolated in-memory store.
    """
    account_store = AccountStore(_shared_memory_url())
    app.router.lifespan_context = _patch_lifespan(account_store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, account_store

    account_store.close()
