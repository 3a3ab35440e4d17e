"""Shared fixtures: every test runs against an in-memory store."""

import pytest
from fastapi.testclient import TestClient

from runclub.identity import UserIdentity
from runclub.ledger import RunLedger
from runclub.main import app, get_store
from runclub.store import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ledger(store):
    return RunLedger(store)


@pytest.fixture
def identity(store):
    return UserIdentity(store)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
