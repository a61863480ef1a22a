"""Shared fixtures for the registry tests."""

import pytest

from proofnest.config import config
from proofnest.host import CallContext
from proofnest.routes import app
from proofnest.store import RegistryStore, set_store


@pytest.fixture
def store():
    return RegistryStore()


@pytest.fixture
def context():
    return CallContext(caller="alice-principal", timestamp=1_700_000_000_000_000_000)


@pytest.fixture
def client(store):
    """Flask test client serving a fresh, empty store."""
    set_store(store)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
    set_store(None)


def register_args(**overrides) -> dict:
    """Keyword arguments for ``register`` describing a typical document."""
    args = {
        "content": b"abc",
        "content_type": "text/plain",
        "name": "doc1",
        "description": "desc",
        "owner_name": "Alice",
        "owner_dob": "2000-01-01",
        "royalty_fee": "5%",
        "has_royalty": True,
        "contact_details": "a@x.com",
    }
    args.update(overrides)
    return args


@pytest.fixture
def trusted_caller_header(monkeypatch):
    """Run as if behind a proxy that sets the caller header."""
    monkeypatch.setattr(config, "TRUST_CALLER_HEADER", True)
