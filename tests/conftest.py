"""
Root pytest configuration and fixtures for the fbgraph SDK.

Provides Graph API fixture files and a ready-made client.
"""

from pathlib import Path

import pytest

from fbgraph import Facebook

GRAPH = "https://graph.facebook.com"


@pytest.fixture(scope="session")
def test_data_dir():
    """Path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def load_fixture(test_data_dir):
    """Read a fixture file from tests/data as bytes."""

    def _load(name: str) -> bytes:
        return (test_data_dir / name).read_bytes()

    return _load


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    """Skip retry backoff sleeps."""
    monkeypatch.setattr("fbgraph._http.time.sleep", lambda _seconds: None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's real credentials out of the tests."""
    monkeypatch.delenv("FACEBOOK_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("FACEBOOK_GRAPH_URL", raising=False)


@pytest.fixture
def facebook():
    """Client authorized with a dummy token."""
    return Facebook(access_token="someAccessToken", base_url=GRAPH)


@pytest.fixture
def anonymous_facebook():
    """Client without an access token."""
    return Facebook(base_url=GRAPH)
