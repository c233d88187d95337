"""
Loketh client — pytest fixtures.

Provides:
- Settings isolated from any local .env file
- HTTP test client for the FastAPI app
- Captured Statsig events
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from loketh.config import get_settings
from loketh.services import statsig_client


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    monkeypatch.delenv("STATSIG_SERVER_SECRET", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def statsig_events(monkeypatch) -> list[dict]:
    """Record events instead of sending them to Statsig."""
    events: list[dict] = []

    class _Recorder:
        enabled = True

        def log_event(self, **kwargs) -> None:
            events.append(kwargs)

        def shutdown(self) -> None:
            pass

    monkeypatch.setattr(statsig_client, "_statsig_client", _Recorder())
    return events


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from loketh.main import app

    with TestClient(app) as test_client:
        yield test_client
