"""Shared fixtures: a recording notifier, an HttpClient pointed at a respx-mocked backend."""

import pytest
import pytest_asyncio
import respx

from payloads import BASE_URL, RecordingNotifier
from weatherdash.transport.http import HttpClient


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the developer's ~/.weatherdash/config.json and WEATHERDASH_* env out of tests."""
    monkeypatch.setattr("weatherdash.config.CONFIG_FILE", tmp_path / "config.json")
    for var in ("WEATHERDASH_API_BASE", "WEATHERDASH_TIMEOUT_MS", "WEATHERDASH_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config.json"


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def backend():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest_asyncio.fixture
async def http(notifier: RecordingNotifier):
    client = HttpClient(base_url=BASE_URL, notifier=notifier)
    yield client
    await client.close()
