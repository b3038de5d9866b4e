from unittest.mock import MagicMock

import pytest
from loguru import logger

from oaicli.config import API_KEY_ENV, ORG_KEY_ENV


class FakeClient:
    """Stands in for oaicli.client.Client and records how it was created."""

    def __init__(self) -> None:
        self.kwargs: dict = {}
        self.api = MagicMock()

    def __call__(self, **kwargs) -> 'FakeClient':
        self.kwargs = kwargs
        return self

    def __enter__(self) -> 'FakeClient':
        return self

    def __exit__(self, *args) -> None:
        return None


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    monkeypatch.delenv(ORG_KEY_ENV, raising=False)
    yield
    logger.remove()


@pytest.fixture
def fake_client(monkeypatch) -> FakeClient:
    client = FakeClient()
    monkeypatch.setattr('oaicli.config.Client', client)
    return client
