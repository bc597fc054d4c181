import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from loguru import logger

from vault_client.properties import system_properties


@pytest.fixture(autouse=True)
def clean_vault_environment(monkeypatch):
    """Keep VAULT_* variables and process properties from leaking between tests."""
    for name in ("VAULT_ADDR", "VAULT_TOKEN"):
        # setenv first so teardown restores the original value, or its absence
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    system_properties.clear_all()
    yield
    system_properties.clear_all()


def _make_response(status=200, payload=None, text=None):
    resp = MagicMock()
    resp.status = status
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    resp.text = AsyncMock(return_value=text)

    async def _json(content_type="application/json"):
        # aiohttp returns None for an empty body
        return json.loads(text) if text.strip() else None

    resp.json = AsyncMock(side_effect=_json)

    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=resp)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


@pytest.fixture
def make_response():
    """Factory for async context managers yielding fake aiohttp responses."""
    return _make_response


@pytest.fixture
def fake_session():
    """A stand-in for a shared aiohttp.ClientSession.

    Tests queue responses with ``fake_session.request.side_effect = [...]``.
    """
    session = MagicMock()
    session.request = MagicMock()
    return session


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
