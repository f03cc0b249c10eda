import logging
import random
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from simchat.di import orchestrator, response_selector
from simchat.main import app
from simchat.rules import CONVERSATIONAL_REPLIES, GREETING_REPLY
from simchat.selector import ResponseSelector

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def spy_selector():
    clock = Mock()
    rng = Mock()
    selector = ResponseSelector(clock=clock, rng=rng)
    selector.reply = Mock(wraps=selector.reply)
    app.dependency_overrides[response_selector] = lambda: selector
    return selector, clock, rng


def test_health():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_chat_returns_reply():
    payload = {"messages": [{"role": "user", "content": "Hello!"}]}
    r = client.post("/api/chat", json=payload)
    assert r.status_code == 200
    assert r.json() == {"message": GREETING_REPLY}


def test_chat_uses_full_history():
    payload = {
        "messages": [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": GREETING_REPLY},
            {"role": "user", "content": "what is 7 + 3"},
        ]
    }
    r = client.post("/api/chat", json=payload)
    assert r.status_code == 200
    assert r.json() == {"message": "The answer is 10."}


def test_chat_empty_history_gets_fallback():
    app.dependency_overrides[response_selector] = lambda: ResponseSelector(rng=random.Random(1))
    r = client.post("/api/chat", json={"messages": []})
    assert r.status_code == 200
    assert r.json()["message"] in CONVERSATIONAL_REPLIES


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"history": []},
        {"messages": "not-an-array"},
        {"messages": None},
        {"messages": ["hello"]},
        {"messages": [{"role": "system", "content": "hello"}]},
        {"messages": [{"role": "user"}]},
    ],
)
def test_chat_rejects_malformed_messages(spy_selector, body):
    selector, clock, rng = spy_selector

    r = client.post("/api/chat", json=body)

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid messages format"}
    selector.reply.assert_not_called()
    clock.assert_not_called()
    rng.choice.assert_not_called()


def test_chat_rejects_non_json_body(spy_selector):
    selector, _, _ = spy_selector
    r = client.post(
        "/api/chat", content="not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 400
    assert "error" in r.json()
    selector.reply.assert_not_called()


def test_chat_internal_error_is_logged_and_hidden(caplog):
    mock_orch = Mock()
    mock_orch.handle = AsyncMock(side_effect=RuntimeError("secret detail"))
    app.dependency_overrides[orchestrator] = lambda: mock_orch

    with caplog.at_level(logging.ERROR, logger="simchat.main"):
        r = client.post("/api/chat", json={"messages": []})

    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
    assert "secret detail" not in r.text
    assert "Chat API error" in caplog.text


def test_failure_outside_endpoint_body_is_500():
    def broken_selector():
        raise RuntimeError("dependency failed")

    app.dependency_overrides[response_selector] = broken_selector
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.post("/api/chat", json={"messages": []})

    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
