"""Tests for session identity resolution"""
from starlette.requests import Request

from core.session import (
    AGENT_KEY_LENGTH,
    DerivedSession,
    ExplicitSession,
    resolve_session,
    session_from_request,
)


def make_request(headers=None, client=("203.0.113.7", 51234)):
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/add-to-cart",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


def test_explicit_header_wins():
    session = resolve_session("abc-123", "203.0.113.7", "Mozilla/5.0")

    assert session == ExplicitSession(token="abc-123")
    assert session.key == "abc-123"
    assert session.is_derived is False


def test_blank_header_falls_back_to_derived():
    session = resolve_session("  ", "203.0.113.7", "Mozilla/5.0")

    assert isinstance(session, DerivedSession)
    assert session.key == "203.0.113.7:Mozilla/5.0"
    assert session.is_derived is True


def test_derived_key_truncates_agent():
    agent = "A" * 200
    session = resolve_session(None, "203.0.113.7", agent)

    assert session.key == "203.0.113.7:" + "A" * AGENT_KEY_LENGTH


def test_derived_key_is_deterministic():
    first = resolve_session(None, "203.0.113.7", "Mozilla/5.0")
    second = resolve_session(None, "203.0.113.7", "Mozilla/5.0")

    assert first.key == second.key


def test_agents_sharing_a_prefix_collide():
    """Known weakness: agents equal up to the cut-off share a key."""
    base = "B" * AGENT_KEY_LENGTH
    first = resolve_session(None, "203.0.113.7", base + "-chrome")
    second = resolve_session(None, "203.0.113.7", base + "-firefox")

    assert first.key == second.key


def test_forwarded_for_first_hop_is_origin():
    session = resolve_session(None, "10.0.0.1", "UA", forwarded_for="198.51.100.2, 10.0.0.1")

    assert session.origin == "198.51.100.2"


def test_unknown_origin():
    session = resolve_session(None, None, None)

    assert session.key == "unknown:"


def test_session_from_request_explicit():
    request = make_request({"X-Session-Id": "widget-token", "User-Agent": "Mozilla/5.0"})

    assert session_from_request(request) == ExplicitSession(token="widget-token")


def test_session_from_request_derived():
    request = make_request({"User-Agent": "Mozilla/5.0"})

    session = session_from_request(request)

    assert session == DerivedSession(origin="203.0.113.7", agent="Mozilla/5.0")
