"""
Session identity for widget requests.

A session is either named explicitly by the widget (X-Session-Id header)
or derived from the connection: client address plus a truncated
User-Agent. Derived keys collide for visitors behind one NAT using the
same browser build; `is_derived` lets callers tell the two apart.
"""
from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Request

SESSION_HEADER = "X-Session-Id"

# User-Agent characters kept in a derived key
AGENT_KEY_LENGTH = 64

UNKNOWN_ORIGIN = "unknown"


@dataclass(frozen=True)
class ExplicitSession:
    token: str

    is_derived = False

    @property
    def key(self) -> str:
        return self.token


@dataclass(frozen=True)
class DerivedSession:
    origin: str
    agent: str

    is_derived = True

    @property
    def key(self) -> str:
        return f"{self.origin}:{self.agent[:AGENT_KEY_LENGTH]}"


SessionIdentity = Union[ExplicitSession, DerivedSession]


def resolve_session(
    session_header: Optional[str],
    client_host: Optional[str],
    user_agent: Optional[str],
    forwarded_for: Optional[str] = None,
) -> SessionIdentity:
    """Pick the explicit token when present, otherwise derive one."""
    if session_header and session_header.strip():
        return ExplicitSession(token=session_header.strip())

    origin = None
    if forwarded_for:
        # First hop is the original client
        origin = forwarded_for.split(",")[0].strip() or None
    origin = origin or client_host or UNKNOWN_ORIGIN
    return DerivedSession(origin=origin, agent=user_agent or "")


def session_from_request(request: Request) -> SessionIdentity:
    """FastAPI dependency: session identity of the calling widget."""
    return resolve_session(
        session_header=request.headers.get(SESSION_HEADER),
        client_host=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        forwarded_for=request.headers.get("x-forwarded-for"),
    )
