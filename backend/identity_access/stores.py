"""
In-memory stores for the web layer: StateStore and SessionStore.

Why: The auth service hands us an access token after sign-in. The browser only
ever sees an opaque session id; the token and the user identity stay
server-side until the session expires or the user signs out.

Security: Cookies carry only the opaque session id. For multi-instance
deployments, replace with a shared store exposing the same methods.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import secrets
import time


def _now() -> int:
    return int(time.time())


@dataclass
class StateRecord:
    state: str
    redirect: Optional[str]
    expires_at: int


class StateStore:
    """One-time tokens for the sign-in form (no session exists yet).

    The token doubles as CSRF protection for POST /auth and carries the
    validated in-app redirect target server-side.
    """

    def __init__(self):
        self._data: Dict[str, StateRecord] = {}

    def create(self, *, ttl_seconds: int = 900, redirect: Optional[str] = None) -> StateRecord:
        self.purge_expired()
        state = secrets.token_urlsafe(24)
        rec = StateRecord(state=state, redirect=redirect, expires_at=_now() + ttl_seconds)
        self._data[state] = rec
        return rec

    def pop_valid(self, state: str) -> Optional[StateRecord]:
        rec = self._data.pop(state, None)
        if not rec:
            return None
        if rec.expires_at < _now():
            return None
        return rec

    def purge_expired(self) -> int:
        """Drop tokens whose form was never submitted; returns how many."""
        now = _now()
        stale = [key for key, rec in self._data.items() if rec.expires_at < now]
        for key in stale:
            self._data.pop(key, None)
        return len(stale)


@dataclass
class SessionRecord:
    session_id: str
    user_id: str
    email: str
    access_token: str
    expires_at: Optional[int] = None


class SessionStore:
    def __init__(self):
        self._data: Dict[str, SessionRecord] = {}

    def create(self, *, user_id: str, email: str, access_token: str, ttl_seconds: int = 3600) -> SessionRecord:
        sid = secrets.token_urlsafe(24)
        rec = SessionRecord(
            session_id=sid,
            user_id=user_id,
            email=email,
            access_token=access_token,
            expires_at=_now() + ttl_seconds,
        )
        self._data[sid] = rec
        return rec

    def get(self, session_id: str) -> Optional[SessionRecord]:
        rec = self._data.get(session_id)
        if not rec:
            return None
        if rec.expires_at and rec.expires_at < _now():
            self._data.pop(session_id, None)
            return None
        return rec

    def delete(self, session_id: str) -> None:
        self._data.pop(session_id, None)

    def purge_expired(self) -> list[str]:
        """Drop expired sessions and return their ids so callers can forget per-session state."""
        now = _now()
        stale = [sid for sid, rec in self._data.items() if rec.expires_at and rec.expires_at < now]
        for sid in stale:
            self._data.pop(sid, None)
        return stale
