"""
Session Guard: resolve the opaque session cookie to an explicit context.

Why:
    Handlers never read an ambient "current user". The guard turns the cookie
    into a `SessionContext` once per request; the context is then passed
    explicitly to the registrar and the profile service.

Failure semantics:
    Missing cookie, unknown or expired session, and any error raised by the
    session store all mean "no session". The caller redirects to `/auth`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

logger = logging.getLogger("tutorconnect.onboarding.session")


class SessionStoreProtocol(Protocol):
    def get(self, session_id: str) -> Any:
        ...


@dataclass(frozen=True)
class SessionContext:
    session_id: str
    user_id: str
    email: str
    access_token: str


class SessionGuard:
    def __init__(self, store: SessionStoreProtocol) -> None:
        self._store = store

    def resolve(self, session_id: Optional[str]) -> Optional[SessionContext]:
        if not session_id:
            return None
        try:
            rec = self._store.get(session_id)
        except Exception as exc:
            logger.warning("Session lookup failed: %s", exc.__class__.__name__)
            return None
        if rec is None:
            return None
        user_id = str(getattr(rec, "user_id", "") or "")
        if not user_id:
            return None
        return SessionContext(
            session_id=session_id,
            user_id=user_id,
            email=str(getattr(rec, "email", "") or ""),
            access_token=str(getattr(rec, "access_token", "") or ""),
        )


__all__ = ["SessionContext", "SessionGuard", "SessionStoreProtocol"]
