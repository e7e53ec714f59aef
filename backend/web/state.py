"""
Process-wide web state shared by `main` and the routers.

Why:
    Routers need the session/state stores, the session guard, CSRF tokens and
    the flash queue, while `main` needs the routers. Keeping the shared pieces
    here avoids import cycles between `main` and `routes.*`.

Security:
    - Cookies carry only the opaque session id (`HttpOnly`, `SameSite=Lax`,
      `Secure`).
    - CSRF tokens and flash messages are keyed by session id server-side.
"""
from __future__ import annotations

import hmac
import os
import secrets
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, Response

from components import Layout
from identity_access.stores import SessionStore, StateStore
from onboarding.notifications import Notification
from onboarding.session_guard import SessionContext, SessionGuard


class AppSettings:
    def __init__(self) -> None:
        self._env_override: str | None = None

    @property
    def environment(self) -> str:
        if self._env_override is not None:
            return self._env_override
        return (os.getenv("TUTORCONNECT_ENV", "dev") or "dev").lower()

    def override_environment(self, env: str | None) -> None:
        """Override environment for tests (e.g., "prod"), or reset with None."""
        self._env_override = env


SETTINGS = AppSettings()
SESSION_COOKIE_NAME = "tutorconnect_session"

STATE_STORE = StateStore()
SESSION_STORE = SessionStore()
SESSION_GUARD = SessionGuard(SESSION_STORE)


def set_session_store(store: Any) -> None:
    """Swap the session store (tests, shared stores); rebuilds the guard."""
    global SESSION_STORE, SESSION_GUARD
    SESSION_STORE = store
    SESSION_GUARD = SessionGuard(store)


# --- Cookies --------------------------------------------------------------------

def cookie_opts() -> dict:
    """Cookie flags for the session cookie.

    SameSite=Lax keeps the cookie on top-level navigations (the redirect after
    sign-in) while blocking cross-site form posts. `Secure` is always set;
    browsers accept it on http://localhost during development.
    """
    return {"secure": True, "samesite": "lax"}


def set_session_cookie(response: Response, value: str, *, max_age: int | None = None) -> None:
    opts = cookie_opts()
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=value,
        httponly=True,
        secure=opts["secure"],
        samesite=opts["samesite"],
        path="/",
        max_age=max_age,
    )


def clear_session_cookie(response: Response) -> None:
    opts = cookie_opts()
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        secure=opts["secure"],
        httponly=True,
        samesite=opts["samesite"],
    )


# --- Request context ------------------------------------------------------------

def get_session_id(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE_NAME)


def current_session(request: Request) -> Optional[SessionContext]:
    """Session context resolved by the auth middleware for this request."""
    return getattr(request.state, "session", None)


def current_user(request: Request) -> Optional[Dict[str, Any]]:
    return getattr(request.state, "user", None)


# --- CSRF -----------------------------------------------------------------------

_CSRF_BY_SESSION: dict[str, str] = {}


def get_or_create_csrf_token(session_id: str) -> str:
    token = _CSRF_BY_SESSION.get(session_id)
    if not token:
        token = secrets.token_urlsafe(24)
        _CSRF_BY_SESSION[session_id] = token
    return token


def validate_csrf(session_id: Optional[str], form_value: Optional[object]) -> bool:
    if not session_id or not form_value:
        return False
    expected = _CSRF_BY_SESSION.get(session_id)
    if not expected:
        return False
    return hmac.compare_digest(expected, str(form_value))


def forget_session(session_id: str) -> None:
    """Drop per-session web state (CSRF token, pending flashes).

    Called on sign-out and whenever a session is found expired or unknown.
    """
    _CSRF_BY_SESSION.pop(session_id, None)
    _FLASH_BY_SESSION.pop(session_id, None)


# --- Flash notifications --------------------------------------------------------

_FLASH_BY_SESSION: dict[str, List[Notification]] = {}


def push_flash(session_id: str, notification: Notification) -> None:
    """Queue a notification for the next page this session renders."""
    _FLASH_BY_SESSION.setdefault(session_id, []).append(notification)


def pop_flash(session_id: Optional[str]) -> Optional[Notification]:
    """Return the oldest queued notification (if any) and remove it."""
    if not session_id:
        return None
    queue = _FLASH_BY_SESSION.get(session_id)
    if not queue:
        return None
    notification = queue.pop(0)
    if not queue:
        _FLASH_BY_SESSION.pop(session_id, None)
    return notification


def sweep_expired_sessions() -> int:
    """Evict expired sessions and forget the web state of every dead session id.

    Covers sessions that were never looked up again (store sweep) and ids whose
    record already disappeared from the store. Returns how many ids were
    forgotten.
    """
    purge = getattr(SESSION_STORE, "purge_expired", None)
    dead = set(purge() if purge is not None else ())
    for sid in set(_CSRF_BY_SESSION) | set(_FLASH_BY_SESSION):
        if SESSION_GUARD.resolve(sid) is None:
            dead.add(sid)
    for sid in dead:
        forget_session(sid)
    return len(dead)


# --- Rendering ------------------------------------------------------------------

def page(
    request: Request,
    *,
    title: str,
    content: str,
    notification: Optional[Notification] = None,
) -> Layout:
    """Build the Layout for `request` (user, active path, sign-out token)."""
    user = current_user(request)
    sid = get_session_id(request) if user else None
    return Layout(
        title=title,
        content=content,
        user=user,
        notification=notification,
        current_path=request.url.path,
        csrf_token=get_or_create_csrf_token(sid) if sid else None,
    )


def layout_response(
    request: Request,
    layout: Layout,
    *,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    """Render Layout and return an HTMLResponse.

    Personalised pages (a user is signed in) default to
    `Cache-Control: private, no-store`; callers may override headers.
    """
    response = HTMLResponse(content=layout.render(), status_code=status_code)
    if current_user(request) and not (headers and "Cache-Control" in headers):
        response.headers["Cache-Control"] = "private, no-store"
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    return response
