"""
Authentication routes: the /auth screen, sign-in/sign-up and sign-out.

Why:
    Keep auth endpoints in a dedicated router; shared stores and cookie policy
    live in `state` so this module and `main` see the same instances.

Flow:
    GET /auth renders the form with a one-time token from the StateStore (no
    session exists yet, so it doubles as CSRF protection). POST /auth consumes
    the token, calls the hosted auth service and, on success, creates a
    server-side session and sets the opaque cookie before redirecting to the
    validated in-app target (default `/role-select`).

Security:
    - All responses carry `Cache-Control: private, no-store`.
    - Never log emails, passwords or tokens.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from components import AuthForm, Layout
from identity_access.supabase_auth import AuthResult, AuthServiceError, SupabaseAuthClient
from onboarding.navigation import ROLE_SELECT_PATH

import config
import state
from routes.security import is_inapp_path, is_same_origin

auth_router = APIRouter(tags=["Auth"])  # explicit paths, no prefix
logger = logging.getLogger("tutorconnect.web.auth")

NO_STORE = {"Cache-Control": "private, no-store"}
CONFIRM_EMAIL_INFO = "Check your email to confirm your account, then sign in."
SERVICE_UNAVAILABLE = "Authentication service is not configured."

AUTH_CLIENT: Optional[SupabaseAuthClient] = None


def set_auth_client(client: Optional[SupabaseAuthClient]) -> None:
    """Inject the auth client (wiring at startup, fakes in tests)."""
    global AUTH_CLIENT
    AUTH_CLIENT = client


def _render_auth_page(
    request: Request,
    *,
    email: str = "",
    error: Optional[str] = None,
    info: Optional[str] = None,
    redirect: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    rec = state.STATE_STORE.create(redirect=redirect)
    form = AuthForm(rec.state, email=email, error=error, info=info)
    content = f"""
    <div class="container auth-container">
        <section class="card auth-card" aria-labelledby="auth-heading">
            <h1 id="auth-heading">Welcome to TutorConnect</h1>
            <p class="text-muted">Sign in or create an account to get started.</p>
            {form.render()}
        </section>
    </div>
    """
    layout = Layout(title="Sign in", content=content, current_path=request.url.path)
    return state.layout_response(request, layout, status_code=status_code, headers=dict(NO_STORE))


@auth_router.get("/auth", response_class=HTMLResponse)
async def auth_page(request: Request, redirect: str | None = None):
    """Render the sign-in / sign-up form.

    A visitor who already has a valid session goes straight on to the role
    screen. `redirect` is kept only when it is an in-app path.
    """
    if state.SESSION_GUARD.resolve(state.get_session_id(request)):
        return RedirectResponse(url=ROLE_SELECT_PATH, status_code=302, headers=dict(NO_STORE))
    safe_redirect = redirect if is_inapp_path(redirect) else None
    return _render_auth_page(request, redirect=safe_redirect)


@auth_router.post("/auth")
async def auth_submit(request: Request):
    """Sign in (mode=sign_in) or create an account (mode=sign_up).

    Behavior:
        - Invalid or reused form token, or cross-origin post → 403.
        - Empty email/password → form re-rendered with an error (400).
        - Auth service rejection → form re-rendered with its message (400).
        - Sign-up that needs email confirmation → form re-rendered with info.
        - Success → session created, cookie set, 303 to the target.
    """
    form = await request.form()
    rec = state.STATE_STORE.pop_valid(str(form.get("csrf_token") or ""))
    if rec is None or not is_same_origin(request):
        return Response("CSRF Error", status_code=403, headers=dict(NO_STORE))

    email = str(form.get("email") or "").strip()
    password = str(form.get("password") or "")
    mode = str(form.get("mode") or "sign_in")
    if not email or not password:
        return _render_auth_page(
            request, email=email, error="Email and password are required.", redirect=rec.redirect, status_code=400
        )
    if AUTH_CLIENT is None:
        logger.warning("Auth submit without configured auth client")
        return _render_auth_page(request, email=email, error=SERVICE_UNAVAILABLE, redirect=rec.redirect, status_code=503)

    try:
        if mode == "sign_up":
            result: AuthResult | None = await asyncio.to_thread(AUTH_CLIENT.sign_up, email=email, password=password)
        else:
            result = await asyncio.to_thread(AUTH_CLIENT.sign_in, email=email, password=password)
    except AuthServiceError as exc:
        logger.info("Auth rejected: mode=%s", mode)
        return _render_auth_page(request, email=email, error=str(exc), redirect=rec.redirect, status_code=400)

    if result is None:
        logger.info("Sign-up pending email confirmation")
        return _render_auth_page(request, email=email, info=CONFIRM_EMAIL_INFO, redirect=rec.redirect)

    ttl = min(config.session_ttl_seconds(), result.expires_in) if result.expires_in else config.session_ttl_seconds()
    sess = state.SESSION_STORE.create(
        user_id=result.user_id,
        email=result.email,
        access_token=result.access_token,
        ttl_seconds=ttl,
    )
    logger.info("Session created: mode=%s", mode)
    try:
        state.sweep_expired_sessions()
    except Exception as exc:
        logger.warning("Expired session sweep failed: %s", exc.__class__.__name__)
    dest = rec.redirect if is_inapp_path(rec.redirect) else ROLE_SELECT_PATH
    resp = RedirectResponse(url=dest, status_code=303, headers=dict(NO_STORE))
    state.set_session_cookie(resp, sess.session_id, max_age=ttl)
    return resp


@auth_router.post("/auth/logout")
async def auth_logout(request: Request):
    """Sign out: delete the server-side session, expire the cookie, go home.

    Requires the session's CSRF token. A missing or expired session still
    clears the cookie so the browser ends up signed out either way.
    """
    sid = state.get_session_id(request)
    form = await request.form()
    ctx = state.SESSION_GUARD.resolve(sid)
    if ctx is not None:
        if not is_same_origin(request) or not state.validate_csrf(sid, form.get("csrf_token")):
            return Response("CSRF Error", status_code=403, headers=dict(NO_STORE))
    if sid:
        try:
            state.SESSION_STORE.delete(sid)
        except Exception as exc:
            logger.warning("Session delete failed during logout: %s", exc.__class__.__name__)
        state.forget_session(sid)
    if ctx is not None and ctx.access_token and AUTH_CLIENT is not None:
        try:
            await asyncio.to_thread(AUTH_CLIENT.sign_out, ctx.access_token)
        except AuthServiceError as exc:
            logger.warning("Auth service sign-out failed: %s", exc.__class__.__name__)
    resp = RedirectResponse(url="/", status_code=303, headers=dict(NO_STORE))
    state.clear_session_cookie(resp)
    return resp


__all__ = ["auth_router", "set_auth_client"]
