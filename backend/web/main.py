"TutorConnect onboarding"
from __future__ import annotations

from pathlib import Path
import logging
import os
import sys
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles

from components import LandingPage


def _under_pytest() -> bool:
    return "pytest" in sys.modules or bool(os.getenv("PYTEST_CURRENT_TEST"))


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via TUTORCONNECT_ENABLE_DOTENV (default true
      outside pytest).
    """
    if _under_pytest():
        return False
    flag = (os.getenv("TUTORCONNECT_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


if _should_load_dotenv():
    from dotenv import load_dotenv

    load_dotenv()

import config as _cfg  # noqa: E402  (reads env after .env is loaded)

# Minimal production safety checks (fail-fast on insecure config)
_cfg.ensure_secure_config_on_startup()

import state  # noqa: E402

logger = logging.getLogger("tutorconnect.web")

app = FastAPI(
    title="TutorConnect",
    description="Find the perfect tutor near you",
    version="0.1.0",
)

# --- Static Files & Routers -----------------------------------------------------

static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

from routes.auth import auth_router  # noqa: E402
from routes.onboarding import onboarding_router  # noqa: E402
from storage_wiring import wire_auth_client_if_configured, wire_onboarding_repos_if_configured  # noqa: E402

# Wire adapters before the first request. Without configuration the app keeps
# in-memory repos and an unconfigured auth screen.
if not _under_pytest():
    logger.info("Onboarding backend: %s", wire_onboarding_repos_if_configured())
    if not wire_auth_client_if_configured():
        logger.warning("Auth client not configured (SUPABASE_URL/SUPABASE_ANON_KEY); sign-in is unavailable")

# --- Auth Middleware ------------------------------------------------------------


def _is_public_path(path: str) -> bool:
    return path == "/" or path == "/auth" or path.startswith(("/auth/", "/static/")) or path in (
        "/health",
        "/favicon.ico",
    )


@app.middleware("http")
async def auth_enforcement(request: Request, call_next):
    """Resolve the session cookie for every request; gate non-public paths.

    Public pages still get the user context when a session exists so the
    navigation can show the signed-in state.
    """
    path = request.url.path
    sid = state.get_session_id(request)
    ctx = state.SESSION_GUARD.resolve(sid)
    if ctx is not None:
        request.state.session = ctx
        # Minimal, read-only user context for components.
        request.state.user = {"user_id": ctx.user_id, "email": ctx.email}
        return await call_next(request)
    if sid:
        # Expired or unknown session: drop its CSRF token and queued flashes.
        state.forget_session(sid)

    if _is_public_path(path):
        return await call_next(request)

    if path.startswith("/api/"):
        headers = {"Cache-Control": "private, no-store", "Vary": "Origin"}
        return JSONResponse({"error": "unauthenticated"}, status_code=401, headers=headers)
    return RedirectResponse(url="/auth", status_code=302)


# --- Security Headers Middleware ----------------------------------------------


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    if _cfg.is_prod_like(state.SETTINGS.environment):
        # Harden CSP in production: no inline script/style.
        csp = (
            "default-src 'self'; script-src 'self'; style-src 'self'; "
            "img-src 'self' data:; font-src 'self' data:; connect-src 'self'; form-action 'self';"
        )
    else:
        csp = (
            "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; font-src 'self' data:; connect-src 'self'; form-action 'self';"
        )
    response.headers.setdefault("Content-Security-Policy", csp)
    response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    if _cfg.is_prod_like(state.SETTINGS.environment):
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
    response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    return response


# --- Route Handlers -------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    layout = state.page(request, title="Find the Perfect Tutor Near You", content=LandingPage().render())
    return state.layout_response(request, layout)


app.include_router(auth_router)
app.include_router(onboarding_router)


@app.get("/health")
async def health_check():
    # Minimal health endpoint used by orchestrators and tests.
    return JSONResponse({"status": "healthy"}, headers={"Cache-Control": "private, no-store"})


@app.get("/api/me")
async def get_me(request: Request):
    """Identity of the current session (user id, email, expiry)."""
    ctx = state.current_session(request)
    if ctx is None:
        return JSONResponse({"error": "unauthenticated"}, status_code=401, headers={"Cache-Control": "private, no-store"})
    rec = state.SESSION_STORE.get(ctx.session_id)
    expires_at = getattr(rec, "expires_at", None)
    exp_iso = datetime.fromtimestamp(expires_at, tz=timezone.utc).isoformat(timespec="seconds") if expires_at else None
    return JSONResponse(
        {"user_id": ctx.user_id, "email": ctx.email, "expires_at": exp_iso},
        headers={"Cache-Control": "private, no-store"},
    )


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=204)
