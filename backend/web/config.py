"""
Configuration and startup security checks for TutorConnect.

Why: Student profiles contain personal data (age, location, special
requirements). This module refuses to start a production-like deployment
whose configuration would leak or lose that data, while local development
stays permissive.

Permissions: The caller needs no special privileges. The function reads
environment variables and raises `SystemExit` on fatal misconfiguration.
"""
from __future__ import annotations

import os

ONBOARDING_BACKENDS = frozenset({"memory", "supabase", "db"})
DATABASE_URL_VARS = ("ONBOARDING_DATABASE_URL", "DATABASE_URL", "SUPABASE_DB_URL")


def is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def current_environment() -> str:
    return (os.getenv("TUTORCONNECT_ENV", "dev") or "dev").strip().lower()


def onboarding_backend() -> str:
    """Selected persistence for roles and profiles (memory | supabase | db)."""
    value = (os.getenv("ONBOARDING_BACKEND", "memory") or "memory").strip().lower()
    return value if value in ONBOARDING_BACKENDS else "memory"


def onboarding_database_url() -> str:
    """First DSN set among ONBOARDING_DATABASE_URL, DATABASE_URL, SUPABASE_DB_URL (same order as the db repos)."""
    for name in DATABASE_URL_VARS:
        dsn = (os.getenv(name) or "").strip()
        if dsn:
            return dsn
    return ""


def session_ttl_seconds() -> int:
    raw = (os.getenv("SESSION_TTL_SECONDS") or "").strip()
    try:
        ttl = int(raw) if raw else 3600
    except ValueError:
        ttl = 3600
    return max(60, min(ttl, 7 * 24 * 3600))


def ensure_secure_config_on_startup() -> None:
    """Fail fast on insecure production configuration.

    Checks (prod/stage only):
    - SUPABASE_URL must be set and use https.
    - SUPABASE_ANON_KEY must be set (sign-in) and not a placeholder.
    - SUPABASE_SERVICE_ROLE_KEY must be set when ONBOARDING_BACKEND=supabase.
    - DATABASE_URL must not disable TLS when ONBOARDING_BACKEND=db.
    - The in-memory onboarding backend is not allowed (data would be lost
      on restart and diverge across instances).
    """
    if not is_prod_like(current_environment()):
        return

    url = (os.getenv("SUPABASE_URL", "") or "").strip()
    if not url:
        raise SystemExit("Refusing to start: SUPABASE_URL is unset in production.")
    if url.lower().startswith("http://"):
        raise SystemExit("Refusing to start: SUPABASE_URL must use https in production (got http).")

    anon = (os.getenv("SUPABASE_ANON_KEY", "") or "").strip()
    if not anon or anon.upper() == "DUMMY_DO_NOT_USE":
        raise SystemExit("Refusing to start: SUPABASE_ANON_KEY is unset or a dummy placeholder in production.")

    backend = onboarding_backend()
    if backend == "memory":
        raise SystemExit(
            "Refusing to start: ONBOARDING_BACKEND=memory is not allowed in production/staging. "
            "Use 'supabase' or 'db'."
        )
    if backend == "supabase":
        srole = (os.getenv("SUPABASE_SERVICE_ROLE_KEY", "") or "").strip()
        if not srole or srole.upper() == "DUMMY_DO_NOT_USE":
            raise SystemExit(
                "Refusing to start: SUPABASE_SERVICE_ROLE_KEY is unset or a dummy placeholder in production."
            )
    if backend == "db":
        dsn = onboarding_database_url()
        if not dsn:
            raise SystemExit(
                "Refusing to start: ONBOARDING_BACKEND=db requires ONBOARDING_DATABASE_URL, DATABASE_URL or SUPABASE_DB_URL."
            )
        if "sslmode=disable" in dsn:
            raise SystemExit(
                "Refusing to start: DATABASE_URL contains sslmode=disable in production. Use sslmode=require or verify TLS."
            )
