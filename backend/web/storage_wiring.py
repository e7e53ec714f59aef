"""
Shared helpers for wiring the onboarding repos and the auth client.

Why:
    Routes are created at import time with in-memory repos so the app (and
    tests) run without any external service. When configuration is present,
    these helpers swap in the Supabase or Postgres adapters and the hosted
    auth client. Both are idempotent and safe to call more than once.

Security:
    The onboarding adapters use SUPABASE_SERVICE_ROLE_KEY (server-side only)
    or a DATABASE_URL login that is subject to RLS. The auth client uses the
    public anon key. No secrets are exposed to clients or written to logs.
"""
from __future__ import annotations

import logging
import os

import config as _cfg  # type: ignore

logger = logging.getLogger("tutorconnect.web")


def wire_onboarding_repos_if_configured() -> str:
    """Inject role/profile repos for the configured ONBOARDING_BACKEND.

    Behavior:
        - "supabase": requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY.
        - "db": uses DATABASE_URL (psycopg).
        - Anything else, or missing configuration: keep the in-memory repos.

    Returns the name of the backend actually wired.
    """
    from routes import onboarding as _onboarding  # type: ignore

    backend = _cfg.onboarding_backend()
    if backend == "supabase":
        url = (os.getenv("SUPABASE_URL") or "").strip()
        key = (os.getenv("SUPABASE_SERVICE_ROLE_KEY") or "").strip()
        if not url or not key:
            logger.warning("ONBOARDING_BACKEND=supabase without SUPABASE_URL/SUPABASE_SERVICE_ROLE_KEY; using memory")
            return "memory"
        try:
            from supabase import create_client
            from onboarding.repo_supabase import SupabaseProfileRepo, SupabaseRoleAssignmentRepo

            client = create_client(url, key)
        except Exception as exc:
            logger.warning("Supabase client unavailable: %s: %s", exc.__class__.__name__, str(exc))
            return "memory"
        _onboarding.set_repos(SupabaseRoleAssignmentRepo(client), SupabaseProfileRepo(client))
        logger.info("Onboarding repos wired: Supabase")
        return "supabase"

    if backend == "db":
        from onboarding.repo_db import DBProfileRepo, DBRoleAssignmentRepo

        try:
            role_repo, profile_repo = DBRoleAssignmentRepo(), DBProfileRepo()
        except RuntimeError as exc:
            logger.warning("Onboarding DB repos unavailable: %s", str(exc))
            return "memory"
        _onboarding.set_repos(role_repo, profile_repo)
        logger.info("Onboarding repos wired: Postgres")
        return "db"

    return "memory"


def wire_auth_client_if_configured() -> bool:
    """Create the Supabase auth client from SUPABASE_URL and SUPABASE_ANON_KEY.

    Returns True when the client was wired. Without configuration the auth
    screen still renders but reports the service as unavailable on submit.
    """
    url = (os.getenv("SUPABASE_URL") or "").strip()
    key = (os.getenv("SUPABASE_ANON_KEY") or "").strip()
    if not url or not key:
        return False
    try:
        from supabase import create_client
        from identity_access.supabase_auth import SupabaseAuthClient
        from routes import auth as _auth  # type: ignore

        _auth.set_auth_client(SupabaseAuthClient(create_client(url, key)))
    except Exception as exc:
        logger.warning("Auth client wiring skipped: %s: %s", exc.__class__.__name__, str(exc))
        return False
    logger.info("Auth client wired: Supabase")
    return True


__all__ = ["wire_onboarding_repos_if_configured", "wire_auth_client_if_configured"]
