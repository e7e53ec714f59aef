"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend and give every test fresh
in-process state (stores, repos, auth client) so tests never depend on
Supabase, Postgres or each other.
"""
import sys
from pathlib import Path

import pytest

# Ensure modules in backend/ and backend/web are importable across tests
REPO_ROOT = Path(__file__).resolve().parents[2]
BACKEND_DIR = REPO_ROOT / "backend"
WEB_DIR = BACKEND_DIR / "web"
TESTS_DIR = BACKEND_DIR / "tests"
for p in (str(REPO_ROOT), str(BACKEND_DIR), str(WEB_DIR), str(TESTS_DIR)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_env_toggles(monkeypatch: pytest.MonkeyPatch):
    """Default dev environment per test; tests opt into prod explicitly."""
    for var in (
        "TUTORCONNECT_ENV",
        "TUTORCONNECT_TRUST_PROXY",
        "ONBOARDING_BACKEND",
        "SESSION_TTL_SECONDS",
        "ONBOARDING_DATABASE_URL",
        "DATABASE_URL",
        "SUPABASE_DB_URL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_web_state():
    """Fresh stores, repos and auth client for every test.

    Why:
        The app keeps process-wide singletons (session/state stores, CSRF and
        flash maps, onboarding repos). Without a reset, sessions and in-flight
        registrations leak across tests.
    """
    try:
        import state  # type: ignore
        from identity_access.stores import SessionStore, StateStore
        from onboarding.repo_memory import InMemoryProfileRepo, InMemoryRoleAssignmentRepo
        from routes import auth as auth_routes  # type: ignore
        from routes import onboarding as onboarding_routes  # type: ignore
    except ImportError:
        yield
        return

    state.STATE_STORE = StateStore()
    state.set_session_store(SessionStore())
    state._CSRF_BY_SESSION.clear()
    state._FLASH_BY_SESSION.clear()
    state.SETTINGS.override_environment(None)
    onboarding_routes.set_repos(InMemoryRoleAssignmentRepo(), InMemoryProfileRepo())
    auth_routes.set_auth_client(None)
    yield
    state.SETTINGS.override_environment(None)
