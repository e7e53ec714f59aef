"""
SSR UI: /auth and /auth/logout

Focus: one-time form tokens, session cookie on success, service errors
shown in the form, email confirmation flow, sign-out clears everything.
"""

from __future__ import annotations

import pytest

import main  # type: ignore
import state  # type: ignore
from identity_access.supabase_auth import AuthResult, AuthServiceError
from routes import auth as auth_routes  # type: ignore
from utils.web import client_for, extract_csrf_token, new_session

pytestmark = pytest.mark.anyio("asyncio")


class FakeAuthClient:
    def __init__(self, *, result=None, error=None, sign_up_result="same"):
        self.result = result or AuthResult(
            user_id="u-7", email="ana@example.com", access_token="tok-7", expires_in=3600
        )
        self.error = error
        self.sign_up_result = self.result if sign_up_result == "same" else sign_up_result
        self.calls = []

    def sign_in(self, *, email, password):
        self.calls.append(("sign_in", email))
        if self.error:
            raise self.error
        return self.result

    def sign_up(self, *, email, password):
        self.calls.append(("sign_up", email))
        if self.error:
            raise self.error
        return self.sign_up_result

    def sign_out(self, access_token):
        self.calls.append(("sign_out", access_token))


async def _form_token(client, path: str = "/auth") -> str:
    r = await client.get(path)
    assert r.status_code == 200
    token = extract_csrf_token(r.text)
    assert token
    return token


def _session_cookie(response) -> str | None:
    for header in response.headers.get_list("set-cookie"):
        name, _, rest = header.partition("=")
        if name == state.SESSION_COOKIE_NAME:
            return rest.split(";", 1)[0]
    return None


@pytest.mark.anyio
async def test_auth_page_renders_form_with_no_store():
    async with client_for(main.app) as client:
        r = await client.get("/auth")
    assert r.status_code == 200
    assert 'name="email"' in r.text
    assert 'name="password"' in r.text
    assert r.headers.get("Cache-Control") == "private, no-store"


@pytest.mark.anyio
async def test_signed_in_visitor_skips_auth_page():
    sid = new_session()
    async with client_for(main.app, sid) as client:
        r = await client.get("/auth", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers.get("location") == "/role-select"


@pytest.mark.anyio
async def test_sign_in_creates_session_and_redirects_to_role_select():
    fake = FakeAuthClient()
    auth_routes.set_auth_client(fake)
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post(
            "/auth",
            data={"csrf_token": token, "email": "ana@example.com", "password": "pw", "mode": "sign_in"},
            follow_redirects=False,
        )

    assert r.status_code == 303
    assert r.headers.get("location") == "/role-select"
    sid = _session_cookie(r)
    assert sid
    cookie_header = next(h for h in r.headers.get_list("set-cookie") if h.startswith(state.SESSION_COOKIE_NAME))
    assert "HttpOnly" in cookie_header
    assert "Secure" in cookie_header
    assert "samesite=lax" in cookie_header.lower()

    rec = state.SESSION_STORE.get(sid)
    assert rec is not None
    assert rec.user_id == "u-7"
    assert fake.calls == [("sign_in", "ana@example.com")]


@pytest.mark.anyio
async def test_sign_in_honours_inapp_redirect_only():
    auth_routes.set_auth_client(FakeAuthClient())
    async with client_for(main.app) as client:
        token = await _form_token(client, "/auth?redirect=/profile/tutor")
        r_ok = await client.post(
            "/auth", data={"csrf_token": token, "email": "a@b.c", "password": "pw"}, follow_redirects=False
        )
    async with client_for(main.app) as client:
        token = await _form_token(client, "/auth?redirect=//evil.example/x")
        r_bad = await client.post(
            "/auth", data={"csrf_token": token, "email": "a@b.c", "password": "pw"}, follow_redirects=False
        )
    assert r_ok.headers.get("location") == "/profile/tutor"
    assert r_bad.headers.get("location") == "/role-select"


@pytest.mark.anyio
async def test_form_token_is_single_use():
    fake = FakeAuthClient()
    auth_routes.set_auth_client(fake)
    async with client_for(main.app) as client:
        token = await _form_token(client)
        data = {"csrf_token": token, "email": "ana@example.com", "password": "pw"}
        first = await client.post("/auth", data=data, follow_redirects=False)
        second = await client.post("/auth", data=data, follow_redirects=False)
    assert first.status_code == 303
    assert second.status_code == 403
    assert len(fake.calls) == 1


@pytest.mark.anyio
async def test_service_error_is_shown_in_form():
    auth_routes.set_auth_client(FakeAuthClient(error=AuthServiceError("Invalid login credentials")))
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post(
            "/auth",
            data={"csrf_token": token, "email": "ana@example.com", "password": "wrong"},
            follow_redirects=False,
        )
    assert r.status_code == 400
    assert "Invalid login credentials" in r.text
    assert 'value="ana@example.com"' in r.text
    assert _session_cookie(r) is None
    # The re-rendered form carries a fresh token.
    assert extract_csrf_token(r.text) not in (None, token)


@pytest.mark.anyio
async def test_empty_credentials_are_rejected_without_service_call():
    fake = FakeAuthClient()
    auth_routes.set_auth_client(fake)
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post("/auth", data={"csrf_token": token, "email": " ", "password": ""})
    assert r.status_code == 400
    assert "Email and password are required." in r.text
    assert fake.calls == []


@pytest.mark.anyio
async def test_sign_up_pending_confirmation_shows_info():
    fake = FakeAuthClient(sign_up_result=None)
    auth_routes.set_auth_client(fake)
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post(
            "/auth",
            data={"csrf_token": token, "email": "new@example.com", "password": "pw", "mode": "sign_up"},
            follow_redirects=False,
        )
    assert r.status_code == 200
    assert auth_routes.CONFIRM_EMAIL_INFO in r.text
    assert _session_cookie(r) is None
    assert fake.calls == [("sign_up", "new@example.com")]


@pytest.mark.anyio
async def test_missing_auth_client_returns_503():
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post("/auth", data={"csrf_token": token, "email": "a@b.c", "password": "pw"})
    assert r.status_code == 503
    assert auth_routes.SERVICE_UNAVAILABLE in r.text


@pytest.mark.anyio
async def test_logout_deletes_session_and_clears_cookie():
    fake = FakeAuthClient()
    auth_routes.set_auth_client(fake)
    sid = new_session(user_id="u-1")
    async with client_for(main.app, sid) as client:
        page = await client.get("/role-select")
        csrf = extract_csrf_token(page.text)
        r = await client.post("/auth/logout", data={"csrf_token": csrf}, follow_redirects=False)

    assert r.status_code == 303
    assert r.headers.get("location") == "/"
    assert state.SESSION_STORE.get(sid) is None
    assert any(
        h.startswith(f"{state.SESSION_COOKIE_NAME}=") and "Max-Age=0" in h for h in r.headers.get_list("set-cookie")
    )
    assert fake.calls == [("sign_out", "test-access-token")]


@pytest.mark.anyio
async def test_logout_with_session_requires_csrf():
    sid = new_session()
    async with client_for(main.app, sid) as client:
        r = await client.post("/auth/logout", data={"csrf_token": "forged"}, follow_redirects=False)
    assert r.status_code == 403
    assert state.SESSION_STORE.get(sid) is not None


@pytest.mark.anyio
async def test_logout_without_session_still_clears_cookie():
    async with client_for(main.app, "stale") as client:
        r = await client.post("/auth/logout", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers.get("location") == "/"


@pytest.mark.anyio
async def test_abandoned_form_tokens_do_not_accumulate():
    async with client_for(main.app) as client:
        for _ in range(50):
            await client.get("/auth")
        assert len(state.STATE_STORE._data) == 50
        for rec in state.STATE_STORE._data.values():
            rec.expires_at = 0
        await client.get("/auth")
    assert len(state.STATE_STORE._data) == 1


@pytest.mark.anyio
async def test_sign_in_sweeps_expired_sessions():
    auth_routes.set_auth_client(FakeAuthClient())
    stale = state.SESSION_STORE.create(user_id="u-old", email="", access_token="t", ttl_seconds=-1).session_id
    state.get_or_create_csrf_token(stale)
    async with client_for(main.app) as client:
        token = await _form_token(client)
        r = await client.post(
            "/auth", data={"csrf_token": token, "email": "ana@example.com", "password": "pw"}, follow_redirects=False
        )
    assert r.status_code == 303
    assert stale not in state._CSRF_BY_SESSION
    assert stale not in state.SESSION_STORE._data
