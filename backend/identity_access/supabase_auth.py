"""
Thin adapter around the hosted auth service (Supabase GoTrue).

This module is framework-agnostic: the web layer calls `sign_in`/`sign_up`
with form values and receives an `AuthResult` it can turn into a server-side
session. Any failure reported by the auth service is raised as
`AuthServiceError` carrying the service's message, so the auth screen can
show it without knowing the client library's exception types.

Security: Never log credentials or tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class AuthServiceError(Exception):
    """Sign-in or sign-up was rejected by the auth service."""


@dataclass(frozen=True)
class AuthResult:
    user_id: str
    email: str
    access_token: str
    expires_in: int


class SupabaseAuthClient:
    """Email/password authentication against Supabase.

    The wrapped client is duck-typed: anything exposing
    `.auth.sign_in_with_password`, `.auth.sign_up` and `.auth.admin.sign_out`
    (e.g. `supabase.create_client(url, anon_key)`) works.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def sign_in(self, *, email: str, password: str) -> AuthResult:
        try:
            res = self._client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:
            raise AuthServiceError(_message_of(exc)) from exc
        return self._to_result(res, email=email)

    def sign_up(self, *, email: str, password: str) -> AuthResult | None:
        """Create an account.

        Returns None when the project requires email confirmation: GoTrue then
        answers without a session and the user must confirm before signing in.
        """
        try:
            res = self._client.auth.sign_up({"email": email, "password": password})
        except Exception as exc:
            raise AuthServiceError(_message_of(exc)) from exc
        if getattr(res, "session", None) is None:
            return None
        return self._to_result(res, email=email)

    def sign_out(self, access_token: str) -> None:
        """Revoke the user's refresh tokens.

        Uses the token-scoped logout endpoint so a shared client never signs
        out a different user than the one whose session is ending.
        """
        try:
            self._client.auth.admin.sign_out(access_token)
        except Exception as exc:
            raise AuthServiceError(_message_of(exc)) from exc

    @staticmethod
    def _to_result(res: Any, *, email: str) -> AuthResult:
        session = getattr(res, "session", None)
        user = getattr(res, "user", None) or getattr(session, "user", None)
        user_id = str(getattr(user, "id", "") or "")
        token = str(getattr(session, "access_token", "") or "")
        if not user_id or not token:
            raise AuthServiceError("No session returned by the auth service.")
        expires_in = int(getattr(session, "expires_in", 0) or 3600)
        return AuthResult(
            user_id=user_id,
            email=str(getattr(user, "email", "") or email),
            access_token=token,
            expires_in=expires_in,
        )


def _message_of(exc: Exception) -> str:
    msg: Optional[str] = getattr(exc, "message", None)
    return str(msg or exc) or exc.__class__.__name__


__all__ = ["AuthResult", "AuthServiceError", "SupabaseAuthClient"]
