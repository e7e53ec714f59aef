"""
Supabase-backed onboarding repos (PostgREST tables).

The client is duck-typed: anything exposing `.table(name)` returning a query
builder with `.insert(row)` / `.upsert(row, on_conflict=...)` and
`.execute()` works, e.g. `supabase.create_client(url, service_role_key)`.

Conflict detection:
    PostgREST forwards Postgres errors as `postgrest.exceptions.APIError` with
    the SQLSTATE in `.code`. Only `23505` (unique violation) on `user_roles`
    is mapped to `DuplicateAssignmentError`; every other failure becomes a
    store error carrying the service's message.

Security:
    Use the service role key server-side only. Row ownership is enforced by
    always writing the session's user id (RLS policies mirror this for
    user-scoped clients, see supabase/migrations).
"""
from __future__ import annotations

from typing import Any, Mapping

from postgrest.exceptions import APIError

from .ports import (
    UNIQUE_VIOLATION,
    DuplicateAssignmentError,
    ProfileStoreError,
    RoleStoreError,
)

ROLES_TABLE = "user_roles"
PROFILE_TABLES = {
    "student": "student_profiles",
    "tutor": "tutor_profiles",
}


def _api_message(exc: Exception) -> str:
    msg = getattr(exc, "message", None)
    return str(msg or exc) or exc.__class__.__name__


class SupabaseRoleAssignmentRepo:
    def __init__(self, client: Any, table: str = ROLES_TABLE) -> None:
        self._client = client
        self._table = table

    def insert_role(self, *, user_id: str, role: str) -> None:
        try:
            self._client.table(self._table).insert({"user_id": user_id, "role": role}).execute()
        except APIError as exc:
            if str(getattr(exc, "code", "") or "") == UNIQUE_VIOLATION:
                raise DuplicateAssignmentError(_api_message(exc)) from exc
            raise RoleStoreError(_api_message(exc)) from exc
        except Exception as exc:
            # Transport errors (timeouts, DNS, TLS) surface with their own text.
            raise RoleStoreError(_api_message(exc)) from exc


class SupabaseProfileRepo:
    def __init__(self, client: Any) -> None:
        self._client = client

    def save_profile(self, *, user_id: str, role: str, profile: Mapping[str, Any]) -> None:
        table = PROFILE_TABLES.get(role)
        if table is None:
            raise ValueError("invalid_role")
        row = dict(profile)
        row["user_id"] = user_id
        try:
            self._client.table(table).upsert(row, on_conflict="user_id").execute()
        except Exception as exc:
            raise ProfileStoreError(_api_message(exc)) from exc


__all__ = ["SupabaseRoleAssignmentRepo", "SupabaseProfileRepo", "ROLES_TABLE", "PROFILE_TABLES"]
