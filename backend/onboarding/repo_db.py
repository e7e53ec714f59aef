"""
Postgres-backed onboarding repos (direct psycopg3 connection).

Security:
- Connect with a limited login role so Row Level Security guards every write.
- Each transaction sets `request.jwt.claim.sub` to the session's user id, which
  is what `auth.uid()` reads in the RLS policies (see supabase/migrations).

Design:
- Minimal psycopg3 usage; each call opens a short-lived connection and commits
  when the `with` block exits.
- Unique violations (SQLSTATE 23505) on `user_roles` become
  `DuplicateAssignmentError`; all other database errors become store errors.
"""
from __future__ import annotations

import os
from typing import Any, Mapping

import psycopg
from psycopg.errors import UniqueViolation

from .ports import (
    UNIQUE_VIOLATION,
    DuplicateAssignmentError,
    ProfileStoreError,
    RoleStoreError,
)

_STUDENT_COLUMNS = (
    "name",
    "age",
    "grade",
    "subjects",
    "availability",
    "budget",
    "location",
    "special_requirements",
)
_TUTOR_COLUMNS = (
    "name",
    "email",
    "phone",
    "subjects",
    "education",
    "experience",
    "bio",
    "availability",
    "hourly_rate",
    "location",
    "travel_radius",
)
_PROFILE_TABLES: dict[str, tuple[str, tuple[str, ...]]] = {
    "student": ("public.student_profiles", _STUDENT_COLUMNS),
    "tutor": ("public.tutor_profiles", _TUTOR_COLUMNS),
}


def _dsn() -> str:
    for dsn in (os.getenv("ONBOARDING_DATABASE_URL"), os.getenv("DATABASE_URL"), os.getenv("SUPABASE_DB_URL")):
        if dsn:
            return dsn
    raise RuntimeError("Database DSN unavailable for onboarding repos")


def _is_unique_violation(exc: Exception) -> bool:
    sqlstate = getattr(exc, "sqlstate", None) or getattr(exc, "pgcode", None)
    return isinstance(exc, UniqueViolation) or sqlstate == UNIQUE_VIOLATION


def _bind_user(cur: Any, user_id: str) -> None:
    cur.execute("select set_config('request.jwt.claim.sub', %s, true)", (user_id,))


def _upsert_sql(table: str, columns: tuple[str, ...]) -> str:
    cols = ", ".join(("user_id",) + columns)
    placeholders = ", ".join(["%s"] * (len(columns) + 1))
    updates = ", ".join(f"{c} = excluded.{c}" for c in columns)
    return (
        f"insert into {table} ({cols}) values ({placeholders}) "
        f"on conflict (user_id) do update set {updates}, updated_at = now()"
    )


class DBRoleAssignmentRepo:
    def __init__(self, dsn: str | None = None) -> None:
        self._dsn = dsn or _dsn()

    def insert_role(self, *, user_id: str, role: str) -> None:
        try:
            with psycopg.connect(self._dsn) as conn:
                with conn.cursor() as cur:
                    _bind_user(cur, user_id)
                    cur.execute(
                        "insert into public.user_roles (user_id, role) values (%s, %s)",
                        (user_id, role),
                    )
        except Exception as exc:
            if _is_unique_violation(exc):
                raise DuplicateAssignmentError(str(exc)) from exc
            raise RoleStoreError(str(exc) or exc.__class__.__name__) from exc


class DBProfileRepo:
    def __init__(self, dsn: str | None = None) -> None:
        self._dsn = dsn or _dsn()

    def save_profile(self, *, user_id: str, role: str, profile: Mapping[str, Any]) -> None:
        try:
            table, columns = _PROFILE_TABLES[role]
        except KeyError:
            raise ValueError("invalid_role") from None
        params = [user_id]
        for column in columns:
            value = profile.get(column)
            params.append(list(value or []) if column == "subjects" else str(value or ""))
        try:
            with psycopg.connect(self._dsn) as conn:
                with conn.cursor() as cur:
                    _bind_user(cur, user_id)
                    cur.execute(_upsert_sql(table, columns), params)
        except Exception as exc:
            raise ProfileStoreError(str(exc) or exc.__class__.__name__) from exc


__all__ = ["DBRoleAssignmentRepo", "DBProfileRepo"]
