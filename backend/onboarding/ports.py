"""
Ports for onboarding persistence.

The registrar and the profile service depend only on these protocols. Store
adapters (in-memory, Supabase, Postgres) translate their client library's
errors into the exceptions below:

- `DuplicateAssignmentError`: the (user_id, role) row already exists. Adapters
  raise it only for the structured unique-violation code (SQLSTATE 23505),
  never by matching message text.
- `RoleStoreError` / `ProfileStoreError`: any other failure; `str(exc)` is the
  message shown to the user.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

UNIQUE_VIOLATION = "23505"


class RoleStoreError(Exception):
    """Role assignment could not be stored."""


class DuplicateAssignmentError(RoleStoreError):
    """The user already holds this role."""


class ProfileStoreError(Exception):
    """Profile could not be stored."""


class RoleAssignmentRepoProtocol(Protocol):
    def insert_role(self, *, user_id: str, role: str) -> None:
        ...


class ProfileRepoProtocol(Protocol):
    def save_profile(self, *, user_id: str, role: str, profile: Mapping[str, Any]) -> None:
        ...


__all__ = [
    "UNIQUE_VIOLATION",
    "RoleStoreError",
    "DuplicateAssignmentError",
    "ProfileStoreError",
    "RoleAssignmentRepoProtocol",
    "ProfileRepoProtocol",
]
