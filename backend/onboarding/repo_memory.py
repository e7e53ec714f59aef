"""
In-memory onboarding repos for development and tests.

Mirrors the database constraints: one row per (user_id, role) and one profile
per user and role (later submissions replace earlier ones).
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Mapping, Set, Tuple

from .ports import DuplicateAssignmentError


class InMemoryRoleAssignmentRepo:
    def __init__(self) -> None:
        self._rows: Set[Tuple[str, str]] = set()
        self._lock = threading.Lock()

    def insert_role(self, *, user_id: str, role: str) -> None:
        with self._lock:
            key = (user_id, role)
            if key in self._rows:
                raise DuplicateAssignmentError("Role already assigned.")
            self._rows.add(key)

    def roles_for(self, user_id: str) -> list[str]:
        return sorted(role for uid, role in self._rows if uid == user_id)


class InMemoryProfileRepo:
    def __init__(self) -> None:
        self._profiles: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def save_profile(self, *, user_id: str, role: str, profile: Mapping[str, Any]) -> None:
        with self._lock:
            self._profiles[(role, user_id)] = dict(profile)

    def get_profile(self, *, user_id: str, role: str) -> Dict[str, Any] | None:
        rec = self._profiles.get((role, user_id))
        return dict(rec) if rec is not None else None


__all__ = ["InMemoryRoleAssignmentRepo", "InMemoryProfileRepo"]
