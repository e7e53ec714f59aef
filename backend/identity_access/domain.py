"""
Identity domain constants and simple helpers.

Why:
- Centralize the participation roles so the registrar, routes and store
  adapters cannot drift apart.
"""

from __future__ import annotations

# Closed set: a user joins TutorConnect either as a student or as a tutor.
ALLOWED_ROLES = frozenset({"student", "tutor"})


def is_allowed_role(role: object) -> bool:
    return isinstance(role, str) and role in ALLOWED_ROLES


__all__ = ["ALLOWED_ROLES", "is_allowed_role"]
