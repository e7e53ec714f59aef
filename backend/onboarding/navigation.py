"""
Navigator: maps onboarding outcomes to client-side routes.

Pure lookup, no I/O. Routes call `destination_for` instead of hard-coding
paths so that the flow stays in one place.
"""

from __future__ import annotations

from enum import Enum

from identity_access.domain import is_allowed_role


class Outcome(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    ROLE_CHOSEN = "role_chosen"
    STUDENT_PROFILE_SUBMITTED = "student_profile_submitted"
    TUTOR_PROFILE_SUBMITTED = "tutor_profile_submitted"


AUTH_PATH = "/auth"
ROLE_SELECT_PATH = "/role-select"
HOME_PATH = "/"

_FIXED = {
    Outcome.UNAUTHENTICATED: AUTH_PATH,
    Outcome.STUDENT_PROFILE_SUBMITTED: "/search",
    Outcome.TUTOR_PROFILE_SUBMITTED: "/dashboard",
}


def destination_for(outcome: Outcome, *, role: str | None = None) -> str:
    """Return the path the user is sent to after `outcome`.

    `ROLE_CHOSEN` needs the chosen role (`/profile/{role}`); passing an
    unknown role raises ValueError.
    """
    if outcome is Outcome.ROLE_CHOSEN:
        if not is_allowed_role(role):
            raise ValueError("invalid_role")
        return f"/profile/{role}"
    return _FIXED[outcome]


def profile_submitted_outcome(role: str) -> Outcome:
    if role == "student":
        return Outcome.STUDENT_PROFILE_SUBMITTED
    if role == "tutor":
        return Outcome.TUTOR_PROFILE_SUBMITTED
    raise ValueError("invalid_role")


__all__ = [
    "Outcome",
    "AUTH_PATH",
    "ROLE_SELECT_PATH",
    "HOME_PATH",
    "destination_for",
    "profile_submitted_outcome",
]
