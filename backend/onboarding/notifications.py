"""
User-visible notifications ("toasts").

Two kinds exist: `destructive` for errors the user must act on and `info` for
confirmations. Messages are plain text; rendering escapes them.
"""

from __future__ import annotations

from dataclasses import dataclass

DESTRUCTIVE = "destructive"
INFO = "info"


@dataclass(frozen=True)
class Notification:
    kind: str
    title: str
    description: str

    @property
    def is_destructive(self) -> bool:
        return self.kind == DESTRUCTIVE


MISSING_INFORMATION = Notification(DESTRUCTIVE, "Missing Information", "Please fill in all required fields.")


def error(message: str) -> Notification:
    return Notification(DESTRUCTIVE, "Error", message)


def profile_created(role: str) -> Notification:
    return Notification(INFO, "Profile Created!", f"Your {role} profile has been created successfully.")


__all__ = ["Notification", "DESTRUCTIVE", "INFO", "MISSING_INFORMATION", "error", "profile_created"]
