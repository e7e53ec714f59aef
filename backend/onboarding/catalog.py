"""
Fixed enumerations shared by both profile forms.

Order matters: forms render options in exactly this order.
"""

from __future__ import annotations

SUBJECTS: tuple[str, ...] = (
    "Mathematics",
    "Physics",
    "Chemistry",
    "Biology",
    "English",
    "History",
    "Geography",
    "Computer Science",
    "Music",
    "Art",
)

GRADES: tuple[str, ...] = tuple(f"Grade {n}" for n in range(1, 13)) + ("University", "Adult Learner")

__all__ = ["SUBJECTS", "GRADES"]
