"""
Profile drafts and the reducer that edits them.

Why:
    A draft is the not-yet-persisted profile a user is filling in. Drafts are
    frozen dataclasses; every edit goes through `reduce(draft, action)` and
    returns a new draft. Validation and submission therefore work on plain
    values and can be tested without a browser.

Actions:
    - `SetField(name, value)` replaces one free-text/select field.
    - `ToggleSubject(subject)` adds the subject if absent, removes it if
      present. Applying the same toggle twice restores the original draft.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Mapping, Union

from .catalog import GRADES, SUBJECTS


@dataclass(frozen=True)
class StudentProfileDraft:
    name: str = ""
    age: str = ""
    grade: str = ""
    subjects: tuple[str, ...] = ()
    availability: str = ""
    budget: str = ""
    location: str = ""
    special_requirements: str = ""

    role = "student"
    required = ("name", "age", "grade", "subjects")


@dataclass(frozen=True)
class TutorProfileDraft:
    name: str = ""
    email: str = ""
    phone: str = ""
    subjects: tuple[str, ...] = ()
    education: str = ""
    experience: str = ""
    bio: str = ""
    availability: str = ""
    hourly_rate: str = ""
    location: str = ""
    travel_radius: str = ""

    role = "tutor"
    required = ("name", "email", "subjects", "hourly_rate")


ProfileDraft = Union[StudentProfileDraft, TutorProfileDraft]

_DRAFTS: dict[str, type] = {
    "student": StudentProfileDraft,
    "tutor": TutorProfileDraft,
}


@dataclass(frozen=True)
class SetField:
    name: str
    value: str


@dataclass(frozen=True)
class ToggleSubject:
    subject: str


Action = Union[SetField, ToggleSubject]


def empty_draft(role: str) -> ProfileDraft:
    try:
        return _DRAFTS[role]()
    except KeyError:
        raise ValueError("invalid_role") from None


def text_fields(draft: ProfileDraft) -> tuple[str, ...]:
    """Names of the fields `SetField` may target (everything but subjects)."""
    return tuple(f.name for f in fields(draft) if f.name != "subjects")


def reduce(draft: ProfileDraft, action: Action) -> ProfileDraft:
    """Apply one action and return the resulting draft.

    Raises ValueError for unknown field names and subjects outside the
    catalogue; the input draft is never modified.
    """
    if isinstance(action, ToggleSubject):
        if action.subject not in SUBJECTS:
            raise ValueError("unknown_subject")
        if action.subject in draft.subjects:
            subjects = tuple(s for s in draft.subjects if s != action.subject)
        else:
            subjects = draft.subjects + (action.subject,)
        return replace(draft, subjects=subjects)
    if isinstance(action, SetField):
        if action.name not in text_fields(draft):
            raise ValueError("unknown_field")
        return replace(draft, **{action.name: action.value})
    raise TypeError(f"unsupported action: {action!r}")


def missing_fields(draft: ProfileDraft) -> list[str]:
    """Return every required field that is empty, in declaration order."""
    missing = []
    for name in draft.required:
        value = getattr(draft, name)
        if name == "subjects":
            if not value:
                missing.append(name)
        elif not str(value).strip():
            missing.append(name)
    return missing


def draft_from_form(role: str, form: Mapping[str, object], subjects: list[str] | None = None) -> ProfileDraft:
    """Build a draft from submitted form values.

    Parameters:
        role: "student" or "tutor".
        form: Mapping of field name to value; unknown keys (csrf_token, ...)
            are ignored.
        subjects: Checked subject boxes in submission order. Entries outside
            the catalogue and repeated entries are dropped.

    Behavior:
        Starts from the empty draft and applies one action per value, so the
        result is exactly what a user would get by editing field by field.
        A grade outside the fixed list is left empty and then reported as
        missing on submit.
    """
    draft = empty_draft(role)
    for name in text_fields(draft):
        raw = form.get(name)
        if raw is None:
            continue
        value = str(raw).strip()
        if name == "grade" and value not in GRADES:
            continue
        draft = reduce(draft, SetField(name, value))
    for subject in subjects or []:
        if subject in SUBJECTS and subject not in draft.subjects:
            draft = reduce(draft, ToggleSubject(subject))
    return draft


def draft_values(draft: ProfileDraft) -> dict[str, object]:
    """Field values as a plain dict (used to prefill forms and build rows)."""
    return {f.name: getattr(draft, f.name) for f in fields(draft)}


__all__ = [
    "StudentProfileDraft",
    "TutorProfileDraft",
    "ProfileDraft",
    "SetField",
    "ToggleSubject",
    "empty_draft",
    "text_fields",
    "reduce",
    "missing_fields",
    "draft_from_form",
    "draft_values",
]
