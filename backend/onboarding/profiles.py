"""
Profile Form Controller: validate a draft, persist it once, then navigate.

Ordering is fixed: all required fields are checked first; only a complete
draft reaches the store; navigation happens only after the store accepted the
profile. A failed write leaves the user on the form with an error toast.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from . import notifications
from .drafts import ProfileDraft, draft_values, missing_fields
from .navigation import destination_for, profile_submitted_outcome
from .notifications import Notification
from .ports import ProfileRepoProtocol, ProfileStoreError

logger = logging.getLogger("tutorconnect.onboarding.profiles")


@dataclass(frozen=True)
class ProfileSubmission:
    accepted: bool
    draft: ProfileDraft
    notification: Notification
    destination: Optional[str] = None
    missing: tuple[str, ...] = ()


def profile_row(user_id: str, draft: ProfileDraft) -> dict[str, object]:
    """Row shape shared by the store adapters (subjects as a list)."""
    row: dict[str, object] = {"user_id": user_id}
    for name, value in draft_values(draft).items():
        row[name] = list(value) if name == "subjects" else value
    return row


class ProfileSubmissionService:
    def __init__(self, repo: ProfileRepoProtocol) -> None:
        self._repo = repo

    async def submit(self, user_id: str, draft: ProfileDraft) -> ProfileSubmission:
        """Submit a profile draft for the signed-in user.

        Behavior:
            - Missing required fields → one aggregated "Missing Information"
              notification; the draft is returned unchanged for re-rendering.
            - Store failure → "Error" notification with the store's message.
            - Success → "Profile Created!" and the role's next screen.
        """
        if not user_id:
            raise ValueError("missing_user_id")
        missing = missing_fields(draft)
        if missing:
            return ProfileSubmission(
                accepted=False,
                draft=draft,
                notification=notifications.MISSING_INFORMATION,
                missing=tuple(missing),
            )
        try:
            await asyncio.to_thread(
                self._repo.save_profile,
                user_id=user_id,
                role=draft.role,
                profile=profile_row(user_id, draft),
            )
        except ProfileStoreError as exc:
            logger.warning("Profile save failed: role=%s error=%s", draft.role, exc.__class__.__name__)
            return ProfileSubmission(
                accepted=False,
                draft=draft,
                notification=notifications.error(str(exc) or "Could not save your profile."),
            )
        logger.info("Profile created: role=%s", draft.role)
        return ProfileSubmission(
            accepted=True,
            draft=draft,
            notification=notifications.profile_created(draft.role),
            destination=destination_for(profile_submitted_outcome(draft.role)),
        )


__all__ = ["ProfileSubmission", "ProfileSubmissionService", "profile_row"]
