"""
Role Registrar: record the user's chosen role with a single write.

Intent:
    One click on a role card = one insert into `user_roles`. Picking a role the
    user already holds is fine (the store reports a duplicate, we treat it as
    success). While a registration for a user is pending, further calls for
    the same user are ignored.

Concurrency:
    The per-user in-flight map is the only lock. It is entered before the write
    and released in `finally`, whatever the outcome. Store adapters are
    synchronous and run in a worker thread so the event loop keeps serving
    requests (including the ignored double click) meanwhile.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from identity_access.domain import is_allowed_role

from . import notifications
from .navigation import Outcome, destination_for
from .notifications import Notification
from .ports import DuplicateAssignmentError, RoleAssignmentRepoProtocol, RoleStoreError

logger = logging.getLogger("tutorconnect.onboarding.registrar")

REGISTERED = "registered"
DUPLICATE = "duplicate"
IGNORED = "ignored"
FAILED = "failed"


@dataclass(frozen=True)
class RoleSelection:
    outcome: str
    role: str
    destination: Optional[str] = None
    notification: Optional[Notification] = None

    @property
    def navigates(self) -> bool:
        return self.destination is not None


class RoleRegistrar:
    def __init__(self, repo: RoleAssignmentRepoProtocol) -> None:
        self._repo = repo
        self._in_flight: dict[str, str] = {}

    def is_in_flight(self, user_id: str) -> bool:
        return user_id in self._in_flight

    def pending_role(self, user_id: str) -> Optional[str]:
        """Role currently being registered for `user_id`, if any."""
        return self._in_flight.get(user_id)

    async def select_role(self, user_id: str, role: str) -> RoleSelection:
        """Register `role` for `user_id` and report where to go next.

        Raises:
            ValueError: empty user id or a role outside {student, tutor}.

        Returns:
            RoleSelection with outcome `registered`/`duplicate` (destination
            `/profile/{role}`), `ignored` (another call is pending, no write)
            or `failed` (destructive notification, no destination).
        """
        if not user_id:
            raise ValueError("missing_user_id")
        if not is_allowed_role(role):
            raise ValueError("invalid_role")
        if user_id in self._in_flight:
            logger.info("Role selection ignored: registration already in flight")
            return RoleSelection(outcome=IGNORED, role=role)

        self._in_flight[user_id] = role
        try:
            try:
                await asyncio.to_thread(self._repo.insert_role, user_id=user_id, role=role)
                outcome = REGISTERED
            except DuplicateAssignmentError:
                outcome = DUPLICATE
            except RoleStoreError as exc:
                logger.warning("Role assignment failed: %s", exc.__class__.__name__)
                return RoleSelection(outcome=FAILED, role=role, notification=notifications.error(str(exc) or "Could not save your role."))
        finally:
            self._in_flight.pop(user_id, None)

        logger.info("Role selected: role=%s outcome=%s", role, outcome)
        return RoleSelection(outcome=outcome, role=role, destination=destination_for(Outcome.ROLE_CHOSEN, role=role))


__all__ = ["RoleRegistrar", "RoleSelection", "REGISTERED", "DUPLICATE", "IGNORED", "FAILED"]
