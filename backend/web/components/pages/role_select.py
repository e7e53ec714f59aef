"""
Role-selection screen content: two role cards and a link back home.
"""

from typing import Optional

from ..base import Component
from ..cards.role_card import RoleCard

ROLE_CARDS = {
    "student": dict(
        title="I'm a Student",
        description="Looking for a tutor to help with my studies. I want to find qualified educators near me.",
        highlights=(
            "Search for tutors by subject and location",
            "View tutor profiles and ratings",
            "Book sessions that fit your schedule",
        ),
        button_label="Continue as Student",
    ),
    "tutor": dict(
        title="I'm a Tutor",
        description="I want to share my knowledge and help students succeed. Connect me with learners in my area.",
        highlights=(
            "Create your professional tutor profile",
            "Set your subjects, rates, and availability",
            "Connect with students near you",
        ),
        button_label="Continue as Tutor",
    ),
}


class RoleSelectPage(Component):
    def __init__(self, csrf_token: str, *, pending_role: Optional[str] = None) -> None:
        """
        Args:
            csrf_token: Session CSRF token for the role forms
            pending_role: Role whose registration is still in flight; disables
                all cards and marks this one as loading
        """
        self.csrf_token = csrf_token
        self.pending_role = pending_role

    def render(self) -> str:
        busy = self.pending_role is not None
        cards = "".join(
            RoleCard(
                role,
                csrf_token=self.csrf_token,
                disabled=busy,
                is_loading=(role == self.pending_role),
                **meta,
            ).render()
            for role, meta in ROLE_CARDS.items()
        )
        return f"""
        <section class="role-select" aria-labelledby="role-heading">
            <h1 id="role-heading">Welcome to <span class="accent">TutorConnect</span></h1>
            <p class="lead">Choose your role to get started</p>
            <div class="role-grid">{cards}</div>
            <a class="btn btn-ghost" href="/">&larr; Back to Home</a>
        </section>
        """
