"""
Role card: one clickable choice on the role-selection screen.

Each card is its own POST form so one click issues exactly one request. When
a registration is pending (`disabled`), every card is disabled and the
chosen card's button shows its loading label.
"""

from typing import Sequence

from ..base import Component
from ..forms.submit import SubmitButton


class RoleCard(Component):
    def __init__(
        self,
        role: str,
        *,
        title: str,
        description: str,
        highlights: Sequence[str],
        button_label: str,
        csrf_token: str,
        disabled: bool = False,
        is_loading: bool = False,
    ) -> None:
        self.role = role
        self.title = title
        self.description = description
        self.highlights = highlights
        self.button_label = button_label
        self.csrf_token = csrf_token
        self.disabled = disabled
        self.is_loading = is_loading

    def render(self) -> str:
        items = "".join(f"<li>{self.escape(h)}</li>" for h in self.highlights)
        button = SubmitButton(
            self.button_label,
            loading_label="Loading…",
            is_loading=self.is_loading,
            disabled=self.disabled,
            name="role",
            value=self.role,
            data_action="select-role",
        ).render()
        card_attrs = self.attributes(
            class_=self.classes("card", "role-card", **{"role-card--busy": self.disabled or self.is_loading}),
            data_testid=f"role-card-{self.role}",
        )
        return f"""
        <article {card_attrs}>
            <h2>{self.escape(self.title)}</h2>
            <p class="text-muted">{self.escape(self.description)}</p>
            <ul class="role-highlights">{items}</ul>
            <form method="post" action="/role-select" class="role-form" data-role-form>
                <input type="hidden" name="csrf_token" value="{self.escape(self.csrf_token)}">
                {button}
            </form>
        </article>
        """
