"""
Toast component: renders one user-visible notification.

Destructive toasts use role="alert" so screen readers announce them at once;
informational ones use role="status".
"""

from typing import Optional

from onboarding.notifications import Notification

from .base import Component


class Toast(Component):
    def __init__(self, notification: Optional[Notification]) -> None:
        self.notification = notification

    def render(self) -> str:
        n = self.notification
        if n is None:
            return ""
        attrs = self.attributes(
            class_=self.classes("toast", "toast--destructive" if n.is_destructive else "toast--info"),
            role="alert" if n.is_destructive else "status",
            data_testid="toast",
            data_kind=n.kind,
        )
        return (
            f"<div {attrs}>"
            f'<p class="toast-title">{self.escape(n.title)}</p>'
            f'<p class="toast-description">{self.escape(n.description)}</p>'
            "</div>"
        )
