"""
Top navigation bar.

Anonymous visitors see the brand and a "Sign in" link. Signed-in users see
their email and a sign-out button; the sign-out form carries the session's
CSRF token.
"""

from typing import Any, Dict, Optional

from .base import Component


class Navigation(Component):
    def __init__(self, user: Optional[Dict[str, Any]] = None, current_path: str = "/", csrf_token: Optional[str] = None):
        """
        Args:
            user: Dict with at least 'email' for signed-in users (optional)
            current_path: Current URL path for aria-current on the active link
            csrf_token: Token for the sign-out form (signed-in users only)
        """
        self.user = user
        self.current_path = current_path
        self.csrf_token = csrf_token

    def render(self) -> str:
        items = [self._link("/", "Home")]
        if self.user:
            items.append(self._link("/role-select", "Get Started"))
            items.append(self._render_account())
        else:
            items.append(self._link("/auth", "Sign in"))
        return (
            '<header class="site-header">'
            '<nav class="site-nav" role="navigation" aria-label="Main navigation">'
            '<a class="brand" href="/">TutorConnect</a>'
            f'<div class="nav-items">{"".join(items)}</div>'
            "</nav>"
            "</header>"
        )

    def _link(self, href: str, label: str) -> str:
        attrs = self.attributes(
            href=href,
            class_=self.classes("nav-link", active=self._is_active(href)),
            aria_current="page" if self._is_active(href) else None,
        )
        return f"<a {attrs}>{self.escape(label)}</a>"

    def _is_active(self, href: str) -> bool:
        if href == "/":
            return self.current_path == "/"
        return self.current_path == href or self.current_path.startswith(href + "/")

    def _render_account(self) -> str:
        email = (self.user or {}).get("email", "")
        csrf = (
            f'<input type="hidden" name="csrf_token" value="{self.escape(self.csrf_token)}">'
            if self.csrf_token
            else ""
        )
        return (
            '<div class="nav-account">'
            f'<span class="nav-user">{self.escape(email)}</span>'
            '<form method="post" action="/auth/logout" class="logout-form">'
            f"{csrf}"
            '<button type="submit" class="btn btn-ghost">Sign out</button>'
            "</form>"
            "</div>"
        )
