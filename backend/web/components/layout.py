"""
Layout component for TutorConnect.

Wraps pre-rendered page content into a complete HTML document: head, top
navigation, toast region and footer.
"""

from typing import Any, Dict, Optional

from onboarding.notifications import Notification

from .base import Component
from .navigation import Navigation
from .toast import Toast


class Layout(Component):
    """Assembles the complete page."""

    def __init__(
        self,
        title: str,
        content: str,
        user: Optional[Dict[str, Any]] = None,
        notification: Optional[Notification] = None,
        show_nav: bool = True,
        current_path: str = "/",
        csrf_token: Optional[str] = None,
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            user: Signed-in user dict (optional)
            notification: Toast shown above the content (optional)
            show_nav: Whether to render the top navigation
            current_path: Current URL path for active link highlighting
            csrf_token: Token for the sign-out form in the navigation
        """
        self.title = title
        self.content = content
        self.user = user
        self.notification = notification
        self.show_nav = show_nav
        self.current_path = current_path
        self.csrf_token = csrf_token

    def render(self) -> str:
        nav_html = (
            Navigation(self.user, self.current_path, csrf_token=self.csrf_token).render()
            if self.show_nav
            else ""
        )
        toast_html = Toast(self.notification).render()
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {self._render_head()}
</head>
<body>
    <a href="#main-content" class="skip-link">Skip to main content</a>

    {nav_html}

    <div id="toast-region" class="toast-region" aria-live="polite" aria-atomic="true">
        {toast_html}
    </div>

    <main id="main-content" class="main-content" role="main">
        {self.content}
    </main>

    <footer class="site-footer" role="contentinfo">
        <p class="text-muted">TutorConnect. Connect, learn, grow.</p>
    </footer>
</body>
</html>"""

    def _render_head(self) -> str:
        return f"""
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="TutorConnect - find qualified tutors near you">
    <title>{self.escape(self.title)} - TutorConnect</title>
    <link rel="stylesheet" href="/static/css/tutorconnect.css?v=1">
    <script src="/static/js/tutorconnect.js?v=1" defer></script>
    """
