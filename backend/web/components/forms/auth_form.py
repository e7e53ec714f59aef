"""
Sign-in / sign-up form for the /auth screen.

One form, two submit buttons: the clicked button's `mode` value tells the
route whether to sign in or create an account.
"""

from typing import Optional

from ..base import Component
from .fields import TextInputField
from .submit import SubmitButton


class AuthForm(Component):
    def __init__(
        self,
        csrf_token: str,
        *,
        email: str = "",
        error: Optional[str] = None,
        info: Optional[str] = None,
    ) -> None:
        self.csrf_token = csrf_token
        self.email = email
        self.error = error
        self.info = info

    def render(self) -> str:
        email_html = TextInputField("email", "Email", required=True).render(
            value=self.email, input_type="email", autocomplete="email", required=True
        )
        password_html = TextInputField("password", "Password", required=True).render(
            input_type="password", autocomplete="current-password", required=True
        )
        error_html = f'<div class="form-error" role="alert">{self.escape(self.error)}</div>' if self.error else ""
        info_html = f'<div class="alert alert-info" role="status">{self.escape(self.info)}</div>' if self.info else ""
        sign_in = SubmitButton("Sign in", loading_label="Signing in...", name="mode", value="sign_in").render()
        sign_up = SubmitButton("Create account", loading_label="Creating account...", name="mode", value="sign_up").render()
        return f"""
        <form method="post" action="/auth" class="auth-form">
            <input type="hidden" name="csrf_token" value="{self.escape(self.csrf_token)}">
            {email_html}
            {password_html}
            {error_html}
            {info_html}
            <div class="form-actions">
                {sign_in}
                {sign_up}
            </div>
        </form>
        """
