"""
Account notification emails.

Renders the welcome, password-reset and password-changed messages and hands
them to the EmailDispatcher.
"""

from html import escape

from dao_auth.app.services.email_dispatcher import EmailDispatcher
from dao_auth.domain.entities import User

_LAYOUT = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
<h1>{title}</h1>
{content}
<p>Regards,<br>The DAO management team</p>
<p style="color: #6b7280; font-size: 12px;">This email was generated automatically, please do not reply.</p>
</body>
</html>"""


def _render(title: str, content: str) -> str:
    return _LAYOUT.format(title=escape(title), content=content)


class AccountNotifier:
    def __init__(self, dispatcher: EmailDispatcher):
        self.dispatcher = dispatcher

    def send_welcome(self, user: User, temporary_password: str, ttl_hours: int) -> None:
        content = (
            f"<p>Hello {escape(user.name)},</p>"
            "<p>Your account has been created. Your sign-in details are:</p>"
            f"<p><strong>Email:</strong> {escape(user.email)}</p>"
            f"<p><strong>Temporary password:</strong> <code>{escape(temporary_password)}</code></p>"
            f"<p>This password is temporary and expires in {ttl_hours} hours. "
            "You must change it when you first sign in.</p>"
        )
        self.dispatcher.dispatch(
            user.email, "Welcome! Your account has been created", _render("Welcome", content)
        )

    def send_temporary_password(
        self, user: User, temporary_password: str, ttl_hours: int
    ) -> None:
        content = (
            f"<p>Hello {escape(user.name)},</p>"
            "<p>An administrator has reset your password. Your new temporary password is:</p>"
            f"<p><code>{escape(temporary_password)}</code></p>"
            f"<p>It expires in {ttl_hours} hours and must be changed at your next sign-in.</p>"
        )
        self.dispatcher.dispatch(
            user.email, "Your password has been reset", _render("Password reset", content)
        )

    def send_password_reset(self, user: User, code: str, ttl_minutes: int) -> None:
        content = (
            f"<p>Hello {escape(user.name)},</p>"
            "<p>You asked to reset your password. Your verification code is:</p>"
            f"<p style=\"font-size: 28px; letter-spacing: 3px;\"><strong>{escape(code)}</strong></p>"
            f"<p>This code expires in {ttl_minutes} minutes and can be used only once.</p>"
            "<p>If you did not ask for a reset, ignore this message.</p>"
        )
        self.dispatcher.dispatch(
            user.email, "Password reset code", _render("Password reset", content)
        )

    def send_password_changed(self, user: User) -> None:
        content = (
            f"<p>Hello {escape(user.name)},</p>"
            "<p>Your password has been changed.</p>"
            "<p>If you did not make this change, contact your administrator immediately.</p>"
        )
        self.dispatcher.dispatch(
            user.email, "Password change confirmation", _render("Password changed", content)
        )
