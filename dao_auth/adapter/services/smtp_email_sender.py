import asyncio
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from dao_auth.app.services.email_sender import IEmailSender
from .logging_email_sender import html_to_text


class SmtpEmailSender(IEmailSender):
    """Sends through an SMTP server with STARTTLS, in a worker thread"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        from_name: str = "DAO Management System",
        timeout: float = 10,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.from_name = from_name
        self.timeout = timeout

    def build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.from_name, self.user))
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_to_text(html_body))
        message.add_alternative(html_body, subtype="html")
        return message

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        message = self.build_message(to, subject, html_body)
        await asyncio.wait_for(
            asyncio.to_thread(self._send_blocking, message), timeout=self.timeout
        )
        return True

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.starttls()
            smtp.login(self.user, self.password)
            smtp.send_message(message)
