"""
Email sender used when SMTP is not configured.

Logs the message instead of sending it. The text content carries the
secret (temporary password or reset code) so the flows stay usable
without a mail server.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import List

from dao_auth.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")


def html_to_text(html_body: str) -> str:
    return _SPACE_RE.sub(" ", _TAG_RE.sub(" ", html_body)).strip()


@dataclass
class LoggedEmail:
    """Record of a logged email for test assertions."""

    to: str
    subject: str
    html_body: str
    logged_at: datetime


@dataclass
class LoggingEmailSender(IEmailSender):
    # In-memory storage for test assertions
    sent_emails: List[LoggedEmail] = field(default_factory=list)
    log_level: int = logging.INFO

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        self.sent_emails.append(
            LoggedEmail(to=to, subject=subject, html_body=html_body, logged_at=datetime.now(UTC))
        )
        logger.log(
            self.log_level,
            f"EMAIL (not configured): To={to}, Subject={subject}, Content={html_to_text(html_body)}",
        )
        return False

    def get_emails_to(self, recipient: str) -> List[LoggedEmail]:
        return [e for e in self.sent_emails if e.to == recipient]

    def clear(self) -> None:
        """Clear all stored emails (for test isolation)."""
        self.sent_emails.clear()
