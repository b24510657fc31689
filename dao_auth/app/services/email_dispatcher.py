"""
Fire-and-forget email delivery.

dispatch() schedules the send on the running event loop and returns
immediately. Delivery failures are logged and never reach the caller.
"""

import asyncio
import logging
from typing import Set

from dao_auth.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)


class EmailDispatcher:
    def __init__(self, sender: IEmailSender):
        self.sender = sender
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, to: str, subject: str, html_body: str) -> None:
        task = asyncio.get_running_loop().create_task(
            self._deliver(to, subject, html_body)
        )
        # Keep a reference until done so the task is not garbage collected
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, to: str, subject: str, html_body: str) -> bool:
        try:
            delivered = await self.sender.send(to, subject, html_body)
        except Exception:
            logger.exception(f"Email delivery to {to} failed (subject={subject!r})")
            return False
        if delivered:
            logger.info(f"Email sent to {to} (subject={subject!r})")
        return delivered

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled delivery to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
