from datetime import UTC, datetime

from dao_auth.app.services.clock import IClock


class SystemClock(IClock):
    def now(self) -> datetime:
        # Naive UTC, matching what the DateTime columns store
        return datetime.now(UTC).replace(tzinfo=None)
