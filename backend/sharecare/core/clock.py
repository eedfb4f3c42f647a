from datetime import datetime, timezone


class Clock:
    """Source of the current time. Swap it out in tests to simulate elapsed time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


system_clock = Clock()
