"""Clock port."""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time for every timestamp the application writes."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
