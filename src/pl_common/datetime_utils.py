"""UTC datetime and ledger clock utilities."""

import time
from collections.abc import Callable
from datetime import datetime, timezone

# Ledger time is integer epoch seconds; loan start/due times use this unit.
Clock = Callable[[], int]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def epoch_seconds() -> int:
    """Default ledger clock: current UTC time in whole seconds."""
    return int(time.time())
