"""Single-flight execution guard.

One guard spans the whole ledger, not a single pool. Acquisition never
blocks: a second entry while an operation is in flight (a re-entrant call made
from inside a custody transfer, or a concurrent caller) fails immediately with
ReentrancyError instead of observing half-updated state.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from src.pl_common.errors import ReentrancyError

logger = logging.getLogger(__name__)


class SingleFlightGuard:
    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def held(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self, operation: str) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            logger.warning("Rejected re-entrant %s while another operation is in flight", operation)
            raise ReentrancyError()
        try:
            yield
        finally:
            self._lock.release()
