"""Savepoint-style unit of work over in-memory participants.

Each participant (repository, custody) can snapshot its state and restore it.
`UnitOfWork.begin()` takes a savepoint of every participant on entry and
restores all of them if the block raises, so an operation either commits all
of its ledger mutations and transfers or none of them.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Savepointable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class UnitOfWork:
    def __init__(self, participants: Sequence[Savepointable]) -> None:
        self._participants = list(participants)

    @contextmanager
    def begin(self) -> Iterator[None]:
        savepoints = [(p, p.snapshot()) for p in self._participants]
        try:
            yield
        except BaseException:
            for participant, state in savepoints:
                participant.restore(state)
            logger.debug("Unit of work rolled back (%d participants)", len(savepoints))
            raise
