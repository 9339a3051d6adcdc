"""Domain events for pl_lending and the sinks they are published to.

Events are collected while an operation runs and published only after it
commits; a rolled-back operation publishes nothing.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Protocol

from src.pl_common.enums import EventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerEvent:
    event_type: EventType
    pool_id: str
    principal: str
    amount: int
    details: dict[str, int | str] = field(default_factory=dict)


def deposited(pool_id: str, principal: str, amount: int, shares: int) -> LedgerEvent:
    return LedgerEvent(EventType.DEPOSITED, pool_id, principal, amount, {"shares": shares})


def withdrawn(pool_id: str, principal: str, amount: int, shares: int) -> LedgerEvent:
    return LedgerEvent(EventType.WITHDRAWN, pool_id, principal, amount, {"shares": shares})


def borrowed(
    pool_id: str, principal: str, amount: int, collateral: int, repay_amount: int
) -> LedgerEvent:
    return LedgerEvent(
        EventType.BORROWED,
        pool_id,
        principal,
        amount,
        {"collateral": collateral, "repay_amount": repay_amount},
    )


def repaid(pool_id: str, principal: str, amount: int, remaining: int) -> LedgerEvent:
    return LedgerEvent(EventType.REPAID, pool_id, principal, amount, {"remaining": remaining})


def loan_closed(pool_id: str, principal: str, collateral: int) -> LedgerEvent:
    return LedgerEvent(EventType.LOAN_CLOSED, pool_id, principal, collateral)


def liquidated(
    pool_id: str, liquidator: str, borrower: str, collateral: int, pay_amount: int
) -> LedgerEvent:
    return LedgerEvent(
        EventType.LIQUIDATED,
        pool_id,
        liquidator,
        collateral,
        {"borrower": borrower, "pay_amount": pay_amount},
    )


def reserve_withdrawn(pool_id: str, principal: str, amount: int) -> LedgerEvent:
    return LedgerEvent(EventType.RESERVE_WITHDRAWN, pool_id, principal, amount)


class NotificationSink(Protocol):
    def publish(self, event: LedgerEvent) -> None: ...


class LoggingNotificationSink:
    def publish(self, event: LedgerEvent) -> None:
        logger.info("Event %s: %s", event.event_type.value, asdict(event))


class RecordingNotificationSink:
    """Keeps published events in order; used by tests and local tooling."""

    def __init__(self) -> None:
        self.events: list[LedgerEvent] = []

    def publish(self, event: LedgerEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[LedgerEvent]:
        return [e for e in self.events if e.event_type is event_type]
