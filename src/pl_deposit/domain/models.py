"""Domain models for pl_deposit: pure dataclasses, no business logic."""

from dataclasses import dataclass


@dataclass
class Depositor:
    pool_id: str
    principal: str
    share_balance: int = 0   # shares, not asset units
