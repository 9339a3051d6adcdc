"""Domain models for pl_loan: pure dataclasses.

Lifecycle of a (pool, principal) loan record:
  NONE -> ACTIVE (borrow) -> REPAYING (partial repay) -> NONE (full repay)
  ACTIVE/REPAYING -> LIQUIDATABLE (now >= due_at) -> NONE (liquidate)
"""

from dataclasses import dataclass

from src.pl_common.enums import LoanStatus


@dataclass
class Loan:
    pool_id: str
    principal: str
    collateral_amount: int = 0
    borrowed_amount: int = 0   # principal disbursed
    repay_amount: int = 0      # outstanding principal + interest + fee
    interest_amount: int = 0   # fixed at origination
    fee_amount: int = 0        # fixed at origination
    start_time: int = 0        # epoch seconds
    duration: int = 0          # seconds

    @property
    def is_active(self) -> bool:
        return self.collateral_amount > 0

    @property
    def due_at(self) -> int:
        return self.start_time + self.duration

    @property
    def original_repay_amount(self) -> int:
        return self.borrowed_amount + self.interest_amount + self.fee_amount

    def is_liquidatable(self, now: int) -> bool:
        return self.is_active and now >= self.due_at

    def status(self, now: int) -> LoanStatus:
        if not self.is_active:
            return LoanStatus.NONE
        if now >= self.due_at:
            return LoanStatus.LIQUIDATABLE
        if self.repay_amount < self.original_repay_amount:
            return LoanStatus.REPAYING
        return LoanStatus.ACTIVE
