"""LendingApplicationService: thin composition layer.

Combines LendingEngine calls with schema transformations. All bookkeeping,
locking and rollback live in the engine.
"""

from src.pl_lending.application.schemas import (
    BorrowQuoteResponse,
    BorrowResponse,
    DepositorResponse,
    DepositResponse,
    LiquidateResponse,
    LoanResponse,
    PayoffQuoteResponse,
    PoolResponse,
    RepayResponse,
    WithdrawResponse,
)
from src.pl_lending.engine.engine import LendingEngine


class LendingApplicationService:
    def __init__(self, engine: LendingEngine) -> None:
        self._engine = engine

    def get_pool(self, pool_id: str) -> PoolResponse:
        return PoolResponse.from_domain(self._engine.get_pool(pool_id))

    def list_pools(self) -> list[PoolResponse]:
        return [PoolResponse.from_domain(p) for p in self._engine.list_pools()]

    def deposit(self, pool_id: str, principal: str, amount: int) -> DepositResponse:
        shares = self._engine.deposit(pool_id, principal, amount)
        return DepositResponse(pool_id=pool_id, deposited=amount, shares_minted=shares)

    def withdraw(self, pool_id: str, principal: str) -> WithdrawResponse:
        amount = self._engine.withdraw(pool_id, principal)
        return WithdrawResponse(pool_id=pool_id, withdrawn=amount)

    def borrow(
        self, pool_id: str, principal: str, collateral_amount: int, duration: int
    ) -> BorrowResponse:
        borrowed, repay = self._engine.borrow(pool_id, principal, collateral_amount, duration)
        return BorrowResponse(pool_id=pool_id, borrowed_amount=borrowed, repay_amount=repay)

    def repay(self, pool_id: str, principal: str, amount: int) -> RepayResponse:
        paid, remaining = self._engine.repay(pool_id, principal, amount)
        return RepayResponse(
            pool_id=pool_id, paid=paid, remaining=remaining, loan_closed=remaining == 0
        )

    def liquidate(self, pool_id: str, liquidator: str, borrower: str) -> LiquidateResponse:
        collateral = self._engine.liquidate(pool_id, liquidator, borrower)
        return LiquidateResponse(
            pool_id=pool_id, borrower=borrower, collateral_released=collateral
        )

    def get_loan(self, pool_id: str, principal: str) -> LoanResponse:
        loan = self._engine.get_loan(pool_id, principal)
        return LoanResponse.from_domain(loan, self._engine.now())

    def get_depositor(self, pool_id: str, principal: str) -> DepositorResponse:
        depositor, value = self._engine.get_depositor(pool_id, principal)
        return DepositorResponse.from_domain(depositor, value)

    def list_loans(self, pool_id: str) -> list[LoanResponse]:
        now = self._engine.now()
        return [LoanResponse.from_domain(loan, now) for loan in self._engine.list_loans(pool_id)]

    def list_depositors(self, pool_id: str) -> list[DepositorResponse]:
        return [
            DepositorResponse.from_domain(d, value)
            for d, value in self._engine.list_depositors(pool_id)
        ]

    def get_payoff_quote(self, pool_id: str, borrower: str) -> PayoffQuoteResponse:
        pay = self._engine.get_payoff_quote(pool_id, borrower)
        return PayoffQuoteResponse(pool_id=pool_id, borrower=borrower, pay_amount=pay)

    def get_borrow_quote(
        self, pool_id: str, collateral_amount: int, duration: int
    ) -> BorrowQuoteResponse:
        terms = self._engine.get_borrow_quote(pool_id, collateral_amount, duration)
        return BorrowQuoteResponse.from_terms(pool_id, terms)
