"""Pydantic schemas for the pl_lending API."""

from pydantic import BaseModel, Field

from src.pl_accounting.domain.loan_terms import LoanTerms
from src.pl_deposit.domain.models import Depositor
from src.pl_loan.domain.models import Loan
from src.pl_pool.domain.models import Pool

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    amount: int = Field(..., ge=0, description="Deposit asset base units")


class BorrowRequest(BaseModel):
    collateral_amount: int = Field(..., ge=0, description="Collateral asset base units")
    duration: int = Field(..., description="Loan duration in seconds")


class RepayRequest(BaseModel):
    amount: int = Field(..., ge=0, description="Offered amount; clamped to the debt")


class LiquidateRequest(BaseModel):
    borrower: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PoolResponse(BaseModel):
    id: str
    orientation: str
    deposit_asset: str
    collateral_asset: str
    interest_rate: int
    reserve_fee_rate: int
    collateral_factor: int
    total_borrow_amount: int
    total_asset_amount: int
    total_reserve_amount: int
    current_balance_amount: int
    total_liquidity: int

    @classmethod
    def from_domain(cls, pool: Pool) -> "PoolResponse":
        return cls(
            id=pool.id,
            orientation=pool.orientation.value,
            deposit_asset=pool.deposit_asset.value,
            collateral_asset=pool.collateral_asset.value,
            interest_rate=pool.interest_rate,
            reserve_fee_rate=pool.reserve_fee_rate,
            collateral_factor=pool.collateral_factor,
            total_borrow_amount=pool.total_borrow_amount,
            total_asset_amount=pool.total_asset_amount,
            total_reserve_amount=pool.total_reserve_amount,
            current_balance_amount=pool.current_balance_amount,
            total_liquidity=pool.total_liquidity,
        )


class DepositResponse(BaseModel):
    pool_id: str
    deposited: int
    shares_minted: int


class WithdrawResponse(BaseModel):
    pool_id: str
    withdrawn: int


class BorrowResponse(BaseModel):
    pool_id: str
    borrowed_amount: int
    repay_amount: int


class RepayResponse(BaseModel):
    pool_id: str
    paid: int
    remaining: int
    loan_closed: bool


class LiquidateResponse(BaseModel):
    pool_id: str
    borrower: str
    collateral_released: int


class LoanResponse(BaseModel):
    pool_id: str
    principal: str
    status: str
    collateral_amount: int
    borrowed_amount: int
    repay_amount: int
    interest_amount: int
    fee_amount: int
    start_time: int
    duration: int
    due_at: int

    @classmethod
    def from_domain(cls, loan: Loan, now: int) -> "LoanResponse":
        return cls(
            pool_id=loan.pool_id,
            principal=loan.principal,
            status=loan.status(now).value,
            collateral_amount=loan.collateral_amount,
            borrowed_amount=loan.borrowed_amount,
            repay_amount=loan.repay_amount,
            interest_amount=loan.interest_amount,
            fee_amount=loan.fee_amount,
            start_time=loan.start_time,
            duration=loan.duration,
            due_at=loan.due_at if loan.is_active else 0,
        )


class DepositorResponse(BaseModel):
    pool_id: str
    principal: str
    share_balance: int
    redeemable_amount: int

    @classmethod
    def from_domain(cls, depositor: Depositor, value: int) -> "DepositorResponse":
        return cls(
            pool_id=depositor.pool_id,
            principal=depositor.principal,
            share_balance=depositor.share_balance,
            redeemable_amount=value,
        )


class PayoffQuoteResponse(BaseModel):
    pool_id: str
    borrower: str
    pay_amount: int


class BorrowQuoteResponse(BaseModel):
    pool_id: str
    borrowed_amount: int
    interest_amount: int
    fee_amount: int
    repay_amount: int

    @classmethod
    def from_terms(cls, pool_id: str, terms: LoanTerms) -> "BorrowQuoteResponse":
        return cls(
            pool_id=pool_id,
            borrowed_amount=terms.borrowed_amount,
            interest_amount=terms.interest_amount,
            fee_amount=terms.fee_amount,
            repay_amount=terms.repay_amount,
        )
