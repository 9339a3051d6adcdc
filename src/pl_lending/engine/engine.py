"""LendingEngine: stateful orchestrator for deposit, withdraw, borrow, repay
and liquidate.

Every public operation runs under the ledger-wide single-flight guard and
inside one unit of work: validation happens before any mutation, the
Accounting Engine computes the deltas, ledgers are mutated, custody transfers
are executed, the pool invariants are re-checked, and events are published
only after the unit of work commits.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from src.pl_accounting.domain.config import AccountingConfig
from src.pl_accounting.domain.invariants import pool_invariant_violations
from src.pl_accounting.domain.liquidation import settle_liquidation
from src.pl_accounting.domain.loan_terms import LoanTerms, compute_loan_terms
from src.pl_accounting.domain.pricing import borrowable_amount, payoff_amount
from src.pl_accounting.domain.shares import to_amount, to_shares
from src.pl_common.amounts import validate_rate
from src.pl_common.datetime_utils import Clock, epoch_seconds, utc_now
from src.pl_common.enums import AssetKind, Orientation
from src.pl_common.errors import (
    AlreadyBorrowedError,
    AppError,
    CustodyCreditUnsupportedError,
    InsufficientBalanceError,
    InsufficientCollateralError,
    InsufficientLiquidityError,
    InsufficientReserveError,
    InvalidDurationError,
    InvalidParameterError,
    InvariantViolationError,
    NoActiveLoanError,
    NoCollateralError,
    NotYetLiquidatableError,
    OracleUpdateUnsupportedError,
    PoolExistsError,
    PoolNotFoundError,
    SelfLiquidationError,
    UnavailableError,
    ZeroAmountError,
    ZeroCollateralError,
    ZeroRepayError,
)
from src.pl_common.unit_of_work import UnitOfWork
from src.pl_custody.domain.custody import CustodyProtocol
from src.pl_deposit.domain.models import Depositor
from src.pl_deposit.domain.repository import DepositorRepositoryProtocol
from src.pl_lending.domain import events as ev
from src.pl_lending.domain.events import (
    LedgerEvent,
    LoggingNotificationSink,
    NotificationSink,
)
from src.pl_lending.engine.guard import SingleFlightGuard
from src.pl_loan.domain.models import Loan
from src.pl_loan.domain.repository import LoanRepositoryProtocol
from src.pl_oracle.application.adapter import PriceOracleAdapter
from src.pl_pool.domain.models import Pool
from src.pl_pool.domain.repository import PoolRepositoryProtocol

logger = logging.getLogger(__name__)


class LendingEngine:
    def __init__(
        self,
        pools: PoolRepositoryProtocol,
        depositors: DepositorRepositoryProtocol,
        loans: LoanRepositoryProtocol,
        custody: CustodyProtocol,
        oracle: PriceOracleAdapter,
        config: AccountingConfig | None = None,
        clock: Clock = epoch_seconds,
        sink: NotificationSink | None = None,
    ) -> None:
        self.pools = pools
        self.depositors = depositors
        self.loans = loans
        self.custody = custody
        self.oracle = oracle
        self.config = config or AccountingConfig()
        self._clock = clock
        self._sink: NotificationSink = sink or LoggingNotificationSink()
        self._guard = SingleFlightGuard()
        self._uow = UnitOfWork([pools, depositors, loans, custody])

    def now(self) -> int:
        return self._clock()

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    @contextmanager
    def _operation(self, name: str, pool_id: str) -> Iterator[tuple[Pool, list[LedgerEvent]]]:
        """Guard + unit of work + post-commit publication for one operation."""
        pending: list[LedgerEvent] = []
        with self._guard.hold(name):
            try:
                with self._uow.begin():
                    pool = self._require_pool(pool_id)
                    yield pool, pending
                    self._verify_pool(pool)
            except AppError as exc:
                logger.warning(
                    "%s rolled back: pool=%s code=%d %s", name, pool_id, exc.code, exc.message
                )
                raise
        for event in pending:
            self._sink.publish(event)

    def _require_pool(self, pool_id: str) -> Pool:
        pool = self.pools.get(pool_id)
        if pool is None:
            raise PoolNotFoundError(pool_id)
        return pool

    def _verify_pool(self, pool: Pool) -> None:
        violations = pool_invariant_violations(
            pool.id,
            pool.total_borrow_amount,
            pool.current_balance_amount,
            pool.total_reserve_amount,
            pool.total_asset_amount,
        )
        if violations:
            raise InvariantViolationError("; ".join(violations))
        pool.updated_at = utc_now()

    def _terms_for(self, pool: Pool, collateral_amount: int, duration: int, rate: int) -> LoanTerms:
        borrowable = borrowable_amount(
            collateral_amount, pool.collateral_factor, rate, pool.orientation, self.config
        )
        return compute_loan_terms(
            borrowable, pool.interest_rate, pool.reserve_fee_rate, duration, self.config
        )

    # ------------------------------------------------------------------
    # Depositor operations
    # ------------------------------------------------------------------

    def deposit(self, pool_id: str, principal: str, amount: int) -> int:
        """Supply `amount` of the pool's deposit asset. Returns shares minted."""
        with self._operation("deposit", pool_id) as (pool, pending):
            if amount <= 0:
                raise ZeroAmountError()
            available = self.custody.balance_of(pool.deposit_asset, principal)
            if available < amount:
                raise InsufficientBalanceError(amount, available)

            shares = to_shares(amount, pool.total_asset_amount, pool.total_liquidity)
            if shares == 0:
                raise ZeroAmountError(f"Deposit of {amount} is too small to mint a share")

            self.custody.transfer_in(pool.deposit_asset, principal, amount)
            depositor = self.depositors.get_or_create(pool_id, principal)
            depositor.share_balance += shares
            pool.current_balance_amount += amount
            pool.total_asset_amount += shares

            pending.append(ev.deposited(pool_id, principal, amount, shares))
            logger.info(
                "Deposit: pool=%s principal=%s amount=%d shares=%d",
                pool_id, principal, amount, shares,
            )
        return shares

    def withdraw(self, pool_id: str, principal: str) -> int:
        """Redeem the principal's entire share balance. Returns the amount paid out."""
        with self._operation("withdraw", pool_id) as (pool, pending):
            depositor = self.depositors.get(pool_id, principal)
            shares = depositor.share_balance if depositor else 0
            if shares == 0:
                raise ZeroAmountError(f"{principal} holds no shares in pool {pool_id}")

            amount = to_amount(shares, pool.total_liquidity, pool.total_asset_amount)
            if amount > pool.current_balance_amount:
                raise UnavailableError(amount, pool.current_balance_amount)

            self.depositors.delete(pool_id, principal)
            pool.current_balance_amount -= amount
            pool.total_asset_amount -= shares
            self.custody.transfer_out(pool.deposit_asset, principal, amount)

            pending.append(ev.withdrawn(pool_id, principal, amount, shares))
            logger.info(
                "Withdraw: pool=%s principal=%s shares=%d amount=%d",
                pool_id, principal, shares, amount,
            )
        return amount

    # ------------------------------------------------------------------
    # Loan operations
    # ------------------------------------------------------------------

    def borrow(
        self, pool_id: str, principal: str, collateral_amount: int, duration: int
    ) -> tuple[int, int]:
        """Lock collateral and draw a loan. Returns (borrowed_amount, repay_amount)."""
        with self._operation("borrow", pool_id) as (pool, pending):
            existing = self.loans.get(pool_id, principal)
            if existing is not None and existing.is_active:
                raise AlreadyBorrowedError(pool_id, principal)
            if collateral_amount <= 0:
                raise ZeroCollateralError()
            if duration <= 0:
                raise InvalidDurationError(duration)
            available = self.custody.balance_of(pool.collateral_asset, principal)
            if available < collateral_amount:
                raise InsufficientCollateralError(collateral_amount, available)

            rate = self.oracle.current_rate()
            terms = self._terms_for(pool, collateral_amount, duration, rate)
            if terms.borrowed_amount == 0:
                raise ZeroAmountError(
                    f"Collateral {collateral_amount} supports no borrowable amount"
                )
            if pool.current_balance_amount < terms.borrowed_amount:
                raise InsufficientLiquidityError(
                    terms.borrowed_amount, pool.current_balance_amount
                )

            loan = self.loans.get_or_create(pool_id, principal)
            loan.collateral_amount = collateral_amount
            loan.borrowed_amount = terms.borrowed_amount
            loan.repay_amount = terms.repay_amount
            loan.interest_amount = terms.interest_amount
            loan.fee_amount = terms.fee_amount
            loan.start_time = self._clock()
            loan.duration = duration

            pool.total_borrow_amount += terms.repay_amount
            pool.total_reserve_amount += terms.fee_amount
            pool.current_balance_amount -= terms.borrowed_amount

            self.custody.transfer_in(pool.collateral_asset, principal, collateral_amount)
            self.custody.transfer_out(pool.deposit_asset, principal, terms.borrowed_amount)

            pending.append(
                ev.borrowed(
                    pool_id, principal, terms.borrowed_amount,
                    collateral_amount, terms.repay_amount,
                )
            )
            logger.info(
                "Borrow: pool=%s principal=%s collateral=%d borrowed=%d repay=%d rate=%d",
                pool_id, principal, collateral_amount,
                terms.borrowed_amount, terms.repay_amount, rate,
            )
        return terms.borrowed_amount, terms.repay_amount

    def repay(self, pool_id: str, principal: str, amount: int) -> tuple[int, int]:
        """Pay down the loan; over-offers are clamped. Returns (paid, remaining)."""
        with self._operation("repay", pool_id) as (pool, pending):
            loan = self.loans.get(pool_id, principal)
            if loan is None or loan.repay_amount == 0:
                raise NoActiveLoanError(pool_id, principal)
            available = self.custody.balance_of(pool.deposit_asset, principal)
            if amount <= 0 or available == 0:
                raise ZeroRepayError()

            paid = min(amount, loan.repay_amount)
            if available < paid:
                raise InsufficientBalanceError(paid, available)

            self.custody.transfer_in(pool.deposit_asset, principal, paid)
            loan.repay_amount -= paid
            pool.total_borrow_amount -= paid
            pool.current_balance_amount += paid
            remaining = loan.repay_amount
            pending.append(ev.repaid(pool_id, principal, paid, remaining))

            if remaining == 0:
                collateral = loan.collateral_amount
                self.loans.delete(pool_id, principal)
                self.custody.transfer_out(pool.collateral_asset, principal, collateral)
                pending.append(ev.loan_closed(pool_id, principal, collateral))

            logger.info(
                "Repay: pool=%s principal=%s paid=%d remaining=%d",
                pool_id, principal, paid, remaining,
            )
        return paid, remaining

    def liquidate(self, pool_id: str, liquidator: str, borrower: str) -> int:
        """Close a lapsed loan by paying its discounted collateral value.

        Returns the collateral amount released to the liquidator.
        """
        with self._operation("liquidate", pool_id) as (pool, pending):
            if liquidator == borrower:
                raise SelfLiquidationError()
            loan = self.loans.get(pool_id, borrower)
            if loan is None or loan.collateral_amount == 0:
                raise NoCollateralError(pool_id, borrower)
            now = self._clock()
            if now < loan.due_at:
                raise NotYetLiquidatableError(loan.due_at, now)

            rate = self.oracle.current_rate()
            pay_amount = payoff_amount(
                loan.collateral_amount, rate, pool.orientation, self.config
            )
            available = self.custody.balance_of(pool.deposit_asset, liquidator)
            if available < pay_amount:
                raise InsufficientBalanceError(pay_amount, available)

            collateral = loan.collateral_amount
            loan.collateral_amount = 0
            settlement = settle_liquidation(
                pay_amount,
                loan.repay_amount,
                loan.borrowed_amount,
                loan.interest_amount,
                loan.fee_amount,
            )

            self.custody.transfer_in(pool.deposit_asset, liquidator, pay_amount)
            self.custody.transfer_out(pool.collateral_asset, liquidator, collateral)

            pool.current_balance_amount += settlement.balance_delta
            pool.total_borrow_amount -= settlement.borrow_delta
            self._apply_reserve_delta(pool, settlement.reserve_delta)
            self.loans.delete(pool_id, borrower)

            pending.append(ev.liquidated(pool_id, liquidator, borrower, collateral, pay_amount))
            logger.info(
                "Liquidate: pool=%s borrower=%s liquidator=%s collateral=%d paid=%d",
                pool_id, borrower, liquidator, collateral, pay_amount,
            )
        return collateral

    def _apply_reserve_delta(self, pool: Pool, delta: int) -> None:
        reserve = pool.total_reserve_amount + delta
        if reserve < 0:
            # Reserve was withdrawn below this loan's fee; saturate instead of wrapping
            logger.warning(
                "Reserve shortfall on pool %s: clamping %d to 0", pool.id, reserve
            )
            reserve = 0
        pool.total_reserve_amount = reserve

    # ------------------------------------------------------------------
    # Read-only quotes and views
    # ------------------------------------------------------------------

    def get_payoff_quote(self, pool_id: str, borrower: str) -> int:
        """What a liquidator would pay for the borrower's collateral right now."""
        with self._guard.hold("get_payoff_quote"):
            pool = self._require_pool(pool_id)
            loan = self.loans.get(pool_id, borrower)
            collateral = loan.collateral_amount if loan else 0
            if collateral == 0:
                return 0
            return payoff_amount(
                collateral, self.oracle.current_rate(), pool.orientation, self.config
            )

    def get_borrow_quote(self, pool_id: str, collateral_amount: int, duration: int) -> LoanTerms:
        with self._guard.hold("get_borrow_quote"):
            pool = self._require_pool(pool_id)
            if collateral_amount <= 0:
                raise ZeroCollateralError()
            if duration <= 0:
                raise InvalidDurationError(duration)
            return self._terms_for(
                pool, collateral_amount, duration, self.oracle.current_rate()
            )

    def get_pool(self, pool_id: str) -> Pool:
        with self._guard.hold("get_pool"):
            return self._require_pool(pool_id)

    def get_loan(self, pool_id: str, principal: str) -> Loan:
        with self._guard.hold("get_loan"):
            self._require_pool(pool_id)
            return self.loans.get(pool_id, principal) or Loan(pool_id=pool_id, principal=principal)

    def get_depositor(self, pool_id: str, principal: str) -> tuple[Depositor, int]:
        """Returns the depositor record and what its shares would redeem for now."""
        with self._guard.hold("get_depositor"):
            pool = self._require_pool(pool_id)
            depositor = self.depositors.get(pool_id, principal) or Depositor(
                pool_id=pool_id, principal=principal
            )
            value = to_amount(
                depositor.share_balance, pool.total_liquidity, pool.total_asset_amount
            )
            return depositor, value

    def list_pools(self) -> list[Pool]:
        with self._guard.hold("list_pools"):
            return self.pools.list_all()

    def list_loans(self, pool_id: str) -> list[Loan]:
        """Loans in the pool that still hold collateral."""
        with self._guard.hold("list_loans"):
            self._require_pool(pool_id)
            return self.loans.list_by_pool(pool_id)

    def list_depositors(self, pool_id: str) -> list[tuple[Depositor, int]]:
        with self._guard.hold("list_depositors"):
            pool = self._require_pool(pool_id)
            return [
                (d, to_amount(d.share_balance, pool.total_liquidity, pool.total_asset_amount))
                for d in self.depositors.list_by_pool(pool_id)
            ]

    # ------------------------------------------------------------------
    # Administrative surface (owner gating is done by the caller)
    # ------------------------------------------------------------------

    def create_pool(
        self,
        pool_id: str,
        orientation: Orientation,
        interest_rate: int,
        collateral_factor: int,
        reserve_fee_rate: int,
    ) -> Pool:
        _validate_parameters(
            interest_rate=interest_rate,
            collateral_factor=collateral_factor,
            reserve_fee_rate=reserve_fee_rate,
        )
        with self._guard.hold("create_pool"):
            if self.pools.get(pool_id) is not None:
                raise PoolExistsError(pool_id)
            now = utc_now()
            pool = Pool(
                id=pool_id,
                orientation=orientation,
                interest_rate=interest_rate,
                reserve_fee_rate=reserve_fee_rate,
                collateral_factor=collateral_factor,
                created_at=now,
                updated_at=now,
            )
            self.pools.add(pool)
        logger.info(
            "Pool created: id=%s orientation=%s interest=%d cf=%d fee=%d",
            pool_id, orientation.value, interest_rate, collateral_factor, reserve_fee_rate,
        )
        return pool

    def update_pool_parameters(
        self,
        pool_id: str,
        interest_rate: int | None = None,
        collateral_factor: int | None = None,
        reserve_fee_rate: int | None = None,
    ) -> Pool:
        """Change risk parameters between operations; existing loans keep their terms."""
        _validate_parameters(
            interest_rate=interest_rate,
            collateral_factor=collateral_factor,
            reserve_fee_rate=reserve_fee_rate,
        )
        with self._guard.hold("update_pool_parameters"):
            pool = self._require_pool(pool_id)
            if interest_rate is not None:
                pool.interest_rate = interest_rate
            if collateral_factor is not None:
                pool.collateral_factor = collateral_factor
            if reserve_fee_rate is not None:
                pool.reserve_fee_rate = reserve_fee_rate
            pool.updated_at = utc_now()
        logger.info(
            "Pool parameters updated: id=%s interest=%d cf=%d fee=%d",
            pool_id, pool.interest_rate, pool.collateral_factor, pool.reserve_fee_rate,
        )
        return pool

    def withdraw_reserve(self, pool_id: str, owner: str, amount: int) -> int:
        """Move collected fees out of the pool to the owner. Liquidity is unchanged."""
        with self._operation("withdraw_reserve", pool_id) as (pool, pending):
            if amount <= 0:
                raise ZeroAmountError()
            limit = min(pool.total_reserve_amount, pool.current_balance_amount)
            if amount > limit:
                raise InsufficientReserveError(amount, limit)
            pool.total_reserve_amount -= amount
            pool.current_balance_amount -= amount
            self.custody.transfer_out(pool.deposit_asset, owner, amount)
            pending.append(ev.reserve_withdrawn(pool_id, owner, amount))
            logger.info("Reserve withdrawn: pool=%s amount=%d", pool_id, amount)
        return pool.total_reserve_amount

    def credit_custody(self, asset: AssetKind, principal: str, amount: int) -> int:
        """Fund a principal's custody balance; only custodies with a `credit` hook."""
        credit = getattr(self.custody, "credit", None)
        if credit is None:
            raise CustodyCreditUnsupportedError()
        if amount <= 0:
            raise ZeroAmountError()
        with self._guard.hold("credit_custody"):
            return int(credit(asset, principal, amount))

    def set_oracle_rate(self, rate: int) -> int:
        """Publish a new exchange rate to a manually driven feed.

        The round is stamped with the ledger clock, which restarts the
        staleness window. Returns the ledger time of the round.
        """
        set_rate = getattr(self.oracle.feed, "set_rate", None)
        if set_rate is None:
            raise OracleUpdateUnsupportedError()
        if rate <= 0:
            raise InvalidParameterError(f"rate must be positive, got {rate}")
        with self._guard.hold("set_oracle_rate"):
            updated_at = self._clock()
            set_rate(rate, updated_at)
        logger.info("Oracle rate set: rate=%d updated_at=%d", rate, updated_at)
        return updated_at


def _validate_parameters(**rates: int | None) -> None:
    for name, rate in rates.items():
        if rate is None:
            continue
        try:
            validate_rate(name, rate)
        except ValueError as exc:
            raise InvalidParameterError(str(exc)) from exc
