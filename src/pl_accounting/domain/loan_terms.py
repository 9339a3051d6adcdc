"""Origination terms: simple daily interest plus a one-off reserve fee."""

from dataclasses import dataclass

from src.pl_accounting.domain.config import AccountingConfig


@dataclass(frozen=True)
class LoanTerms:
    borrowed_amount: int
    interest_amount: int
    fee_amount: int

    @property
    def repay_amount(self) -> int:
        return self.borrowed_amount + self.interest_amount + self.fee_amount


def duration_in_days(duration: int, config: AccountingConfig) -> int:
    return duration // config.seconds_per_day


def interest_for(
    borrowed_amount: int, interest_rate: int, duration: int, config: AccountingConfig
) -> int:
    """Non-compounding interest over whole days.

    Each division truncates in order: the daily amount is floored before it is
    multiplied by the number of days.
    """
    daily = borrowed_amount * interest_rate // 100 // config.days_per_year
    return daily * duration_in_days(duration, config)


def fee_for(borrowed_amount: int, reserve_fee_rate: int) -> int:
    return borrowed_amount * reserve_fee_rate // 100


def compute_loan_terms(
    borrowed_amount: int,
    interest_rate: int,
    reserve_fee_rate: int,
    duration: int,
    config: AccountingConfig,
) -> LoanTerms:
    return LoanTerms(
        borrowed_amount=borrowed_amount,
        interest_amount=interest_for(borrowed_amount, interest_rate, duration, config),
        fee_amount=fee_for(borrowed_amount, reserve_fee_rate),
    )
