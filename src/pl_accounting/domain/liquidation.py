"""Liquidation settlement: how a payoff lands in the pool's aggregates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LiquidationSettlement:
    balance_delta: int   # added to current_balance_amount
    borrow_delta: int    # subtracted from total_borrow_amount
    reserve_delta: int   # added to total_reserve_amount (may be negative)


def settle_liquidation(
    pay_amount: int,
    repay_amount: int,
    borrowed_amount: int,
    interest_amount: int,
    fee_amount: int,
) -> LiquidationSettlement:
    """Compute pool deltas for a liquidation paying `pay_amount`.

    `repay_amount` is the debt still outstanding; the other three fields are
    the loan's origination terms. The loan's fee always leaves the reserve.
    When the payoff beats the original debt, whatever it pays above principal
    plus interest goes to the reserve.
    """
    original_repay = borrowed_amount + interest_amount + fee_amount
    reserve_delta = -fee_amount
    if pay_amount > original_repay:
        reserve_delta += pay_amount - (interest_amount + borrowed_amount)
    return LiquidationSettlement(
        balance_delta=pay_amount,
        borrow_delta=repay_amount,
        reserve_delta=reserve_delta,
    )
