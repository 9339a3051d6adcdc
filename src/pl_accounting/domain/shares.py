"""Share <-> asset conversion against a pool's total liquidity."""

from src.pl_common.amounts import ceil_div


def total_liquidity(
    total_borrow_amount: int, current_balance_amount: int, total_reserve_amount: int
) -> int:
    """Outstanding debt plus liquid balance, net of the fee reserve."""
    return total_borrow_amount + current_balance_amount - total_reserve_amount


def to_shares(amount: int, total_asset_amount: int, liquidity: int) -> int:
    """Shares minted for a deposit of `amount`.

    Bootstraps 1:1 while the pool has no shares or no liquidity, otherwise
    floors amount * total_shares / liquidity.
    """
    if total_asset_amount == 0 or liquidity == 0:
        return amount
    return amount * total_asset_amount // liquidity


def to_amount(shares: int, liquidity: int, total_asset_amount: int) -> int:
    """Asset amount a share balance resolves to, rounded up."""
    if shares == 0:
        return 0
    return ceil_div(shares * liquidity, total_asset_amount)
