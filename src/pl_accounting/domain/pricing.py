"""Orientation-aware collateral valuation.

The oracle quotes asset-B per asset-A as a fixed-point integer scaled by
10**price_decimals. A pool's collateral is worth

    ASSET_A_AS_COLLATERAL: amount * percent * rate * 10**dec_b / (100 * scale * 10**dec_a)
    ASSET_B_AS_COLLATERAL: amount * percent * scale * 10**dec_a / (100 * rate * 10**dec_b)

in base units of the pool's deposit asset. Every product is formed before the
single floor division so no precision is lost to intermediate truncation.
"""

from src.pl_accounting.domain.config import AccountingConfig
from src.pl_common.enums import Orientation


def collateral_value(
    collateral_amount: int,
    percent: int,
    rate: int,
    orientation: Orientation,
    config: AccountingConfig,
) -> int:
    """Value `percent`% of `collateral_amount` in deposit-asset base units."""
    if rate <= 0:
        raise ValueError(f"Oracle rate must be positive, got {rate}")
    if orientation is Orientation.ASSET_A_AS_COLLATERAL:
        numerator = collateral_amount * percent * rate * 10**config.asset_b_decimals
        denominator = 100 * config.price_scale * 10**config.asset_a_decimals
    else:
        numerator = (
            collateral_amount * percent * config.price_scale * 10**config.asset_a_decimals
        )
        denominator = 100 * rate * 10**config.asset_b_decimals
    return numerator // denominator


def borrowable_amount(
    collateral_amount: int,
    collateral_factor: int,
    rate: int,
    orientation: Orientation,
    config: AccountingConfig,
) -> int:
    """Loan principal a collateral deposit supports."""
    return collateral_value(collateral_amount, collateral_factor, rate, orientation, config)


def payoff_amount(
    collateral_amount: int,
    rate: int,
    orientation: Orientation,
    config: AccountingConfig,
) -> int:
    """Price a liquidator pays for `collateral_amount` at the discount rate."""
    return collateral_value(
        collateral_amount, config.discount_rate, rate, orientation, config
    )
