"""Domain models for pl_pool: pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime

from src.pl_accounting.domain.shares import total_liquidity
from src.pl_common.enums import AssetKind, Orientation


@dataclass
class Pool:
    id: str
    orientation: Orientation
    interest_rate: int           # percent per year, 0-255
    reserve_fee_rate: int        # percent, 0-255
    collateral_factor: int       # percent, 0-255
    total_borrow_amount: int = 0     # sum of outstanding repay_amount
    total_asset_amount: int = 0      # sum of depositor shares
    total_reserve_amount: int = 0    # fees not yet withdrawn
    current_balance_amount: int = 0  # un-borrowed deposit asset
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def deposit_asset(self) -> AssetKind:
        return self.orientation.deposit_asset

    @property
    def collateral_asset(self) -> AssetKind:
        return self.orientation.collateral_asset

    @property
    def total_liquidity(self) -> int:
        # Recomputed on every read, never cached
        return total_liquidity(
            self.total_borrow_amount,
            self.current_balance_amount,
            self.total_reserve_amount,
        )
