"""Global enums shared by the pool, loan and lending packages."""

from enum import Enum


class AssetKind(str, Enum):
    A = "A"
    B = "B"


class Orientation(str, Enum):
    """Which asset kind a pool takes as collateral; the other is lent out."""

    ASSET_A_AS_COLLATERAL = "ASSET_A_AS_COLLATERAL"
    ASSET_B_AS_COLLATERAL = "ASSET_B_AS_COLLATERAL"

    @property
    def collateral_asset(self) -> AssetKind:
        if self is Orientation.ASSET_A_AS_COLLATERAL:
            return AssetKind.A
        return AssetKind.B

    @property
    def deposit_asset(self) -> AssetKind:
        if self is Orientation.ASSET_A_AS_COLLATERAL:
            return AssetKind.B
        return AssetKind.A


class LoanStatus(str, Enum):
    NONE = "NONE"
    ACTIVE = "ACTIVE"
    REPAYING = "REPAYING"
    LIQUIDATABLE = "LIQUIDATABLE"


class EventType(str, Enum):
    DEPOSITED = "DEPOSITED"
    WITHDRAWN = "WITHDRAWN"
    BORROWED = "BORROWED"
    REPAID = "REPAID"
    LOAN_CLOSED = "LOAN_CLOSED"
    LIQUIDATED = "LIQUIDATED"
    RESERVE_WITHDRAWN = "RESERVE_WITHDRAWN"
