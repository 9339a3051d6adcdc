"""Accounting parameters passed explicitly into every engine function."""

from dataclasses import dataclass

from config.settings import Settings

SECONDS_PER_DAY = 86_400
DAYS_PER_YEAR = 365
DEFAULT_DISCOUNT_RATE = 95


@dataclass(frozen=True)
class AccountingConfig:
    asset_a_decimals: int = 18
    asset_b_decimals: int = 6
    price_decimals: int = 8
    discount_rate: int = DEFAULT_DISCOUNT_RATE
    seconds_per_day: int = SECONDS_PER_DAY
    days_per_year: int = DAYS_PER_YEAR

    @property
    def price_scale(self) -> int:
        return 10**self.price_decimals

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccountingConfig":
        return cls(
            asset_a_decimals=settings.ASSET_A_DECIMALS,
            asset_b_decimals=settings.ASSET_B_DECIMALS,
            price_decimals=settings.PRICE_DECIMALS,
            discount_rate=settings.LIQUIDATION_DISCOUNT_RATE,
        )
