"""Price feed abstraction consumed by the oracle adapter."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class PriceRound:
    rate: int        # asset-B per asset-A, fixed-point
    updated_at: int  # epoch seconds


class PriceFeedProtocol(Protocol):
    def latest_round(self) -> PriceRound: ...
