"""Manually-set price feed for local runs and tests."""

from src.pl_common.datetime_utils import Clock, epoch_seconds
from src.pl_oracle.domain.feed import PriceRound


class ManualPriceFeed:
    def __init__(self, rate: int, clock: Clock = epoch_seconds) -> None:
        self._clock = clock
        self._round = PriceRound(rate=rate, updated_at=clock())

    def set_rate(self, rate: int, updated_at: int | None = None) -> None:
        self._round = PriceRound(
            rate=rate,
            updated_at=self._clock() if updated_at is None else updated_at,
        )

    def latest_round(self) -> PriceRound:
        return self._round
