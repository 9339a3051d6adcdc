"""PriceOracleAdapter: validated, synchronous reads of the exchange rate."""

import logging

from src.pl_common.datetime_utils import Clock, epoch_seconds
from src.pl_common.errors import OracleUnavailableError
from src.pl_oracle.domain.feed import PriceFeedProtocol

logger = logging.getLogger(__name__)


class PriceOracleAdapter:
    """Wraps a price feed and rejects non-positive or stale rounds.

    max_age_seconds == 0 disables the staleness check.
    """

    def __init__(
        self,
        feed: PriceFeedProtocol,
        max_age_seconds: int = 0,
        clock: Clock = epoch_seconds,
    ) -> None:
        self._feed = feed
        self._max_age = max_age_seconds
        self._clock = clock

    @property
    def feed(self) -> PriceFeedProtocol:
        return self._feed

    def current_rate(self) -> int:
        try:
            price_round = self._feed.latest_round()
        except OracleUnavailableError:
            raise
        except Exception as exc:
            raise OracleUnavailableError(str(exc)) from exc

        if price_round.rate <= 0:
            raise OracleUnavailableError(f"non-positive rate {price_round.rate}")
        if self._max_age:
            age = self._clock() - price_round.updated_at
            if age > self._max_age:
                logger.warning(
                    "Stale oracle round: age=%ds max=%ds", age, self._max_age
                )
                raise OracleUnavailableError(f"round is {age}s old")
        return price_round.rate
