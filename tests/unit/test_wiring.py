"""Tests for the default engine assembly and its manual oracle feed."""

import pytest

from config.settings import Settings
from src.pl_common.enums import AssetKind, Orientation
from src.pl_common.errors import (
    InvalidParameterError,
    OracleUnavailableError,
    OracleUpdateUnsupportedError,
)
from src.pl_lending.application.wiring import build_engine
from src.pl_lending.engine.engine import LendingEngine
from src.pl_oracle.domain.feed import PriceRound
from tests.conftest import DAY, FakeClock

ONE_A = 10**18        # 18-decimal collateral asset
ONE_B = 10**6         # 6-decimal deposit asset


def _make_engine(clock: FakeClock) -> LendingEngine:
    cfg = Settings(
        ASSET_A_DECIMALS=18,
        ASSET_B_DECIMALS=6,
        PRICE_DECIMALS=8,
        ORACLE_MAX_AGE_SECONDS=3_600,
        INITIAL_PRICE_RATE=2_000 * 10**8,
    )
    engine = build_engine(cfg, clock=clock)
    engine.create_pool(
        "P", Orientation.ASSET_A_AS_COLLATERAL,
        interest_rate=0, collateral_factor=80, reserve_fee_rate=0,
    )
    engine.credit_custody(AssetKind.B, "alice", 10_000 * ONE_B)
    engine.deposit("P", "alice", 10_000 * ONE_B)
    engine.credit_custody(AssetKind.A, "bob", ONE_A)
    return engine


class TestDefaultWiring:
    def test_fresh_rate_prices_collateral(self) -> None:
        engine = _make_engine(FakeClock())
        borrowed, _ = engine.borrow("P", "bob", ONE_A, 30 * DAY)
        # 1 A at 2000 B/A with cf 80 -> 1600 B
        assert borrowed == 1_600 * ONE_B

    def test_stale_rate_refreshed_by_owner(self) -> None:
        clock = FakeClock()
        engine = _make_engine(clock)
        clock.advance(3_601)

        with pytest.raises(OracleUnavailableError):
            engine.borrow("P", "bob", ONE_A, 30 * DAY)

        assert engine.set_oracle_rate(1_000 * 10**8) == clock.now
        borrowed, _ = engine.borrow("P", "bob", ONE_A, 30 * DAY)
        assert borrowed == 800 * ONE_B

    def test_non_positive_rate_rejected(self) -> None:
        engine = _make_engine(FakeClock())
        with pytest.raises(InvalidParameterError):
            engine.set_oracle_rate(0)

    def test_read_only_feed_cannot_be_updated(self) -> None:
        class _ExternalFeed:
            def latest_round(self) -> PriceRound:
                return PriceRound(rate=100, updated_at=0)

        engine = _make_engine(FakeClock())
        engine.oracle._feed = _ExternalFeed()  # type: ignore[assignment]
        with pytest.raises(OracleUpdateUnsupportedError):
            engine.set_oracle_rate(100)
