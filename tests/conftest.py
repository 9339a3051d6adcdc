"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.pl_accounting.domain.config import AccountingConfig
from src.pl_common.enums import Orientation
from src.pl_custody.infrastructure.in_memory import InMemoryCustody
from src.pl_deposit.infrastructure.persistence import InMemoryDepositorRepository
from src.pl_lending.application.wiring import get_engine
from src.pl_lending.domain.events import RecordingNotificationSink
from src.pl_lending.engine.engine import LendingEngine
from src.pl_loan.infrastructure.persistence import InMemoryLoanRepository
from src.pl_oracle.application.adapter import PriceOracleAdapter
from src.pl_oracle.infrastructure.manual_feed import ManualPriceFeed
from src.pl_pool.domain.models import Pool
from src.pl_pool.infrastructure.persistence import InMemoryPoolRepository

DAY = 86_400
START = 1_700_000_000


class FakeClock:
    """Deterministic ledger clock in epoch seconds."""

    def __init__(self, start: int = START) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> AccountingConfig:
    """Whole-unit assets with a 2-decimal price: rate 100 means 1 B per A."""
    return AccountingConfig(asset_a_decimals=0, asset_b_decimals=0, price_decimals=2)


@pytest.fixture
def feed(clock: FakeClock) -> ManualPriceFeed:
    return ManualPriceFeed(rate=100, clock=clock)


@pytest.fixture
def sink() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def custody() -> InMemoryCustody:
    return InMemoryCustody()


@pytest.fixture
def engine(
    custody: InMemoryCustody,
    feed: ManualPriceFeed,
    clock: FakeClock,
    config: AccountingConfig,
    sink: RecordingNotificationSink,
) -> LendingEngine:
    return LendingEngine(
        pools=InMemoryPoolRepository(),
        depositors=InMemoryDepositorRepository(),
        loans=InMemoryLoanRepository(),
        custody=custody,
        oracle=PriceOracleAdapter(feed, max_age_seconds=0, clock=clock),
        config=config,
        clock=clock,
        sink=sink,
    )


@pytest.fixture
def pool(engine: LendingEngine) -> Pool:
    """Pool P: A is collateral, B is lent; cf 80, interest 10/yr, fee 2."""
    return engine.create_pool(
        "P",
        Orientation.ASSET_A_AS_COLLATERAL,
        interest_rate=10,
        collateral_factor=80,
        reserve_fee_rate=2,
    )


@pytest.fixture
async def client(engine: LendingEngine) -> AsyncClient:
    """Async HTTP client bound to the test engine."""
    app.dependency_overrides[get_engine] = lambda: engine
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
