"""Process-wide LendingEngine assembly.

Routers resolve the engine through `get_engine` so tests can swap it with
`app.dependency_overrides[get_engine]`.
"""

from config.settings import Settings, settings
from src.pl_accounting.domain.config import AccountingConfig
from src.pl_common.datetime_utils import Clock, epoch_seconds
from src.pl_custody.infrastructure.in_memory import InMemoryCustody
from src.pl_deposit.infrastructure.persistence import InMemoryDepositorRepository
from src.pl_lending.domain.events import NotificationSink
from src.pl_lending.engine.engine import LendingEngine
from src.pl_loan.infrastructure.persistence import InMemoryLoanRepository
from src.pl_oracle.application.adapter import PriceOracleAdapter
from src.pl_oracle.infrastructure.manual_feed import ManualPriceFeed
from src.pl_pool.infrastructure.persistence import InMemoryPoolRepository


def build_engine(
    cfg: Settings,
    clock: Clock = epoch_seconds,
    sink: NotificationSink | None = None,
) -> LendingEngine:
    feed = ManualPriceFeed(cfg.INITIAL_PRICE_RATE, clock=clock)
    return LendingEngine(
        pools=InMemoryPoolRepository(),
        depositors=InMemoryDepositorRepository(),
        loans=InMemoryLoanRepository(),
        custody=InMemoryCustody(),
        oracle=PriceOracleAdapter(feed, cfg.ORACLE_MAX_AGE_SECONDS, clock=clock),
        config=AccountingConfig.from_settings(cfg),
        clock=clock,
        sink=sink,
    )


_engine: LendingEngine | None = None


def get_engine() -> LendingEngine:
    """FastAPI dependency: the shared in-memory ledger."""
    global _engine
    if _engine is None:
        _engine = build_engine(settings)
    return _engine
