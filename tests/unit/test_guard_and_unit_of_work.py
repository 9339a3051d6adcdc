"""Tests for SingleFlightGuard and UnitOfWork."""

import pytest

from src.pl_common.enums import Orientation
from src.pl_common.errors import ReentrancyError
from src.pl_common.unit_of_work import UnitOfWork
from src.pl_lending.engine.guard import SingleFlightGuard
from src.pl_pool.domain.models import Pool
from src.pl_pool.infrastructure.persistence import InMemoryPoolRepository


def _make_pool() -> Pool:
    return Pool(
        id="P",
        orientation=Orientation.ASSET_A_AS_COLLATERAL,
        interest_rate=10,
        reserve_fee_rate=0,
        collateral_factor=80,
    )


class TestSingleFlightGuard:
    def test_nested_hold_fails_immediately(self) -> None:
        guard = SingleFlightGuard()
        with guard.hold("outer"):
            assert guard.held
            with pytest.raises(ReentrancyError):
                with guard.hold("inner"):
                    pass
        assert not guard.held

    def test_released_on_error(self) -> None:
        guard = SingleFlightGuard()
        with pytest.raises(RuntimeError):
            with guard.hold("op"):
                raise RuntimeError("boom")
        assert not guard.held
        with guard.hold("again"):
            pass


class TestUnitOfWork:
    def test_commit_keeps_changes(self) -> None:
        repo = InMemoryPoolRepository()
        repo.add(_make_pool())
        with UnitOfWork([repo]).begin():
            repo.get("P").current_balance_amount = 500
        assert repo.get("P").current_balance_amount == 500

    def test_rollback_restores_all_participants(self) -> None:
        repo = InMemoryPoolRepository()
        repo.add(_make_pool())
        with pytest.raises(ValueError):
            with UnitOfWork([repo]).begin():
                repo.get("P").current_balance_amount = 500
                repo.add(Pool(
                    id="Q",
                    orientation=Orientation.ASSET_B_AS_COLLATERAL,
                    interest_rate=1,
                    reserve_fee_rate=1,
                    collateral_factor=1,
                ))
                raise ValueError("abort")
        assert repo.get("P").current_balance_amount == 0
        assert repo.get("Q") is None
