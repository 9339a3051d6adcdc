"""Admin application service: pool registry administration and reserves."""

from typing import Any

from src.pl_admin.application.schemas import (
    CreatePoolRequest,
    CreditCustodyRequest,
    UpdatePoolParametersRequest,
)
from src.pl_lending.application.schemas import PoolResponse
from src.pl_lending.engine.engine import LendingEngine


class AdminService:
    def __init__(self, engine: LendingEngine) -> None:
        self._engine = engine

    def create_pool(self, body: CreatePoolRequest) -> PoolResponse:
        pool = self._engine.create_pool(
            pool_id=body.pool_id,
            orientation=body.orientation,
            interest_rate=body.interest_rate,
            collateral_factor=body.collateral_factor,
            reserve_fee_rate=body.reserve_fee_rate,
        )
        return PoolResponse.from_domain(pool)

    def update_pool_parameters(
        self, pool_id: str, body: UpdatePoolParametersRequest
    ) -> PoolResponse:
        pool = self._engine.update_pool_parameters(
            pool_id,
            interest_rate=body.interest_rate,
            collateral_factor=body.collateral_factor,
            reserve_fee_rate=body.reserve_fee_rate,
        )
        return PoolResponse.from_domain(pool)

    def withdraw_reserve(self, pool_id: str, owner: str, amount: int) -> dict[str, Any]:
        remaining = self._engine.withdraw_reserve(pool_id, owner, amount)
        return {"pool_id": pool_id, "withdrawn": amount, "remaining_reserve": remaining}

    def credit_custody(self, body: CreditCustodyRequest) -> dict[str, Any]:
        balance = self._engine.credit_custody(body.asset, body.principal, body.amount)
        return {"asset": body.asset.value, "principal": body.principal, "balance": balance}

    def set_oracle_rate(self, rate: int) -> dict[str, Any]:
        updated_at = self._engine.set_oracle_rate(rate)
        return {"rate": rate, "updated_at": updated_at}
