"""In-memory DepositorRepository keyed by (pool id, principal)."""

import copy

from src.pl_deposit.domain.models import Depositor

_Key = tuple[str, str]


class InMemoryDepositorRepository:
    def __init__(self) -> None:
        self._depositors: dict[_Key, Depositor] = {}

    def get(self, pool_id: str, principal: str) -> Depositor | None:
        return self._depositors.get((pool_id, principal))

    def get_or_create(self, pool_id: str, principal: str) -> Depositor:
        key = (pool_id, principal)
        if key not in self._depositors:
            self._depositors[key] = Depositor(pool_id=pool_id, principal=principal)
        return self._depositors[key]

    def delete(self, pool_id: str, principal: str) -> None:
        self._depositors.pop((pool_id, principal), None)

    def list_by_pool(self, pool_id: str) -> list[Depositor]:
        return [d for (pid, _), d in sorted(self._depositors.items()) if pid == pool_id]

    def snapshot(self) -> dict[_Key, Depositor]:
        return copy.deepcopy(self._depositors)

    def restore(self, state: dict[_Key, Depositor]) -> None:
        self._depositors = state
