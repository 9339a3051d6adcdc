"""In-memory PoolRepository: a mapping from pool id to Pool."""

import copy

from src.pl_pool.domain.models import Pool


class InMemoryPoolRepository:
    def __init__(self) -> None:
        self._pools: dict[str, Pool] = {}

    def get(self, pool_id: str) -> Pool | None:
        return self._pools.get(pool_id)

    def add(self, pool: Pool) -> None:
        self._pools[pool.id] = pool

    def list_all(self) -> list[Pool]:
        return sorted(self._pools.values(), key=lambda p: p.id)

    def snapshot(self) -> dict[str, Pool]:
        return copy.deepcopy(self._pools)

    def restore(self, state: dict[str, Pool]) -> None:
        self._pools = state
