"""Repository Protocol for per-pool, per-principal share balances."""

from typing import Any, Protocol

from src.pl_deposit.domain.models import Depositor


class DepositorRepositoryProtocol(Protocol):
    def get(self, pool_id: str, principal: str) -> Depositor | None: ...

    def get_or_create(self, pool_id: str, principal: str) -> Depositor: ...

    def delete(self, pool_id: str, principal: str) -> None: ...

    def list_by_pool(self, pool_id: str) -> list[Depositor]: ...

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
