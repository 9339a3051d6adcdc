"""Repository Protocol for per-pool, per-principal loan records."""

from typing import Any, Protocol

from src.pl_loan.domain.models import Loan


class LoanRepositoryProtocol(Protocol):
    def get(self, pool_id: str, principal: str) -> Loan | None: ...

    def get_or_create(self, pool_id: str, principal: str) -> Loan: ...

    def delete(self, pool_id: str, principal: str) -> None: ...

    def list_by_pool(self, pool_id: str) -> list[Loan]: ...

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
