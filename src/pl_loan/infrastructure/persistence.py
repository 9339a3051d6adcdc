"""In-memory LoanRepository keyed by (pool id, principal)."""

import copy

from src.pl_loan.domain.models import Loan

_Key = tuple[str, str]


class InMemoryLoanRepository:
    def __init__(self) -> None:
        self._loans: dict[_Key, Loan] = {}

    def get(self, pool_id: str, principal: str) -> Loan | None:
        return self._loans.get((pool_id, principal))

    def get_or_create(self, pool_id: str, principal: str) -> Loan:
        key = (pool_id, principal)
        if key not in self._loans:
            self._loans[key] = Loan(pool_id=pool_id, principal=principal)
        return self._loans[key]

    def delete(self, pool_id: str, principal: str) -> None:
        self._loans.pop((pool_id, principal), None)

    def list_by_pool(self, pool_id: str) -> list[Loan]:
        return [
            loan
            for (pid, _), loan in sorted(self._loans.items())
            if pid == pool_id and loan.is_active
        ]

    def snapshot(self) -> dict[_Key, Loan]:
        return copy.deepcopy(self._loans)

    def restore(self, state: dict[_Key, Loan]) -> None:
        self._loans = state
