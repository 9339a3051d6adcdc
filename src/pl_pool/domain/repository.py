"""Repository Protocol: dependency inversion for testability.

Unit tests may inject any object conforming to this Protocol.
Infrastructure layer provides the in-memory implementation.
"""

from typing import Any, Protocol

from src.pl_pool.domain.models import Pool


class PoolRepositoryProtocol(Protocol):
    def get(self, pool_id: str) -> Pool | None: ...

    def add(self, pool: Pool) -> None: ...

    def list_all(self) -> list[Pool]: ...

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
