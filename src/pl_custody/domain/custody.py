"""Custody collaborator Protocol: moves assets in and out of the ledger.

transfer_in pulls from a principal into the ledger's vault; transfer_out pushes
from the vault to a principal. Both raise TransferFailedError on failure.
"""

from typing import Any, Protocol

from src.pl_common.enums import AssetKind


class CustodyProtocol(Protocol):
    def balance_of(self, asset: AssetKind, principal: str) -> int: ...

    def transfer_in(self, asset: AssetKind, from_principal: str, amount: int) -> None: ...

    def transfer_out(self, asset: AssetKind, to_principal: str, amount: int) -> None: ...

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
