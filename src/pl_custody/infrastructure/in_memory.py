"""In-memory custody: integer balances per (asset kind, holder)."""

import logging
from collections import defaultdict

from src.pl_common.enums import AssetKind
from src.pl_common.errors import TransferFailedError

logger = logging.getLogger(__name__)

VAULT = "__vault__"


class InMemoryCustody:
    def __init__(self) -> None:
        self._balances: defaultdict[tuple[AssetKind, str], int] = defaultdict(int)

    def balance_of(self, asset: AssetKind, principal: str) -> int:
        return self._balances.get((asset, principal), 0)

    def vault_balance(self, asset: AssetKind) -> int:
        return self.balance_of(asset, VAULT)

    def credit(self, asset: AssetKind, principal: str, amount: int) -> int:
        """Mint `amount` into a principal's balance. Returns the new balance."""
        if amount <= 0:
            raise ValueError(f"Credit amount must be positive, got {amount}")
        self._balances[(asset, principal)] += amount
        logger.info("Custody credit: %s %s +%d", principal, asset.value, amount)
        return self._balances[(asset, principal)]

    def transfer_in(self, asset: AssetKind, from_principal: str, amount: int) -> None:
        self._move(asset, from_principal, VAULT, amount)

    def transfer_out(self, asset: AssetKind, to_principal: str, amount: int) -> None:
        self._move(asset, VAULT, to_principal, amount)

    def _move(self, asset: AssetKind, source: str, target: str, amount: int) -> None:
        if amount < 0:
            raise TransferFailedError(f"negative amount {amount}")
        available = self.balance_of(asset, source)
        if available < amount:
            raise TransferFailedError(
                f"InsufficientFunds: {source} holds {available} {asset.value}, needs {amount}"
            )
        self._balances[(asset, source)] -= amount
        self._balances[(asset, target)] += amount

    def snapshot(self) -> dict[tuple[AssetKind, str], int]:
        return dict(self._balances)

    def restore(self, state: dict[tuple[AssetKind, str], int]) -> None:
        self._balances = defaultdict(int, state)
