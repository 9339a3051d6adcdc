"""Pool aggregate invariants, checked after every operation."""

import logging

from src.pl_accounting.domain.shares import total_liquidity

logger = logging.getLogger(__name__)


def pool_invariant_violations(
    pool_id: str,
    total_borrow_amount: int,
    current_balance_amount: int,
    total_reserve_amount: int,
    total_asset_amount: int,
) -> list[str]:
    """Return a list of violation strings; empty when the pool is consistent."""
    violations: list[str] = []
    liquidity = total_liquidity(
        total_borrow_amount, current_balance_amount, total_reserve_amount
    )
    if liquidity < 0:
        violations.append(f"pool {pool_id}: total liquidity {liquidity} < 0")
    for name, value in (
        ("total_borrow_amount", total_borrow_amount),
        ("current_balance_amount", current_balance_amount),
        ("total_reserve_amount", total_reserve_amount),
        ("total_asset_amount", total_asset_amount),
    ):
        if value < 0:
            violations.append(f"pool {pool_id}: {name} {value} < 0")
    for msg in violations:
        logger.error(msg)
    return violations
