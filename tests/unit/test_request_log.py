"""Tests for request log helpers."""

from src.pl_gateway.middleware.request_log import pool_id_of


def test_pool_route() -> None:
    assert pool_id_of("/api/v1/pools/P-1/borrow") == "P-1"


def test_admin_pool_route() -> None:
    assert pool_id_of("/api/v1/admin/pools/P-1/reserve/withdraw") == "P-1"


def test_route_without_pool() -> None:
    assert pool_id_of("/api/v1/admin/custody/credit") == "-"
    assert pool_id_of("/health") == "-"
