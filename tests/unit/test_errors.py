"""Tests for pl_common.errors and pl_common.response."""

from src.pl_common.errors import (
    AlreadyBorrowedError,
    AppError,
    CustodyCreditUnsupportedError,
    InsufficientBalanceError,
    InsufficientLiquidityError,
    NotYetLiquidatableError,
    PoolNotFoundError,
    ReentrancyError,
    SelfLiquidationError,
    UnavailableError,
    ZeroAmountError,
)
from src.pl_common.response import error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="Zero", http_status=422)
        assert err.http_status == 422

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestTaggedErrors:
    def test_zero_amount_is_validation(self) -> None:
        err = ZeroAmountError()
        assert err.code == 1001
        assert err.http_status == 422

    def test_insufficient_balance_mentions_amounts(self) -> None:
        err = InsufficientBalanceError(required=6500, available=3000)
        assert err.code == 2001
        assert "6500" in err.message
        assert "3000" in err.message

    def test_unavailable(self) -> None:
        err = UnavailableError(required=1000, available=600)
        assert err.code == 2004

    def test_state_conflicts_use_409(self) -> None:
        for err in (
            AlreadyBorrowedError("P", "bob"),
            SelfLiquidationError(),
            NotYetLiquidatableError(due_at=10, now=9),
        ):
            assert err.http_status == 409
            assert 3000 < err.code < 4000

    def test_pool_not_found(self) -> None:
        err = PoolNotFoundError("P-404")
        assert err.code == 4001
        assert err.http_status == 404

    def test_reentrancy(self) -> None:
        assert ReentrancyError().code == 9001

    def test_error_name_drops_suffix(self) -> None:
        assert NotYetLiquidatableError(due_at=10, now=9).error_name == "NotYetLiquidatable"
        assert CustodyCreditUnsupportedError().error_name == "CustodyCreditUnsupported"
        assert AppError(code=9002, message="x").error_name == "AppError"


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"id": "abc"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"id": "abc"}

    def test_error_carries_tag(self) -> None:
        resp = error_response(InsufficientLiquidityError(required=400, available=100))
        assert resp.code == 2003
        assert resp.error == "InsufficientLiquidity"
        assert "400" in resp.message
        assert resp.data is None

    def test_success_has_no_tag(self) -> None:
        assert success_response({}).error is None

    def test_serialization(self) -> None:
        d = success_response({"shares": 1000}).model_dump()
        for key in ("code", "message", "error", "data", "timestamp", "request_id"):
            assert key in d
