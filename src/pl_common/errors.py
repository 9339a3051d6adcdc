"""Unified error codes and custom exceptions.

Every failure is reported as a tagged AppError subclass; nothing is retried
or downgraded. Error code ranges:
  1xxx: Validation (rejected before any mutation)
  2xxx: Insufficiency (balance, collateral, pool liquidity)
  3xxx: Loan / depositor state conflict
  4xxx: Pool registry
  5xxx: External collaborators (oracle, custody)
  6xxx: Identity / ownership
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)

    @property
    def error_name(self) -> str:
        """Tag reported to API clients: the subclass name without "Error"."""
        if type(self) is AppError:
            return "AppError"
        return type(self).__name__.removesuffix("Error")


# --- 1xxx: Validation ---

class ZeroAmountError(AppError):
    def __init__(self, detail: str = "Amount must be greater than zero") -> None:
        super().__init__(1001, detail, 422)


class ZeroCollateralError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Collateral amount must be greater than zero", 422)


class ZeroRepayError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Repay amount and repay asset balance must be non-zero", 422)


class InvalidDurationError(AppError):
    def __init__(self, duration: int) -> None:
        super().__init__(1004, f"Loan duration must be positive, got {duration}", 422)


class InvalidParameterError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1005, f"Invalid pool parameter: {detail}", 422)


# --- 2xxx: Insufficiency ---

class InsufficientBalanceError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient balance: required {required}, available {available}",
            422,
        )


class InsufficientCollateralError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2002,
            f"Insufficient collateral: required {required}, available {available}",
            422,
        )


class InsufficientLiquidityError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2003,
            f"Insufficient pool liquidity: required {required}, available {available}",
            422,
        )


class UnavailableError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2004,
            f"Withdrawal unavailable: owed {required}, un-borrowed balance {available}",
            422,
        )


class InsufficientReserveError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2005,
            f"Insufficient reserve: required {required}, available {available}",
            422,
        )


# --- 3xxx: State conflict ---

class AlreadyBorrowedError(AppError):
    def __init__(self, pool_id: str, principal: str) -> None:
        super().__init__(3001, f"{principal} already has an active loan in pool {pool_id}", 409)


class NoActiveLoanError(AppError):
    def __init__(self, pool_id: str, principal: str) -> None:
        super().__init__(3002, f"{principal} has no active loan in pool {pool_id}", 409)


class SelfLiquidationError(AppError):
    def __init__(self) -> None:
        super().__init__(3003, "A borrower cannot liquidate their own loan", 409)


class NotYetLiquidatableError(AppError):
    def __init__(self, due_at: int, now: int) -> None:
        super().__init__(3004, f"Loan is not liquidatable until {due_at} (now {now})", 409)


class NoCollateralError(AppError):
    def __init__(self, pool_id: str, principal: str) -> None:
        super().__init__(3005, f"{principal} has no collateral locked in pool {pool_id}", 409)


# --- 4xxx: Pool registry ---

class PoolNotFoundError(AppError):
    def __init__(self, pool_id: str) -> None:
        super().__init__(4001, f"Pool not found: {pool_id}", 404)


class PoolExistsError(AppError):
    def __init__(self, pool_id: str) -> None:
        super().__init__(4002, f"Pool already exists: {pool_id}", 409)


# --- 5xxx: External collaborators ---

class OracleUnavailableError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(5001, f"Price oracle stale or unavailable: {detail}", 503)


class TransferFailedError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(5002, f"Asset transfer failed: {detail}", 502)


class CustodyCreditUnsupportedError(AppError):
    def __init__(self) -> None:
        super().__init__(5003, "Custody backend does not support crediting", 501)


class OracleUpdateUnsupportedError(AppError):
    def __init__(self) -> None:
        super().__init__(5004, "Price feed does not accept manual rate updates", 501)


# --- 6xxx: Identity ---

class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(6001, "Invalid or expired credentials", 401)


class NotOwnerError(AppError):
    def __init__(self) -> None:
        super().__init__(6002, "Owner principal required", 403)


# --- 9xxx: System ---

class ReentrancyError(AppError):
    def __init__(self) -> None:
        super().__init__(9001, "Re-entrant call rejected: another operation is in flight", 409)


class InvariantViolationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9002, f"Ledger invariant violated: {detail}", 500)
