"""JWT verification for the identity collaborator.

Tokens are issued by an upstream identity service that shares JWT_SECRET
(HS256). The ledger only verifies them; `create_access_token` exists for
operator tooling and tests.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from config.settings import settings
from src.pl_common.errors import InvalidCredentialsError

_ALGORITHM = settings.JWT_ALGORITHM  # "HS256"
_ACCESS_EXPIRE = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)


def create_access_token(principal: str) -> str:
    """Issue a short-lived access token (default: 30 min)."""
    now = datetime.now(UTC)
    payload = {
        "sub": principal,
        "type": "access",
        "iat": now,
        "exp": now + _ACCESS_EXPIRE,
    }
    return str(jwt.encode(payload, settings.JWT_SECRET, algorithm=_ALGORITHM))


def decode_principal(token: str) -> str:
    """Validate an access token and return its principal (the `sub` claim).

    Raises:
        InvalidCredentialsError: Token invalid, expired, of the wrong type,
                                 or missing a subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[_ALGORITHM],  # Explicit list prevents algorithm confusion
        )
    except JWTError:
        raise InvalidCredentialsError() from None

    if payload.get("type") != "access":
        raise InvalidCredentialsError()
    principal = payload.get("sub")
    if not principal:
        raise InvalidCredentialsError()
    return str(principal)
