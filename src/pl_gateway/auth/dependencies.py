"""FastAPI dependencies: get_current_principal, require_owner.

Usage in any protected router:
    from src.pl_gateway.auth.dependencies import get_current_principal

    @router.post("/protected")
    async def protected(principal: str = Depends(get_current_principal)):
        ...
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config.settings import settings
from src.pl_common.errors import InvalidCredentialsError, NotOwnerError
from src.pl_gateway.auth.jwt_handler import decode_principal

_bearer = HTTPBearer(auto_error=False)

# Reusable 401 exception with WWW-Authenticate header
_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str:
    """Extract and validate the Bearer token, return the calling principal.

    The principal is also recorded on request.state for the request log.
    Raises HTTP 401 if the token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _CREDENTIALS_EXCEPTION
    try:
        principal = decode_principal(credentials.credentials)
    except InvalidCredentialsError:
        raise _CREDENTIALS_EXCEPTION from None
    request.state.principal = principal
    return principal


async def require_owner(
    principal: str = Depends(get_current_principal),
) -> str:
    """Verify the caller is the configured owner principal.

    Raises HTTP 403 (NotOwnerError, code 6002) otherwise.
    """
    if principal != settings.OWNER_PRINCIPAL:
        raise NotOwnerError()
    return principal
