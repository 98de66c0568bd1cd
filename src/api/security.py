"""Bearer-token authentication gate."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_token_service, get_user_repo
from domain.model.errors import StoreUnavailableError, UnauthenticatedError
from port.token_service import TokenService
from port.user_repository import UserRepository
from services.auth_service import resolve_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials:
        return credentials.credentials
    raw = request.headers.get("Authorization", "").strip()
    # Older clients send the token without the "Bearer" scheme
    if raw and " " not in raw:
        return raw
    return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Return the raw token. Raises 401 before any store access if none was sent."""
    token = _extract_token(request, credentials)
    if token is None:
        raise _unauthorized("Not authenticated")
    return token


def get_current_account(
    request: Request,
    token: str = Depends(require_token),
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Return the authenticated email. Raises 401 if not authenticated."""
    try:
        email = resolve_token(repo, tokens, token)
    except UnauthenticatedError as e:
        logger.debug("Authentication rejected", extra={"reason": str(e)})
        raise _unauthorized("Invalid authentication credentials")
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication temporarily unavailable",
        )

    request.state.account_email = email
    return email
