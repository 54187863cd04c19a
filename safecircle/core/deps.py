"""FastAPI dependencies."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from safecircle.core.errors import AuthError, InternalAuthError, Unauthenticated
from safecircle.core.security import TokenClaims, TokenService
from safecircle.core.ws_manager import ConnectionManager

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_ws_manager(request: Request) -> ConnectionManager:
    return request.app.state.ws_manager


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Require a valid bearer token. Returns the identity it carries."""
    if not credentials or not credentials.credentials:
        raise Unauthenticated()
    try:
        return tokens.verify(credentials.credentials)
    except AuthError:
        raise
    except Exception:
        logger.exception("Token verification failed unexpectedly")
        raise InternalAuthError()


CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]
