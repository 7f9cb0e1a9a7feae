"""
FastAPI dependencies for authentication and authorization.

authenticate() never fails: it turns the Authorization header into a
RequestContext whose principal is None for anonymous requests. The require_*
dependencies build on it and raise UnauthorizedError when the principal does
not qualify.
"""

import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import BaseModel
from typing import Optional

from jobly.core.exceptions import UnauthorizedError
from jobly.core.security import decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>), optional
security = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    """Authenticated identity for a single request."""
    username: str
    is_admin: bool = False


class RequestContext(BaseModel):
    """Per-request state shared by the auth dependencies."""
    principal: Optional[Principal] = None


# Stand-in used by admin-or-self checks when nobody is logged in; never matches a username
_ANONYMOUS = Principal(username="", is_admin=False)


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> RequestContext:
    """
    Build the request context from an optional bearer token.

    A valid token attaches its {username, isAdmin} payload as the principal.
    A missing, malformed, badly signed or expired token yields an anonymous
    context; it is not an error.
    """
    if not credentials:
        return RequestContext()

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.debug(f"Ignoring invalid bearer token: {e}")
        return RequestContext()

    username = payload.get("username")
    if not username:
        return RequestContext()

    return RequestContext(
        principal=Principal(username=username, is_admin=payload.get("isAdmin") is True)
    )


def require_logged_in(context: RequestContext = Depends(authenticate)) -> Principal:
    """Require any authenticated user."""
    if context.principal is None:
        raise UnauthorizedError()
    return context.principal


def require_admin(context: RequestContext = Depends(authenticate)) -> Principal:
    """Require an authenticated admin."""
    principal = context.principal
    if principal is None or not principal.is_admin:
        raise UnauthorizedError()
    return principal


def require_admin_or_self(
    username: str,
    context: RequestContext = Depends(authenticate)
) -> Principal:
    """
    Require an admin, or the user named by the {username} path parameter.
    """
    principal = context.principal or _ANONYMOUS
    if not (principal.is_admin or (principal.username and principal.username == username)):
        raise UnauthorizedError()
    return principal
