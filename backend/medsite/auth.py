"""
Medsite Backend — Authentication Gate
======================================

What:  Guards every admin-scoped mutating route.
How:   Reads `Authorization: Bearer <token>`, verifies it with the token
       service, and attaches the decoded claims to `request.state.admin`.
       Protected routers use `AdminRoute`, which runs the check before
       FastAPI reads or validates the request body; `require_admin` then
       hands the already-verified claims to the handler.

Outcomes:
    no bearer credential      → MissingTokenError (401), before the handler
                                or its body validation runs
    tampered/expired/garbled  → InvalidTokenError (403)
    valid                     → AdminClaims returned to the handler

Any valid admin token grants every protected route; there are no roles.
"""

import logging
from typing import Any, Callable, Coroutine, Optional

from fastapi import Depends, Request, Response
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from medsite.exceptions import InvalidTokenError, MissingTokenError
from medsite.middleware.request_id import request_id_var
from medsite.services.token_service import AdminClaims, token_service

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches MissingTokenError (401)
# instead of FastAPI's built-in 403
bearer_scheme = HTTPBearer(auto_error=False, description="Admin session token")


def _verify(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> AdminClaims:
    if credentials is None or not credentials.credentials:
        raise MissingTokenError(context={"path": request.url.path})

    try:
        claims = token_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning(
            "[%s] Rejected admin token on %s: %s",
            request_id_var.get(""),
            request.url.path,
            e.reason,
        )
        raise

    request.state.admin = claims
    return claims


async def authenticate(request: Request) -> AdminClaims:
    """Verifies the bearer token straight from the request headers."""
    return _verify(request, await bearer_scheme(request))


class AdminRoute(APIRoute):
    """APIRoute that authenticates before the body is parsed."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            await authenticate(request)
            return await handler(request)

        return gated_handler


async def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AdminClaims:
    """Resolves the calling admin or rejects the request."""
    claims = getattr(request.state, "admin", None)
    if claims is not None:
        return claims
    return _verify(request, credentials)
