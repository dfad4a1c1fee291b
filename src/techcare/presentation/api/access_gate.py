"""Request gate that authenticates every non-public route.

Runs before routing. Public paths and CORS preflights pass straight
through; everything else needs a verifiable bearer token. On success the
caller's identity is attached to ``request.state.auth`` as an
``AuthContext`` for the role dependencies to read.
"""

import logging
from collections.abc import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from techcare.presentation.api.config import API_V1_PREFIX
from techcare.presentation.api.exception_handlers import auth_error_response
from techcare_auth import BEARER_PREFIX, JWTService
from techcare_identity import AuthContext
from techcare_identity.exceptions import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)

PUBLIC_PATHS: frozenset[str] = frozenset(
    {
        "/",
        "/health",
        f"{API_V1_PREFIX}/admin/signup",
        f"{API_V1_PREFIX}/admin/login",
        f"{API_V1_PREFIX}/customer/signup",
        f"{API_V1_PREFIX}/customer/login",
        f"{API_V1_PREFIX}/customer/forgot-password",
        f"{API_V1_PREFIX}/customer/reset-password",
        f"{API_V1_PREFIX}/technician/signup",
        f"{API_V1_PREFIX}/technician/login",
    },
)

PUBLIC_PREFIXES: tuple[str, ...] = (
    "/uploads/",
    "/docs",
    "/redoc",
    "/openapi.json",
)


def _normalize(path: str) -> str:
    return path.rstrip("/") or "/"


class AccessGateMiddleware(BaseHTTPMiddleware):
    """Reject unauthenticated calls to protected routes with 401."""

    def __init__(
        self,
        app: ASGIApp,
        jwt_service: JWTService,
        public_paths: Iterable[str] = PUBLIC_PATHS,
        public_prefixes: Iterable[str] = PUBLIC_PREFIXES,
    ):
        super().__init__(app)
        self._jwt_service = jwt_service
        self._public_paths = frozenset(_normalize(p) for p in public_paths)
        self._public_prefixes = tuple(public_prefixes)

    def is_public(self, path: str) -> bool:
        if _normalize(path) in self._public_paths:
            return True
        return path.startswith(self._public_prefixes)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS" or self.is_public(request.url.path):
            return await call_next(request)

        header = request.headers.get("Authorization", "").strip()
        if not header:
            logger.debug("No token on %s %s", request.method, request.url.path)
            return auth_error_response(UnauthenticatedError())

        token = header[len(BEARER_PREFIX) :] if header.startswith(BEARER_PREFIX) else header
        try:
            payload = self._jwt_service.parse(token)
        except InvalidTokenError as e:
            logger.info(
                "Rejected token on %s %s: %s",
                request.method,
                request.url.path,
                e.message,
            )
            return auth_error_response(e)

        request.state.auth = AuthContext.from_payload(payload, token.strip())
        return await call_next(request)
