"""
Centralized error handlers for FastAPI.

Maps gateway domain errors raised by downstream handlers to the
upstream payloads the envelope middleware normalizes:
- ClientValidationError -> 400 with a JSON array of messages.
- ResourceNotFoundError -> 404, passed through to callers.
- UpstreamUnavailableError -> 503, replaced by the generic message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gateway.domain.normalization.errors import (
    ClientValidationError,
    GatewayDomainError,
    ResourceNotFoundError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ClientValidationError)
    async def handle_client_validation(
        _request: Request, exc: ClientValidationError
    ) -> JSONResponse:
        """Emit the caller-facing messages as a bare JSON array."""
        logger.info("Client validation failed with %d message(s)", len(exc.messages))
        return JSONResponse(status_code=HTTP_400, content=exc.messages)

    @app.exception_handler(ResourceNotFoundError)
    async def handle_resource_not_found(
        _request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        logger.warning("Resource not found: %s", exc.resource)
        return _error_response(HTTP_404, "Resource not found")

    @app.exception_handler(UpstreamUnavailableError)
    async def handle_upstream_unavailable(
        _request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        logger.error("Upstream unavailable: %s", exc.reason)
        return _error_response(HTTP_503, "Upstream unavailable")

    @app.exception_handler(GatewayDomainError)
    async def handle_gateway_domain(
        _request: Request, exc: GatewayDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled gateway domain errors."""
        logger.error("Unhandled gateway domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")
