"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (domain errors to upstream payloads)
- Response envelope middleware
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from gateway.application.normalization.normalize_response import (
    NormalizeResponseUseCase,
)
from gateway.core.config import Settings, settings as default_settings
from gateway.infrastructure.normalization.json_message_decoder import (
    PydanticMessageDecoder,
)
from gateway.interfaces.health import router as health_router
from gateway.shared.errors.handlers import register_error_handlers
from gateway.shared.logging import configure_logging
from gateway.shared.middleware.response_envelope import ResponseEnvelopeMiddleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the gateway.

    Args:
        settings: Overrides the environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, log_rewrites=settings.log_rewrites)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # --- Response Normalization ---
    use_case = NormalizeResponseUseCase(
        decoder=PydanticMessageDecoder(),
        policy=settings.to_policy(),
    )
    app.add_middleware(ResponseEnvelopeMiddleware, use_case=use_case)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
