"""
Application entry point.

Creates the FastAPI application and wires together:
- Diagnostics router
- Error handlers (unhandled errors rendered as 500 results)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from http_action_results.core.config import settings
from http_action_results.interfaces.diagnostics import router as diagnostics_router
from http_action_results.shared.errors.handlers import register_error_handlers
from http_action_results.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers the diagnostics router and error handlers.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(diagnostics_router, prefix="/api/v1")

    return app


app = create_app()
