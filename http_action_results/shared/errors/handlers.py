"""
Centralized error handlers for FastAPI.

Maps errors that escape an endpoint to 500 responses built from
ExceptionResult. Exception detail is only exposed when
settings.include_error_detail is enabled.
"""

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from http_action_results.core.config import settings
from http_action_results.domain.errors import ArgumentNullError
from http_action_results.domain.results import ExceptionResult
from http_action_results.infrastructure.formatters import (
    JsonOutputFormatter,
    render_result,
)

logger = logging.getLogger(__name__)


def _exception_response(exc: Exception) -> Response:
    """Render a 500 response describing ``exc``."""
    result = ExceptionResult(exc, settings.include_error_detail)
    return render_result(result, JsonOutputFormatter(encoding=settings.response_encoding))


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ArgumentNullError)
    async def handle_argument_null(
        _request: Request, exc: ArgumentNullError
    ) -> Response:
        """Handle helpers called with a None argument."""
        logger.error("Argument was None: %s", exc.param_name)
        return _exception_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _exception_response(exc)
