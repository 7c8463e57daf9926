"""
http-action-results: server error responses for FastAPI controllers.

Package root. Layered the same way as a small hexagonal service:

Layers:
    - domain: Result value objects and errors. No framework imports.
    - application: Helper functions that pick which result to build.
    - infrastructure: Output formatting and rendering to Starlette responses.
    - interfaces: Controller base, routing decorator, FastAPI routers.
    - shared: Cross-cutting concerns (errors, logging).
"""

from http_action_results.application.server_errors import (
    bad_gateway,
    gateway_timeout,
    http_version_not_supported,
    internal_server_error,
    not_implemented,
    service_unavailable,
)
from http_action_results.domain.errors import ArgumentNullError, HttpActionResultError
from http_action_results.domain.results import (
    BadGatewayResult,
    ExceptionResult,
    GatewayTimeoutResult,
    HttpVersionNotSupportedResult,
    InternalServerErrorResult,
    NotImplementedResult,
    ObjectResult,
    ServiceUnavailableResult,
    StatusCodeResult,
)
from http_action_results.infrastructure.formatters import render_result
from http_action_results.interfaces.controller import (
    ControllerBase,
    ServerErrorControllerMixin,
    renders_action_results,
)

__all__ = [
    "ArgumentNullError",
    "BadGatewayResult",
    "ControllerBase",
    "ExceptionResult",
    "GatewayTimeoutResult",
    "HttpActionResultError",
    "HttpVersionNotSupportedResult",
    "InternalServerErrorResult",
    "NotImplementedResult",
    "ObjectResult",
    "ServerErrorControllerMixin",
    "ServiceUnavailableResult",
    "StatusCodeResult",
    "bad_gateway",
    "gateway_timeout",
    "http_version_not_supported",
    "internal_server_error",
    "not_implemented",
    "render_result",
    "renders_action_results",
    "service_unavailable",
]
