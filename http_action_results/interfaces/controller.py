"""
Controller base and routing glue.

ServerErrorControllerMixin binds the server error helpers as methods,
so ``self.bad_gateway()`` works inside any controller. ControllerBase
is built per request by FastAPI's dependency injection.

Endpoints returning result objects must be wrapped with
renders_action_results and registered with ``response_model=None``.
"""

import functools
import inspect
from typing import Any, Callable

from fastapi import Request

from http_action_results.application import server_errors
from http_action_results.core.config import settings
from http_action_results.domain.results import StatusCodeResult
from http_action_results.infrastructure.formatters import (
    JsonOutputFormatter,
    render_result,
)


class ServerErrorControllerMixin:
    """Server error (5xx) helpers for controller classes."""

    internal_server_error = server_errors.internal_server_error
    not_implemented = server_errors.not_implemented
    bad_gateway = server_errors.bad_gateway
    service_unavailable = server_errors.service_unavailable
    gateway_timeout = server_errors.gateway_timeout
    http_version_not_supported = server_errors.http_version_not_supported


class ControllerBase(ServerErrorControllerMixin):
    """Base class for request-scoped controllers.

    Use as a FastAPI dependency: ``controller: MyController = Depends()``.
    """

    def __init__(self, request: Request) -> None:
        self.request = request


def _to_response(value: Any) -> Any:
    if isinstance(value, StatusCodeResult):
        formatter = JsonOutputFormatter(encoding=settings.response_encoding)
        return render_result(value, formatter)
    return value


def renders_action_results(endpoint: Callable[..., Any]) -> Callable[..., Any]:
    """Render result objects returned by ``endpoint`` into responses.

    Other return values pass through to FastAPI unchanged. The wrapper
    keeps the endpoint's signature and sync/async nature, so FastAPI
    still resolves parameters and runs sync endpoints in its threadpool.
    """
    if inspect.iscoroutinefunction(endpoint):

        @functools.wraps(endpoint)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            return _to_response(await endpoint(*args, **kwargs))

        return async_wrapper

    @functools.wraps(endpoint)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return _to_response(endpoint(*args, **kwargs))

    return wrapper
