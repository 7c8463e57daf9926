"""
Diagnostics router.

Each route answers with one server error status, built through the
controller helpers. Useful for checking how clients, proxies and
monitoring react to 5xx responses.
"""

import logging

from fastapi import APIRouter, Depends, Query

from http_action_results.core.config import settings
from http_action_results.domain.results import StatusCodeResult
from http_action_results.interfaces.controller import (
    ControllerBase,
    renders_action_results,
)
from http_action_results.interfaces.schemas import ErrorResponse

logger = logging.getLogger(__name__)

DIAGNOSTIC_FAILURE_MESSAGE = "Diagnostic failure"

router = APIRouter(prefix="/diagnostics", tags=["diagnostics"])


class DiagnosticsController(ControllerBase):
    """Controller for the diagnostics routes."""

    def simulated_failure(self) -> RuntimeError:
        """Build a raised-and-caught exception so it carries a traceback."""
        try:
            raise RuntimeError(DIAGNOSTIC_FAILURE_MESSAGE)
        except RuntimeError as exc:
            return exc


@router.get(
    "/internal-server-error",
    response_model=None,
    summary="Internal Server Error (500)",
)
@renders_action_results
def internal_server_error(
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with an empty 500."""
    return controller.internal_server_error()


@router.get(
    "/exception",
    response_model=None,
    responses={500: {"model": ErrorResponse}},
    summary="Internal Server Error (500) from an exception",
)
@renders_action_results
def exception(
    include_error_detail: bool = Query(
        default=False,
        description=(
            "Expose the exception detail in the body. Ignored unless "
            "include_error_detail is enabled in the settings."
        ),
    ),
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with a 500 describing a simulated failure."""
    expose = include_error_detail and settings.include_error_detail
    logger.info("Simulating failure, include_error_detail=%s", expose)
    return controller.internal_server_error(controller.simulated_failure(), expose)


@router.get(
    "/not-implemented",
    response_model=None,
    summary="Not Implemented (501)",
)
@renders_action_results
def not_implemented(
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with an empty 501."""
    return controller.not_implemented()


@router.get(
    "/bad-gateway",
    response_model=None,
    summary="Bad Gateway (502)",
)
@renders_action_results
def bad_gateway(controller: DiagnosticsController = Depends()) -> StatusCodeResult:
    """Respond with an empty 502."""
    return controller.bad_gateway()


@router.get(
    "/service-unavailable",
    response_model=None,
    summary="Service Unavailable (503)",
)
@renders_action_results
async def service_unavailable(
    retry_after: str | None = Query(
        default=None, description="Value of the Retry-After header"
    ),
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with a 503, optionally carrying a Retry-After header."""
    if retry_after is None:
        return controller.service_unavailable()
    return controller.service_unavailable(retry_after)


@router.get(
    "/gateway-timeout",
    response_model=None,
    summary="Gateway Timeout (504)",
)
@renders_action_results
def gateway_timeout(
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with an empty 504."""
    return controller.gateway_timeout()


@router.get(
    "/http-version-not-supported",
    response_model=None,
    summary="HTTP Version Not Supported (505)",
)
@renders_action_results
def http_version_not_supported(
    value: str | None = Query(default=None, description="Value echoed in the body"),
    controller: DiagnosticsController = Depends(),
) -> StatusCodeResult:
    """Respond with a 505 whose body is ``value`` as JSON."""
    return controller.http_version_not_supported(value)
