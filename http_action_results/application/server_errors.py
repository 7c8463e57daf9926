"""
Server error helpers.

Input: the controller the helper is called on, plus optional arguments.
Output: a result object for a 5xx response.
Side effects: None.
Failure cases: ArgumentNullError when an exception argument is None.

Every helper takes the controller as its first argument so it can be
bound as a method on any controller class (see ServerErrorControllerMixin).
The controller itself is not inspected.
"""

from typing import Any, overload

from http_action_results.domain.errors import ArgumentNullError
from http_action_results.domain.results import (
    BadGatewayResult,
    ExceptionResult,
    GatewayTimeoutResult,
    HttpVersionNotSupportedResult,
    InternalServerErrorResult,
    NotImplementedResult,
    ServiceUnavailableResult,
)


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


@overload
def internal_server_error(controller: object) -> InternalServerErrorResult: ...


@overload
def internal_server_error(
    controller: object, exception: BaseException | None
) -> ExceptionResult: ...


@overload
def internal_server_error(
    controller: object, exception: BaseException | None, include_error_detail: bool
) -> ExceptionResult: ...


def internal_server_error(
    controller: object,
    exception: BaseException | None = _MISSING,
    include_error_detail: bool = _MISSING,
) -> InternalServerErrorResult | ExceptionResult:
    """Create a result that produces an Internal Server Error (500) response.

    Called without an exception, the response has an empty body. Called
    with one, the body describes it, and ``include_error_detail`` controls
    whether the exception message, type and stack trace are exposed.

    Args:
        controller: Controller instance.
        exception: The exception to include in the error.
        include_error_detail: True if the error should include exception
            messages; otherwise False.

    Returns:
        An InternalServerErrorResult, or an ExceptionResult when an
        exception was passed.

    Raises:
        ArgumentNullError: If ``exception`` is passed as None.
        TypeError: If ``include_error_detail`` is passed without an exception.
    """
    if exception is _MISSING:
        if include_error_detail is not _MISSING:
            raise TypeError("include_error_detail requires an exception")
        return InternalServerErrorResult()
    if exception is None:
        raise ArgumentNullError("exception")
    if include_error_detail is _MISSING:
        return ExceptionResult(exception)
    return ExceptionResult(exception, include_error_detail)


def not_implemented(controller: object) -> NotImplementedResult:
    """Create a result that produces a Not Implemented (501) response."""
    return NotImplementedResult()


def bad_gateway(controller: object) -> BadGatewayResult:
    """Create a result that produces a Bad Gateway (502) response."""
    return BadGatewayResult()


def service_unavailable(
    controller: object, length_of_delay: str | None = None
) -> ServiceUnavailableResult:
    """Create a result that produces a Service Unavailable (503) response.

    Args:
        controller: Controller instance.
        length_of_delay: Length of delay after which the server will be
            running again. Sent as-is in the Retry-After header.
    """
    return ServiceUnavailableResult(length_of_delay)


def gateway_timeout(controller: object) -> GatewayTimeoutResult:
    """Create a result that produces a Gateway Timeout (504) response."""
    return GatewayTimeoutResult()


def http_version_not_supported(
    controller: object, value: Any
) -> HttpVersionNotSupportedResult:
    """Create a result that produces an HTTP Version Not Supported (505) response.

    Args:
        controller: Controller instance.
        value: The value to format in the entity body. Not validated.
    """
    return HttpVersionNotSupportedResult(value)
