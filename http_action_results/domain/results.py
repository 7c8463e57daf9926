"""
Result value objects for server error responses.

Each result describes one HTTP response (status, headers, body value).
Results are created per request, immutable after construction and
consumed once by the renderer. They contain no framework imports.
"""

import traceback
from dataclasses import dataclass
from typing import Any, ClassVar

from http_action_results.domain.errors import ArgumentNullError

GENERIC_ERROR_MESSAGE = "An error has occurred."


@dataclass(frozen=True)
class StatusCodeResult:
    """A response made of a status code and no body."""

    status_code: ClassVar[int]
    has_body: ClassVar[bool] = False

    def response_headers(self) -> dict[str, str]:
        """Headers to set on the response, in addition to the defaults."""
        return {}

    def formatted_value(self) -> Any:
        """The value handed to the output formatter."""
        return None


@dataclass(frozen=True)
class ObjectResult(StatusCodeResult):
    """A response whose body is ``value`` run through the output formatter."""

    has_body: ClassVar[bool] = True

    value: Any = None

    def formatted_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class InternalServerErrorResult(StatusCodeResult):
    """Internal Server Error (500) with an empty body."""

    status_code: ClassVar[int] = 500


@dataclass(frozen=True)
class ExceptionResult(StatusCodeResult):
    """Internal Server Error (500) describing an exception.

    Attributes:
        exception: The exception to include in the error.
        include_error_detail: True to expose the exception message, type
            and stack trace in the body; otherwise only a generic message.
    """

    status_code: ClassVar[int] = 500
    has_body: ClassVar[bool] = True

    exception: BaseException
    include_error_detail: bool = False

    def __post_init__(self) -> None:
        if self.exception is None:
            raise ArgumentNullError("exception")

    def formatted_value(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": GENERIC_ERROR_MESSAGE}
        if not self.include_error_detail:
            return body

        exc_type = type(self.exception)
        body["exception_message"] = str(self.exception)
        body["exception_type"] = f"{exc_type.__module__}.{exc_type.__qualname__}"
        tb = self.exception.__traceback__
        body["stack_trace"] = "".join(traceback.format_tb(tb)) if tb else None
        return body


@dataclass(frozen=True)
class NotImplementedResult(StatusCodeResult):
    """Not Implemented (501) with an empty body."""

    status_code: ClassVar[int] = 501


@dataclass(frozen=True)
class BadGatewayResult(StatusCodeResult):
    """Bad Gateway (502) with an empty body."""

    status_code: ClassVar[int] = 502


@dataclass(frozen=True)
class ServiceUnavailableResult(StatusCodeResult):
    """Service Unavailable (503).

    ``length_of_delay`` is sent verbatim as the ``Retry-After`` header.
    Its format is not validated.
    """

    status_code: ClassVar[int] = 503

    length_of_delay: str | None = None

    def response_headers(self) -> dict[str, str]:
        if self.length_of_delay is None:
            return {}
        return {"Retry-After": self.length_of_delay}


@dataclass(frozen=True)
class GatewayTimeoutResult(StatusCodeResult):
    """Gateway Timeout (504) with an empty body."""

    status_code: ClassVar[int] = 504


@dataclass(frozen=True)
class HttpVersionNotSupportedResult(ObjectResult):
    """HTTP Version Not Supported (505) with ``value`` formatted in the body."""

    status_code: ClassVar[int] = 505
