"""
Tests for the result value objects (domain layer).

Tests immutability, the exception invariant and the error payload.
No framework or IO required.
"""

from dataclasses import FrozenInstanceError

import pytest

from http_action_results.domain.errors import ArgumentNullError
from http_action_results.domain.results import (
    GENERIC_ERROR_MESSAGE,
    ExceptionResult,
    HttpVersionNotSupportedResult,
    InternalServerErrorResult,
    ServiceUnavailableResult,
)


def _raised(exc: BaseException) -> BaseException:
    """Raise and catch ``exc`` so it carries a traceback."""
    try:
        raise exc
    except BaseException as caught:
        return caught


class TestImmutability:
    """Results cannot be changed after construction."""

    def test_service_unavailable_is_frozen(self) -> None:
        """The delay hint cannot be reassigned."""
        result = ServiceUnavailableResult("120")
        with pytest.raises(FrozenInstanceError):
            result.length_of_delay = "60"  # type: ignore[misc]

    def test_exception_result_is_frozen(self) -> None:
        """The detail flag cannot be reassigned."""
        result = ExceptionResult(ValueError("bad"))
        with pytest.raises(FrozenInstanceError):
            result.include_error_detail = True  # type: ignore[misc]

    def test_value_result_is_frozen(self) -> None:
        """The body value cannot be reassigned."""
        result = HttpVersionNotSupportedResult("HTTP/1.0")
        with pytest.raises(FrozenInstanceError):
            result.value = "HTTP/2"  # type: ignore[misc]


class TestExceptionResult:
    """Tests for the ExceptionResult invariant and body."""

    def test_none_exception_rejected(self) -> None:
        """An ExceptionResult is never built around None."""
        with pytest.raises(ArgumentNullError):
            ExceptionResult(None)  # type: ignore[arg-type]

    def test_body_without_detail(self) -> None:
        """Only the generic message is exposed by default."""
        result = ExceptionResult(_raised(ValueError("secret")))
        assert result.formatted_value() == {"message": GENERIC_ERROR_MESSAGE}

    def test_body_with_detail(self) -> None:
        """Detail exposes message, qualified type and stack trace."""
        result = ExceptionResult(_raised(ValueError("secret")), include_error_detail=True)
        body = result.formatted_value()
        assert body["message"] == GENERIC_ERROR_MESSAGE
        assert body["exception_message"] == "secret"
        assert body["exception_type"] == "builtins.ValueError"
        assert "_raised" in body["stack_trace"]

    def test_never_raised_exception_has_no_stack_trace(self) -> None:
        """An exception that was never raised has no traceback to show."""
        result = ExceptionResult(KeyError("k"), include_error_detail=True)
        assert result.formatted_value()["stack_trace"] is None

    def test_argument_null_error_message(self) -> None:
        """ArgumentNullError names the offending parameter."""
        error = ArgumentNullError("exception")
        assert error.param_name == "exception"
        assert "exception" in error.message


class TestEmptyResults:
    """Body-less results."""

    def test_internal_server_error_has_no_body(self) -> None:
        """A plain 500 result has no body to format."""
        result = InternalServerErrorResult()
        assert result.status_code == 500
        assert result.has_body is False
        assert result.formatted_value() is None

    def test_results_compare_by_value(self) -> None:
        """Results with equal fields are equal."""
        assert ServiceUnavailableResult("5") == ServiceUnavailableResult("5")
        assert ServiceUnavailableResult("5") != ServiceUnavailableResult("6")
