"""
Errors raised by the result helpers.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class HttpActionResultError(Exception):
    """Base error for all http-action-results errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ArgumentNullError(HttpActionResultError, ValueError):
    """Raised when a required argument is ``None``.

    Signals a caller contract violation, never a runtime failure.
    """

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Value cannot be None. (Parameter '{param_name}')")
        self.param_name = param_name
