"""
Pydantic schemas for error responses.

These schemas define the API contract of 500 responses.
No business logic belongs here.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of a 500 response built from an exception.

    The detail fields are only present when error detail is exposed.
    """

    message: str
    exception_message: str | None = None
    exception_type: str | None = None
    stack_trace: str | None = None
