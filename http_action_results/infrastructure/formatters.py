"""
Output formatting for result objects.

Turns a result into a Starlette response. Body values are converted with
FastAPI's jsonable_encoder and written as JSON through a text writer
obtained from a ResponseStreamWriterFactory, so tests can substitute
the writer.
"""

import io
import json
import logging
from typing import Any, BinaryIO, Protocol

from fastapi.encoders import jsonable_encoder
from starlette.responses import Response

from http_action_results.domain.results import StatusCodeResult

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
DEFAULT_ENCODING = "utf-8"


class ResponseStreamWriterFactory(Protocol):
    """Creates text writers over a response byte stream."""

    def create_writer(self, stream: BinaryIO, encoding: str) -> io.TextIOWrapper:
        """Return a text writer bound to ``stream`` using ``encoding``."""
        ...


class HttpResponseStreamWriterFactory:
    """Default writer factory backed by io.TextIOWrapper."""

    def create_writer(self, stream: BinaryIO, encoding: str) -> io.TextIOWrapper:
        return io.TextIOWrapper(stream, encoding=encoding, newline="")


class JsonOutputFormatter:
    """Writes values as compact JSON to a byte stream.

    Attributes:
        encoding: Character encoding of the written body.
    """

    media_type = JSON_MEDIA_TYPE

    def __init__(
        self,
        writer_factory: ResponseStreamWriterFactory | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._writer_factory = writer_factory or HttpResponseStreamWriterFactory()
        self.encoding = encoding

    def write(self, value: Any, stream: BinaryIO) -> None:
        """Write ``value`` to ``stream``. The stream is left open."""
        writer = self._writer_factory.create_writer(stream, self.encoding)
        try:
            json.dump(
                jsonable_encoder(value),
                writer,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
            writer.flush()
        finally:
            # Detaching keeps the writer from closing the caller's stream.
            writer.detach()


def render_result(
    result: StatusCodeResult, formatter: JsonOutputFormatter | None = None
) -> Response:
    """Render a result object into a Starlette response.

    Args:
        result: The result to render.
        formatter: Formatter for body-bearing results. Defaults to a
            UTF-8 JsonOutputFormatter.

    Returns:
        A response carrying the result's status code, headers and body.
    """
    headers = result.response_headers()
    logger.debug("Rendering %s (%d)", type(result).__name__, result.status_code)

    if not result.has_body:
        return Response(status_code=result.status_code, headers=headers)

    formatter = formatter or JsonOutputFormatter()
    buffer = io.BytesIO()
    formatter.write(result.formatted_value(), buffer)
    media_type = f"{formatter.media_type}; charset={formatter.encoding}"
    return Response(
        content=buffer.getvalue(),
        status_code=result.status_code,
        headers=headers,
        media_type=media_type,
    )
