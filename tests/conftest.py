"""
Shared fixtures for the test suite.
"""

import io
from typing import BinaryIO

import pytest

from http_action_results.infrastructure.formatters import JsonOutputFormatter


class TestHttpResponseStreamWriterFactory:
    """Writer factory test double that records the encodings it was asked for."""

    __test__ = False

    def __init__(self) -> None:
        self.encodings: list[str] = []

    def create_writer(self, stream: BinaryIO, encoding: str) -> io.TextIOWrapper:
        self.encodings.append(encoding)
        return io.TextIOWrapper(stream, encoding=encoding, newline="")


@pytest.fixture
def writer_factory() -> TestHttpResponseStreamWriterFactory:
    """A fresh test writer factory."""
    return TestHttpResponseStreamWriterFactory()


@pytest.fixture
def json_formatter(writer_factory) -> JsonOutputFormatter:
    """A UTF-8 JSON formatter wired to the test writer factory."""
    return JsonOutputFormatter(writer_factory=writer_factory)
