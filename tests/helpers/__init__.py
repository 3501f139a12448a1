"""Shared test utilities: Result unwrapping and in-memory S3 doubles.

Usage:
    >>> from tests.helpers import FakeS3Client, expect_success
    >>> client = FakeS3Client()
    >>> client.put("index.html", b"<h1>hi</h1>", "text/html", '"abc"')
"""

from __future__ import annotations

from tests.helpers.fakes import (
    FakeClientContext,
    FakeS3Client,
    FakeSession,
    FakeStreamingBody,
    RaisingSink,
    RecordingSink,
    ScriptedFetch,
    client_error,
)
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # S3 doubles
    "FakeS3Client",
    "FakeStreamingBody",
    "FakeClientContext",
    "FakeSession",
    "ScriptedFetch",
    "client_error",
    # Sinks
    "RecordingSink",
    "RaisingSink",
]
