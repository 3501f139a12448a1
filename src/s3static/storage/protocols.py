"""
Shared Protocol definitions for the S3 client surface this package touches.

Only ``get_object`` is used; everything else on the aioboto3 client is
deliberately left out so test doubles stay small.
"""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

from botocore.config import Config


# ---------------------------------------------------------------------------
# S3 Response Protocols
# ---------------------------------------------------------------------------


class StreamingBodyProtocol(Protocol):
    """Protocol for S3 StreamingBody."""

    async def read(self) -> bytes: ...


class S3ResponseProtocol(Protocol):
    """Protocol for S3 get_object response."""

    def __getitem__(self, key: str) -> object: ...

    def get(self, key: str, default: object = ...) -> object: ...


# ---------------------------------------------------------------------------
# S3 Client Protocol
# ---------------------------------------------------------------------------


class S3ClientProtocol(Protocol):
    """Protocol for async S3 client."""

    async def get_object(self, **kwargs: object) -> S3ResponseProtocol: ...


# ---------------------------------------------------------------------------
# Async Context Manager Protocol
# ---------------------------------------------------------------------------


class AsyncContextManagerProtocol(Protocol):
    """Protocol for async context manager returned by session.client()."""

    async def __aenter__(self) -> S3ClientProtocol: ...
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None: ...


# ---------------------------------------------------------------------------
# Session Protocol
# ---------------------------------------------------------------------------


class SessionProtocol(Protocol):
    """Protocol for aioboto3.Session."""

    def client(
        self,
        service_name: str,
        endpoint_url: str | None = ...,
        config: Config | None = ...,
        **kwargs: object,
    ) -> AsyncContextManagerProtocol: ...


__all__ = [
    "StreamingBodyProtocol",
    "S3ResponseProtocol",
    "S3ClientProtocol",
    "AsyncContextManagerProtocol",
    "SessionProtocol",
]
