"""Serve a static site out of an S3 bucket behind an HTTP proxy integration."""

from __future__ import annotations

from .config import HandlerSettings
from .diagnostics import DiagnosticSink, LoggingSink
from .errors import EffError, InvocationError, StorageError
from .handler import ProxyRequest, StaticSiteHandler
from .resolver import INDEX_DOCUMENT, CandidateKeys, resolve
from .responses import INTERNAL_ERROR, NOT_FOUND, Response
from .result import Failure, Result, Success
from .storage import FetchedObject, S3Operations


__all__ = [
    # Result
    "Result",
    "Success",
    "Failure",
    # Errors
    "EffError",
    "StorageError",
    "InvocationError",
    # Configuration
    "HandlerSettings",
    # Pipeline
    "ProxyRequest",
    "StaticSiteHandler",
    "CandidateKeys",
    "INDEX_DOCUMENT",
    "resolve",
    "FetchedObject",
    "S3Operations",
    "Response",
    "NOT_FOUND",
    "INTERNAL_ERROR",
    # Diagnostics
    "DiagnosticSink",
    "LoggingSink",
]
