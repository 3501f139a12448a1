"""Read-only access to the S3 bucket that holds the site."""

from __future__ import annotations

from .protocols import S3ClientProtocol, SessionProtocol
from .s3_operations import FetchedObject, ObjectFetcher, S3Operations


__all__ = [
    "FetchedObject",
    "ObjectFetcher",
    "S3Operations",
    "S3ClientProtocol",
    "SessionProtocol",
]
