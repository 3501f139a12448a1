"""Result-typed wrapper around S3 ``get_object``.

boto3 ``ClientError`` exceptions are captured here and turned into
``StorageError`` values carrying the original S3 error code, so the rest of
the pipeline never sees a raised storage failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import StorageError
from ..result import Failure, Result, Success
from .protocols import S3ClientProtocol


_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedObject:
    """Object returned by a successful fetch.

    Any field may be missing; the response mapper decides whether that is fatal.

    Attributes:
        body: Raw object bytes.
        content_type: Content-Type stored with the object.
        etag: Entity tag exactly as S3 reports it (quotes included).
    """

    body: bytes | None = None
    content_type: str | None = None
    etag: str | None = None


class ObjectFetcher(Protocol):
    """Anything that can fetch a single object by bucket and key."""

    async def get_object(self, bucket: str, key: str) -> Result[FetchedObject, StorageError]:
        """Fetch one object, never raising for storage-level failures."""
        ...


class S3Operations:
    """Pure functional interface for S3 reads.

    Example:
        ```python
        s3_ops = S3Operations(s3_client)
        result = await s3_ops.get_object("site-bucket", "docs/index.html")

        match result:
            case Success(obj):
                render(obj)
            case Failure(StorageError(code="AccessDenied")):
                # missing or unreadable
                ...
            case Failure(error):
                logger.error("S3 error: %s", error)
        ```
    """

    def __init__(self, s3_client: S3ClientProtocol) -> None:
        """Initialize S3 operations wrapper.

        Args:
            s3_client: aioboto3 S3 client instance
        """
        self._client = s3_client

    async def get_object(self, bucket: str, key: str) -> Result[FetchedObject, StorageError]:
        """Get object from S3.

        No retries happen here; botocore's own retry config is the only one.

        Args:
            bucket: S3 bucket name
            key: Object key

        Returns:
            Success(FetchedObject) if the object was retrieved
            Failure(StorageError) carrying the S3 error code otherwise
        """
        try:
            response = await self._client.get_object(Bucket=bucket, Key=key)
            body = response.get("Body")
            data: bytes | None = None
            if body is not None:
                if not hasattr(body, "read"):
                    return Failure(
                        StorageError(
                            code="InvalidResponse",
                            message=f"Expected streaming body with read() method, got {type(body)}",
                            bucket=bucket,
                            key=key,
                        )
                    )
                raw = await body.read()
                if not isinstance(raw, bytes):
                    return Failure(
                        StorageError(
                            code="InvalidResponse",
                            message=f"Expected bytes from S3, got {type(raw)}",
                            bucket=bucket,
                            key=key,
                        )
                    )
                data = raw
        except ClientError as e:
            return Failure(self._classify_error(e, bucket, key))
        except BotoCoreError as e:
            # Transport failures (timeouts, unreachable endpoint) carry no S3 code.
            return Failure(
                StorageError(code=type(e).__name__, message=str(e), bucket=bucket, key=key)
            )

        return Success(
            FetchedObject(
                body=data,
                content_type=_optional_str(response.get("ContentType")),
                etag=_optional_str(response.get("ETag")),
            )
        )

    def _classify_error(self, error: ClientError, bucket: str, key: str) -> StorageError:
        """Convert a boto3 ClientError into a StorageError, keeping its code verbatim."""
        details = error.response.get("Error", {})
        code = str(details.get("Code", "Unknown"))
        message = str(details.get("Message", ""))
        _logger.debug("GetObject s3://%s/%s failed with %s", bucket, key, code)
        return StorageError(code=code, message=message, bucket=bucket, key=key)


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None
