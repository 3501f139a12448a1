"""Process-wide handler settings, read once from the environment."""

from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvocationError
from .result import Failure, Result, Success


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

MISSING_BUCKET_MESSAGE = "Missing BUCKET env"


class HandlerSettings(BaseModel):
    """Configuration for the static-site handler.

    Attributes:
        bucket: Bucket holding the site. ``None`` makes every request fail closed.
        endpoint_url: Custom S3 endpoint (MinIO, LocalStack); ``None`` for AWS.
        region_name: AWS region for the S3 client.
        log_level: Level applied to the ``s3static`` logger.
        connect_timeout: Seconds botocore waits to open a connection.
        read_timeout: Seconds botocore waits for a response.
        max_attempts: Total botocore attempts per S3 call, including the first.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bucket: str | None = None
    endpoint_url: str | None = None
    region_name: str = "us-east-1"
    log_level: LogLevel = "INFO"
    connect_timeout: float = Field(default=5.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HandlerSettings:
        """Build settings from environment variables.

        Empty strings are treated as unset, matching how Lambda console
        variables are usually cleared.

        Raises:
            pydantic.ValidationError: If a present variable has an invalid value.
        """
        env = os.environ if environ is None else environ

        def _get(name: str) -> str | None:
            value = env.get(name)
            return value if value else None

        values: dict[str, object] = {
            "bucket": _get("BUCKET"),
            "endpoint_url": _get("AWS_ENDPOINT_URL"),
        }
        region = _get("AWS_REGION")
        if region is not None:
            values["region_name"] = region
        log_level = _get("LOG_LEVEL")
        if log_level is not None:
            values["log_level"] = log_level.upper()
        return cls.model_validate(values)

    def require_bucket(self) -> Result[str, InvocationError]:
        """Return the bucket, or an InvocationError when it is not configured."""
        match self.bucket:
            case None:
                return Failure(InvocationError(message=MISSING_BUCKET_MESSAGE))
            case bucket:
                return Success(bucket)
