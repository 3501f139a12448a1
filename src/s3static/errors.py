"""
Error ADTs for the static-site handler.

Type Safety:
    - All error types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - EffError is a closed union; handle it with ``match`` and ``assert_never``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Never


@dataclass(frozen=True)
class StorageError:
    """Failure reported by the object store.

    Attributes:
        kind: Discriminator for pattern matching. Always "StorageError".
        code: Error code exactly as reported by S3 (e.g. "AccessDenied").
        message: Error message from S3.
        bucket: Bucket the request was issued against.
        key: Object key the request was issued for.
    """

    code: str
    message: str = ""
    bucket: str = ""
    key: str = ""
    kind: Literal["StorageError"] = "StorageError"


@dataclass(frozen=True)
class InvocationError:
    """Internal contract violation: bad configuration or unexpected metadata.

    Attributes:
        kind: Discriminator for pattern matching. Always "InvocationError".
        message: Human-readable error description.
    """

    message: str
    kind: Literal["InvocationError"] = "InvocationError"


# Union of every error that can flow through the pipeline
EffError = StorageError | InvocationError


def assert_never(value: Never) -> Never:
    """Type-safe exhaustiveness check for pattern matching.

    Example:
        >>> match error:
        ...     case StorageError(): ...
        ...     case InvocationError(): ...
        ...     case _:
        ...         assert_never(error)  # mypy error if variants missing
    """
    raise AssertionError(f"Unhandled case: {value!r}")


def describe(error: EffError) -> str:
    """Render an error as a single log-friendly line."""
    match error:
        case StorageError(code=code, message=message, bucket=bucket, key=key):
            return f"StorageError code={code} bucket={bucket} key={key} message={message}"
        case InvocationError(message=message):
            return f"InvocationError message={message}"
        case _:
            assert_never(error)


__all__ = [
    "StorageError",
    "InvocationError",
    "EffError",
    "assert_never",
    "describe",
]
