"""
Error policy applied at the end of the pipeline.

Three stages, always in this order:

1. ``translate_missing``: a missing object becomes the 404 response.
2. ``log_error``: whatever error survives is written to the diagnostic sink.
3. ``to_terminal_response``: a remaining error becomes the 500 response.
"""

from __future__ import annotations

import logging

from .diagnostics import DiagnosticSink
from .errors import EffError, InvocationError, StorageError, assert_never
from .responses import INTERNAL_ERROR, NOT_FOUND, Response
from .result import Failure, Result, Success


_logger = logging.getLogger(__name__)

# S3 answers GetObject on an absent key with AccessDenied when the caller lacks
# s3:ListBucket, so the code doubles as "not found".
MISSING_OBJECT_CODE = "AccessDenied"


def is_missing(error: EffError) -> bool:
    """True when ``error`` means the requested object does not exist."""
    match error:
        case StorageError(code=code):
            return code == MISSING_OBJECT_CODE
        case InvocationError():
            return False
        case _:
            assert_never(error)


def translate_missing(result: Result[Response, EffError]) -> Result[Response, EffError]:
    """Replace a missing-object failure with the 404 response."""
    match result:
        case Failure(error) if is_missing(error):
            return Success(NOT_FOUND)
        case _:
            return result


def log_error(
    result: Result[Response, EffError], sink: DiagnosticSink
) -> Result[Response, EffError]:
    """Write a failure to ``sink`` and hand back the same result.

    A sink that raises is reported on the module logger; the result is never altered.
    """
    match result:
        case Failure(error):
            try:
                sink.write(error)
            except Exception:
                _logger.exception("Diagnostic sink failed while writing %s", error.kind)
            return result
        case Success(_):
            return result


def to_terminal_response(result: Result[Response, EffError]) -> Response:
    """Collapse the pipeline result into the response sent to the caller."""
    match result:
        case Success(response):
            return response
        case Failure(_):
            return INTERNAL_ERROR


def apply_error_policy(result: Result[Response, EffError], sink: DiagnosticSink) -> Response:
    """Run all three policy stages."""
    return to_terminal_response(log_error(translate_missing(result), sink))
