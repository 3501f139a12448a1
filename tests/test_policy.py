"""Tests for the error policy stages."""

from __future__ import annotations

import logging

import pytest

from s3static.diagnostics import LoggingSink
from s3static.errors import EffError, InvocationError, StorageError
from s3static.policy import (
    apply_error_policy,
    is_missing,
    log_error,
    to_terminal_response,
    translate_missing,
)
from s3static.responses import INTERNAL_ERROR, NOT_FOUND, Response
from s3static.result import Failure, Result, Success
from tests.helpers import RaisingSink, RecordingSink

OK = Response(status_code=200, body="hi", headers={"Content-Type": "text/plain", "ETag": '"a"'})
ACCESS_DENIED = StorageError(code="AccessDenied", key="missing.txt/index.html")
NO_SUCH_BUCKET = StorageError(code="NoSuchBucket")
BAD_METADATA = InvocationError(message="Unexpected object metadata")


class TestIsMissing:
    """Tests for the missing-object predicate."""

    def test_access_denied_is_missing(self) -> None:
        assert is_missing(ACCESS_DENIED)

    @pytest.mark.parametrize("code", ["NoSuchKey", "Forbidden", "accessdenied", "InternalError"])
    def test_other_codes_are_not(self, code: str) -> None:
        assert not is_missing(StorageError(code=code))

    def test_invocation_errors_are_not(self) -> None:
        assert not is_missing(InvocationError(message="AccessDenied"))


class TestTranslateMissing:
    """Tests for the 404 translation stage."""

    def test_access_denied_becomes_not_found(self) -> None:
        assert translate_missing(Failure(ACCESS_DENIED)) == Success(NOT_FOUND)

    @pytest.mark.parametrize("error", [NO_SUCH_BUCKET, BAD_METADATA])
    def test_other_errors_pass_through(self, error: EffError) -> None:
        assert translate_missing(Failure(error)) == Failure(error)

    def test_success_passes_through(self) -> None:
        assert translate_missing(Success(OK)) == Success(OK)


class TestLogError:
    """Tests for the logging stage."""

    def test_failure_written_once_and_returned_unchanged(self) -> None:
        sink = RecordingSink()
        result: Result[Response, EffError] = Failure(NO_SUCH_BUCKET)

        assert log_error(result, sink) is result
        assert sink.errors == [NO_SUCH_BUCKET]

    def test_success_not_written(self) -> None:
        sink = RecordingSink()
        log_error(Success(OK), sink)
        assert sink.errors == []

    def test_raising_sink_does_not_alter_result(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = RaisingSink()
        result: Result[Response, EffError] = Failure(BAD_METADATA)

        with caplog.at_level(logging.ERROR, logger="s3static.policy"):
            assert log_error(result, sink) == Failure(BAD_METADATA)

        assert sink.attempts == 1
        assert "Diagnostic sink failed" in caplog.text


class TestTerminalResponse:
    """Tests for the final collapse to a response."""

    def test_success(self) -> None:
        assert to_terminal_response(Success(OK)) == OK

    def test_failure(self) -> None:
        assert to_terminal_response(Failure(BAD_METADATA)) == INTERNAL_ERROR


class TestApplyErrorPolicy:
    """Tests for the composed policy."""

    def test_not_found_path_skips_sink(self) -> None:
        sink = RecordingSink()
        assert apply_error_policy(Failure(ACCESS_DENIED), sink) == NOT_FOUND
        assert sink.errors == []

    @pytest.mark.parametrize("error", [NO_SUCH_BUCKET, BAD_METADATA])
    def test_other_errors_logged_then_500(self, error: EffError) -> None:
        sink = RecordingSink()
        assert apply_error_policy(Failure(error), sink) == INTERNAL_ERROR
        assert sink.errors == [error]

    def test_success_path_skips_sink(self) -> None:
        sink = RecordingSink()
        assert apply_error_policy(Success(OK), sink) == OK
        assert sink.errors == []

    def test_raising_sink_still_yields_500(self) -> None:
        assert apply_error_policy(Failure(NO_SUCH_BUCKET), RaisingSink()) == INTERNAL_ERROR


class TestLoggingSink:
    """Tests for the production sink."""

    def test_logs_error_level_record(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="s3static"):
            LoggingSink().write(NO_SUCH_BUCKET)

        records = [r for r in caplog.records if r.name == "s3static"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert "code=NoSuchBucket" in records[0].getMessage()

    def test_custom_logger_and_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="site.audit"):
            LoggingSink(logger_name="site.audit", level="warning").write(BAD_METADATA)

        records = [r for r in caplog.records if r.name == "site.audit"]
        assert [r.levelno for r in records] == [logging.WARNING]
        assert "InvocationError" in records[0].getMessage()
